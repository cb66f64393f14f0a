from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Validation failure kinds surfaced to callers."""

    INVALID_KEY = "invalid_key"
    EMPTY_TEXT = "empty_text"
    INVALID_CIPHER_TEXT = "invalid_cipher_text"
    TEXT_TOO_LONG = "text_too_long"


class CipherError(Exception):
    """Base exception for all cipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherError):
    """Raised when a key or text fails validation."""

    kind: ErrorKind


class InvalidKeyError(ValidationError):
    """Raised when a cipher key is rejected at construction."""

    kind = ErrorKind.INVALID_KEY


class EmptyTextError(ValidationError):
    """Raised when no usable letters are left in the input."""

    kind = ErrorKind.EMPTY_TEXT


class InvalidCipherTextError(ValidationError):
    """Raised when ciphertext contains anything but uppercase alphabet letters."""

    kind = ErrorKind.INVALID_CIPHER_TEXT


class TextTooLongError(ValidationError):
    """Raised when request text exceeds the configured maximum length."""

    kind = ErrorKind.TEXT_TOO_LONG

    def __init__(self, label: str, length: int, max_length: int):
        super().__init__(
            f"{label} exceeds maximum length of {max_length}",
            {"length": length, "max_length": max_length},
        )


class EngineNotFoundError(CipherError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
