from abc import ABC, abstractmethod
from typing import Any, ClassVar

from app.core.exceptions import EmptyTextError, InvalidCipherTextError
from app.models.schemas import CipherFamily, CipherType
from app.services.alphabet import RUSSIAN, Alphabet
from app.services.preprocessing.normalizer import NormalizationMode, TextNormalizer


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine is constructed with its key, which is validated once and
    then never changes. Each implementation must provide:
    - parse_key(): Turn an untyped key (JSON, argv) into the constructor argument
    - encrypt(): Encrypt open text
    - decrypt(): Decrypt clean ciphertext
    - explain(): Generate human-readable description of the key
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    alphabet: ClassVar[Alphabet] = RUSSIAN
    normalization_mode: ClassVar[NormalizationMode] = NormalizationMode.STRICT
    empty_text_message: ClassVar[str] = "Empty text, no letters"
    empty_cipher_text_message: ClassVar[str] = "Empty cipher text"
    invalid_cipher_text_message: ClassVar[str] = "Invalid cipher text"

    @classmethod
    @abstractmethod
    def parse_key(cls, raw_key: Any) -> Any:
        """
        Convert a raw key into the form the constructor accepts.

        Args:
            raw_key: Key as received from a request body or command line

        Returns:
            Key suitable for the engine constructor

        Raises:
            InvalidKeyError: If the key cannot be interpreted
        """
        pass

    @property
    @abstractmethod
    def key(self) -> Any:
        """The validated key, in display form."""
        pass

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt open text.

        Args:
            plaintext: Arbitrary text; everything outside the alphabet is dropped

        Returns:
            Ciphertext of uppercase alphabet letters

        Raises:
            EmptyTextError: If no alphabet letters survive normalization
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext.

        Args:
            ciphertext: Text made only of uppercase alphabet letters

        Returns:
            Recovered open text, uppercase letters only

        Raises:
            EmptyTextError: If ciphertext is empty
            InvalidCipherTextError: If ciphertext contains any other character
        """
        pass

    @abstractmethod
    def explain(self) -> str:
        """
        Generate human-readable explanation of the key.

        Returns:
            Explanation string
        """
        pass

    def _valid_open_text(self, text: str) -> str:
        """Normalize open text, failing if nothing is left."""
        normalized = TextNormalizer(self.alphabet).normalize(text, self.normalization_mode)
        if not normalized:
            raise EmptyTextError(self.empty_text_message)
        return normalized

    def _valid_cipher_text(self, text: str) -> str:
        """Check ciphertext without filtering it."""
        if not text:
            raise EmptyTextError(self.empty_cipher_text_message)
        if not TextNormalizer(self.alphabet).is_clean(text):
            raise InvalidCipherTextError(
                self.invalid_cipher_text_message,
                {"length": len(text)},
            )
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"
