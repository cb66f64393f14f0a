import unicodedata
from dataclasses import dataclass
from enum import Enum

from app.services.alphabet import RUSSIAN, Alphabet


class NormalizationMode(str, Enum):
    """Text normalization modes."""

    ALPHABETIC = "alphabetic"  # Any letter passes the filter, then off-alphabet letters drop
    STRICT = "strict"  # Only alphabet letters (either case) pass the filter


@dataclass(frozen=True)
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    removed_chars: dict[str, int]
    mode: NormalizationMode


class TextNormalizer:
    """
    Normalizes open text before encryption.

    Handles:
    - Unicode normalization (NFKC), so decomposed й and ё compose first
    - Case folding through the alphabet's own upper-casing
    - Removal of everything outside the alphabet

    The two modes differ only in where letters outside the alphabet are
    dropped. Every character the alphabet accepts is itself isalpha(),
    so ALPHABETIC and STRICT produce the same text for any input.
    """

    def __init__(self, alphabet: Alphabet = RUSSIAN):
        self.alphabet = alphabet

    def normalize(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.STRICT,
    ) -> str:
        """
        Normalize text to uppercase alphabet letters.

        Args:
            text: Input text to normalize
            mode: Normalization mode

        Returns:
            Normalized text string (may be empty)
        """
        return self.normalize_full(text, mode).text

    def normalize_full(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.STRICT,
    ) -> NormalizedText:
        """
        Normalize text and return detailed result.

        Args:
            text: Input text to normalize
            mode: Normalization mode

        Returns:
            NormalizedText with details about the normalization
        """
        removed_chars: dict[str, int] = {}
        composed = unicodedata.normalize("NFKC", text)

        result = []
        for char in composed:
            if mode == NormalizationMode.ALPHABETIC and not char.isalpha():
                folded = None
            else:
                folded = self.alphabet.fold(char)

            if folded is None:
                removed_chars[char] = removed_chars.get(char, 0) + 1
            else:
                result.append(folded)

        return NormalizedText(
            text="".join(result),
            original=text,
            removed_chars=removed_chars,
            mode=mode,
        )

    def is_clean(self, text: str) -> bool:
        """Check that text consists only of uppercase alphabet letters."""
        return all(c in self.alphabet for c in text)
