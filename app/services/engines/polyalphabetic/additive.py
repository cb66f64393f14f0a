import logging
import unicodedata
from typing import Any, ClassVar

from app.core.exceptions import InvalidKeyError
from app.models.schemas import CipherFamily, CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry
from app.services.preprocessing.normalizer import NormalizationMode

logger = logging.getLogger(__name__)


@EngineRegistry.register
class AdditiveEngine(CipherEngine):
    """
    Additive (Gronsfeld) cipher engine.

    A polyalphabetic substitution cipher over the 33-letter Russian
    alphabet. Each letter of the keyword gives a shift equal to its
    alphabet position, applied in sequence and repeated:

        c[i] = (p[i] + k[i mod len(k)]) mod 33

    Example with keyword "МИР" (М=13, И=9, Р=17):

        ААААА -> МИРМИ
    """

    name = "Additive Cipher"
    cipher_type = CipherType.ADDITIVE
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter's alphabet index is increased "
        "by the index of the matching letter of a repeating keyword, modulo the "
        "alphabet size. Decryption subtracts the same shifts."
    )

    normalization_mode: ClassVar[NormalizationMode] = NormalizationMode.ALPHABETIC
    empty_text_message: ClassVar[str] = "Empty text, no letters"
    invalid_cipher_text_message: ClassVar[str] = "Incorrect data entry"

    def __init__(self, key: str):
        self._word = self._valid_key(key)
        self._shifts = tuple(self.alphabet.encode(self._word))
        logger.debug("Additive cipher keyed with %d letter(s)", len(self._shifts))

    @classmethod
    def parse_key(cls, raw_key: Any) -> str:
        """Accept a keyword; numbers are passed on as text and rejected later."""
        if isinstance(raw_key, bool) or not isinstance(raw_key, (str, int)):
            raise InvalidKeyError("Invalid key: must be a word", {"key_type": type(raw_key).__name__})
        return str(raw_key)

    @property
    def key(self) -> str:
        return self._word

    @property
    def shifts(self) -> tuple[int, ...]:
        """Key as alphabet indices."""
        return self._shifts

    def encrypt(self, plaintext: str) -> str:
        """Encrypt using the repeating keyword shifts."""
        work = self.alphabet.encode(self._valid_open_text(plaintext))
        size = len(self.alphabet)
        period = len(self._shifts)

        for i, index in enumerate(work):
            work[i] = (index + self._shifts[i % period]) % size

        return self.alphabet.decode(work)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt by subtracting the repeating keyword shifts."""
        work = self.alphabet.encode(self._valid_cipher_text(ciphertext))
        size = len(self.alphabet)
        period = len(self._shifts)

        for i, index in enumerate(work):
            work[i] = (index - self._shifts[i % period] + size) % size

        return self.alphabet.decode(work)

    def explain(self) -> str:
        """Generate human-readable explanation."""
        shift_desc = ", ".join(f"{letter}={shift}" for letter, shift in zip(self._word, self._shifts))

        return (
            f"Additive cipher with keyword '{self._word}' (length {len(self._word)}). "
            f"Letter shifts: {shift_desc}. "
            f"Each letter is moved forward by the corresponding key letter's position "
            f"in the {len(self.alphabet)}-letter alphabet, wrapping around at the end."
        )

    def _valid_key(self, key: str) -> str:
        """Compose and upper-case the keyword, rejecting anything outside the alphabet."""
        if not isinstance(key, str):
            raise InvalidKeyError("Invalid key: must be a word", {"key_type": type(key).__name__})
        if not key:
            raise InvalidKeyError("Empty key")

        letters = []
        for position, char in enumerate(unicodedata.normalize("NFKC", key)):
            folded = self.alphabet.fold(char) if char.isalpha() else None
            if folded is None:
                raise InvalidKeyError(
                    "Invalid key: non-alphabetic character",
                    {"position": position},
                )
            letters.append(folded)

        return "".join(letters)
