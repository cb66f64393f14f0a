from typing import ClassVar, Iterable


class Alphabet:
    """
    Ordered, immutable alphabet with constant-time index lookup.

    Letter to index lookup goes through a fixed-size table addressed by
    the code point offset from the lowest letter, so nothing is built per
    cipher instance. For the Russian alphabet the table spans Ё (U+0401)
    through Я (U+042F); slots between Ё and А hold None.
    """

    LOWER_FIRST: ClassVar[str] = "а"
    LOWER_LAST: ClassVar[str] = "я"
    UPPER_FIRST: ClassVar[str] = "А"

    def __init__(self, letters: str):
        if len(set(letters)) != len(letters):
            raise ValueError("Alphabet letters must be distinct")

        self._letters = letters
        self._base = min(map(ord, letters))
        span = max(map(ord, letters)) - self._base + 1

        table: list[int | None] = [None] * span
        for index, letter in enumerate(letters):
            table[ord(letter) - self._base] = index
        self._table = tuple(table)

    @property
    def letters(self) -> str:
        return self._letters

    def __len__(self) -> int:
        return len(self._letters)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and self.index_of(char) is not None

    def index_of(self, letter: str) -> int | None:
        """Return the index of letter, or None if it is not in the alphabet."""
        offset = ord(letter) - self._base
        if 0 <= offset < len(self._table):
            return self._table[offset]
        return None

    def letter_at(self, index: int) -> str:
        """Return the letter at index."""
        if not 0 <= index < len(self._letters):
            raise IndexError(f"Alphabet index {index} out of range")
        return self._letters[index]

    def encode(self, text: str) -> list[int]:
        """Convert pre-filtered text to alphabet indices."""
        return [self._table[ord(c) - self._base] for c in text]

    def decode(self, indices: Iterable[int]) -> str:
        """Convert alphabet indices back to text."""
        return "".join(self._letters[i] for i in indices)

    @classmethod
    def to_upper(cls, char: str) -> str:
        """
        Upper-case a single character.

        Russian lowercase letters are shifted by the fixed а→А offset;
        ё sits outside that range and is mapped explicitly. Anything else
        falls back to str.upper().
        """
        if cls.LOWER_FIRST <= char <= cls.LOWER_LAST:
            return chr(ord(cls.UPPER_FIRST) + ord(char) - ord(cls.LOWER_FIRST))
        if char == "ё":
            return "Ё"
        return char.upper()

    def fold(self, char: str) -> str | None:
        """Upper-case char and return it if it belongs to the alphabet."""
        upper = self.to_upper(char)
        return upper if upper in self else None


RUSSIAN = Alphabet("АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ")
