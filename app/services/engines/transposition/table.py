import logging
import re
from typing import Any, ClassVar

from app.core.exceptions import InvalidKeyError
from app.models.schemas import CipherFamily, CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry
from app.services.preprocessing.normalizer import NormalizationMode

logger = logging.getLogger(__name__)


@EngineRegistry.register
class TableEngine(CipherEngine):
    """
    Table route transposition cipher engine.

    The text is written into a grid row by row, then the columns are
    read out from right to left, each from top to bottom. Cells past the
    end of the text are left empty and never emitted, so no padding
    appears in the ciphertext.

    Example with 3 columns:

            П Р И
            В Е Т
            М И Р
            ─────
    Read:   col 2 = ИТР, col 1 = РЕИ, col 0 = ПВМ  ->  ИТРРЕИПВМ

    With a ragged last row the rightmost columns are one cell short,
    which decryption accounts for explicitly.
    """

    name = "Table Route Transposition"
    cipher_type = CipherType.TABLE
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher where text is written into a table of fixed width "
        "row by row and read out column by column, starting from the rightmost column."
    )

    MAX_COLUMNS: ClassVar[int] = 100
    KEY_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[+-]?\d+")

    normalization_mode: ClassVar[NormalizationMode] = NormalizationMode.STRICT
    empty_text_message: ClassVar[str] = "Empty text: no valid Russian letters"
    invalid_cipher_text_message: ClassVar[str] = "Invalid cipher text"

    def __init__(self, cols: int):
        self._cols = self._valid_key(cols)
        logger.debug("Table cipher keyed with %d column(s)", self._cols)

    @classmethod
    def parse_key(cls, raw_key: Any) -> int:
        """Accept an integer or a decimal string."""
        if isinstance(raw_key, int) and not isinstance(raw_key, bool):
            return raw_key
        if isinstance(raw_key, str) and cls.KEY_PATTERN.fullmatch(raw_key.strip()):
            digits = raw_key.strip()
            try:
                return int(digits)
            except ValueError:
                # Longer than the interpreter will convert
                if digits.startswith("-"):
                    raise InvalidKeyError("Invalid key: must be a positive integer") from None
                raise InvalidKeyError("Invalid key: too large", {"max_columns": cls.MAX_COLUMNS}) from None
        raise InvalidKeyError("Invalid key: must be an integer", {"key": str(raw_key)})

    @property
    def key(self) -> int:
        return self._cols

    @property
    def cols(self) -> int:
        return self._cols

    def encrypt(self, plaintext: str) -> str:
        """Write rows, read columns right to left."""
        text = self._valid_open_text(plaintext)
        cols = self._cols
        rows = self._rows_for(len(text))

        grid: list[str | None] = [None] * (rows * cols)
        grid[:len(text)] = text

        result = []
        for col in range(cols - 1, -1, -1):
            for row in range(rows):
                cell = grid[row * cols + col]
                if cell is not None:
                    result.append(cell)

        return "".join(result)

    def decrypt(self, ciphertext: str) -> str:
        """Refill columns right to left, read rows."""
        text = self._valid_cipher_text(ciphertext)
        n = len(text)
        cols = self._cols
        rows = self._rows_for(n)

        # Columns at or past full_cols stop one row short
        full_cols = n % cols or cols

        grid: list[str | None] = [None] * (rows * cols)
        stream = iter(text)
        for col in range(cols - 1, -1, -1):
            rows_in_col = rows if col < full_cols else rows - 1
            for row in range(rows_in_col):
                grid[row * cols + col] = next(stream)

        return "".join(cell for cell in grid if cell is not None)

    def explain(self) -> str:
        """Generate human-readable explanation."""
        return (
            f"Table route transposition with {self._cols} column(s). "
            f"The text was written into the table row by row, then the columns were "
            f"read from right to left, each from top to bottom. Decryption refills "
            f"the columns in the same order and reads the rows back."
        )

    def _rows_for(self, length: int) -> int:
        return (length + self._cols - 1) // self._cols

    def _valid_key(self, cols: int) -> int:
        """Check the column count is an integer in [1, MAX_COLUMNS]."""
        if isinstance(cols, bool) or not isinstance(cols, int):
            raise InvalidKeyError("Invalid key: must be an integer", {"key": str(cols)})
        if cols <= 0:
            raise InvalidKeyError("Invalid key: must be a positive integer", {"key": cols})
        if cols > self.MAX_COLUMNS:
            raise InvalidKeyError(
                "Invalid key: too large",
                {"key": cols, "max_columns": self.MAX_COLUMNS},
            )
        return cols
