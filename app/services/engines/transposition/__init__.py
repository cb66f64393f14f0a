"""Transposition cipher engines."""

from app.services.engines.transposition.table import TableEngine

__all__ = [
    "TableEngine",
]
