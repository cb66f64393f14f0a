"""Polyalphabetic cipher engines."""

from app.services.engines.polyalphabetic.additive import AdditiveEngine

__all__ = [
    "AdditiveEngine",
]
