from typing import Any, Type

from app.core.exceptions import EngineNotFoundError
from app.models.schemas import CipherFamily, CipherType
from app.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Engines are keyed, so the registry stores classes and builds a fresh
    instance per key instead of caching instances.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class AdditiveEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine_class(self, cipher_type: CipherType) -> Type[CipherEngine]:
        """
        Get the engine class for the specified cipher type.

        Raises:
            EngineNotFoundError: If nothing is registered for cipher_type
        """
        try:
            return self._engines[CipherType(cipher_type)]
        except (KeyError, ValueError):
            raise EngineNotFoundError(str(cipher_type)) from None

    def create(self, cipher_type: CipherType, raw_key: Any) -> CipherEngine:
        """
        Build an engine for cipher_type keyed with raw_key.

        Args:
            cipher_type: The type of cipher
            raw_key: Untyped key, parsed by the engine class

        Returns:
            Keyed engine instance

        Raises:
            EngineNotFoundError: If the cipher type is unknown
            InvalidKeyError: If the key is rejected
        """
        engine_class = self.get_engine_class(cipher_type)
        return engine_class(engine_class.parse_key(raw_key))

    def get_classes_by_family(self, family: CipherFamily) -> list[Type[CipherEngine]]:
        """Get all engine classes belonging to a cipher family."""
        return [
            engine_class
            for engine_class in self._engines.values()
            if engine_class.cipher_family == family
        ]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from app.services.engines.polyalphabetic import additive  # noqa: F401
    from app.services.engines.transposition import table  # noqa: F401


# Load engines when module is imported
_load_engines()
