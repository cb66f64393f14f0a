from fastapi import APIRouter

from app.dependencies import RegistryDep
from app.models.schemas import CipherInfo

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the registered cipher engines.",
)
async def list_ciphers(registry: RegistryDep) -> list[CipherInfo]:
    """Describe every registered cipher."""
    infos = []
    for cipher_type in registry.list_registered():
        engine_class = registry.get_engine_class(cipher_type)
        infos.append(CipherInfo(
            cipher_type=engine_class.cipher_type,
            name=engine_class.name,
            family=engine_class.cipher_family,
            description=engine_class.description,
        ))
    return infos
