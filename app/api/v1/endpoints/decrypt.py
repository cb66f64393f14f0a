import logging

from fastapi import APIRouter

from app.core.exceptions import TextTooLongError
from app.dependencies import RegistryDep, SettingsDep
from app.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or ciphertext"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext with a known key. The ciphertext must consist only of uppercase Russian letters.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a specified cipher type and key.

    Ciphertext is not normalized: lowercase letters, spaces or digits
    mean it was corrupted and the request is rejected.
    """
    # Validate ciphertext length
    if len(request.ciphertext) > settings.max_text_length:
        logger.info("Rejected ciphertext of length %d", len(request.ciphertext))
        raise TextTooLongError("Ciphertext", len(request.ciphertext), settings.max_text_length)

    engine = registry.create(request.cipher_type, request.key)
    plaintext = engine.decrypt(request.ciphertext)

    return DecryptResponse(
        plaintext=plaintext,
        cipher_type=request.cipher_type,
        key_used=engine.key,
        explanation=engine.explain(),
    )
