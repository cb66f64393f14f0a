import logging

from fastapi import APIRouter

from app.core.exceptions import TextTooLongError
from app.dependencies import RegistryDep, SettingsDep
from app.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or text"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with the additive or table cipher. Everything outside the Russian alphabet is dropped.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type and key.

    Validation errors raised by the engine are turned into 400 responses
    by the application's exception handler.
    """
    # Validate plaintext length
    if len(request.plaintext) > settings.max_text_length:
        logger.info("Rejected plaintext of length %d", len(request.plaintext))
        raise TextTooLongError("Plaintext", len(request.plaintext), settings.max_text_length)

    engine = registry.create(request.cipher_type, request.key)
    ciphertext = engine.encrypt(request.plaintext)

    return EncryptResponse(
        ciphertext=ciphertext,
        cipher_type=request.cipher_type,
        key_used=engine.key,
        explanation=engine.explain(),
    )
