import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import get_settings
from app.core.exceptions import CipherError, EngineNotFoundError, ValidationError
from app.core.logging import configure_logging
from app.models.schemas import ErrorResponse

settings = get_settings()
configure_logging(settings)

logger = logging.getLogger(__name__)


async def cipher_error_handler(request: Request, exc: CipherError) -> JSONResponse:
    """Turn cipher errors into ErrorResponse bodies."""
    if isinstance(exc, EngineNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
        error = "engine_not_found"
    elif isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        error = exc.kind.value
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        error = "cipher_error"

    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    body = ErrorResponse(error=error, message=exc.message, details=exc.details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classical Cyrillic cipher API. "
            "Encrypt and decrypt Russian text with the additive (Gronsfeld) "
            "cipher and the table route transposition cipher."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CipherError, cipher_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=host,
        port=port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
