"""FastAPI application for the vocabdeck API."""

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette import status

from vocabdeck.config import configure_logging, get_settings
from vocabdeck.domain.common.exceptions import DomainError, EntityNotFoundError
from vocabdeck.exceptions import VocabdeckError
from vocabdeck.infrastructure.learning.routers import (
    cards_router,
    training_router,
    units_router,
)

logger = structlog.get_logger(__name__)


def create_app() -> FastAPI:
    """Build the application with its middleware, error handlers and routers."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        redoc_url=f"{settings.API_V1_PREFIX}/redoc",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(VocabdeckError)
    async def vocabdeck_error_handler(request: Request, exc: VocabdeckError) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("request_failed", path=request.url.path, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(EntityNotFoundError)
    async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message}
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message}
        )

    app.include_router(cards_router, prefix=settings.API_V1_PREFIX)
    app.include_router(training_router, prefix=settings.API_V1_PREFIX)
    app.include_router(units_router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    @app.get(f"{settings.API_V1_PREFIX}/")
    def api_root() -> dict[str, str]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run("vocabdeck.main:app", host="0.0.0.0", port=8000)
