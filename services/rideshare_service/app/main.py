"""FastAPI application for the Rideshare Service."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from libs.common.config import get_settings
from libs.common.error_handler import add_exception_handlers
from libs.common.logging import get_logger
from libs.common.middleware import add_observability_middleware
from libs.storage.stores import initialize_stores
from services.rideshare_service.router import router as rideshare_router
from services.rideshare_service.schemas import HealthResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    initialize_stores()
    logger.info("Data files initialized")
    yield


def create_app() -> FastAPI:
    """Create and configure the Rideshare Service FastAPI app."""
    settings = get_settings()

    app = FastAPI(
        title="Rideshare Service",
        version="0.1.0",
        description="Stores rider and passenger offers and finds matching trips.",
        lifespan=lifespan,
    )

    # Added first so CORSMiddleware wraps it, error responses included.
    add_observability_middleware(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    @app.get("/api/health", tags=["system"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="ok", message="Server is running")

    app.include_router(rideshare_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
