# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.v1 import users_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .infrastructure.db.mongo_connection import close_connection, ensure_user_indexes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the unique indexes exist when MongoDB backs the user store and
    closes the MongoDB client on shutdown.
    """
    settings = get_settings()

    if settings.user_store == "mongo":
        try:
            await ensure_user_indexes()
        except Exception as e:
            # Writes are still rejected by any index that already exists
            logger.error(f"Failed to ensure user indexes: {e}", exc_info=True)

    logger.info("Application startup complete")

    yield

    close_connection()
    logger.info("Application shutdown complete")


async def handle_infrastructure_error(request: Request, exception: RuntimeError) -> JSONResponse:
    """Log store failures and answer 500 without leaking driver details"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exception}", exc_info=exception)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="User Service API",
        version="1.0",
        description="API para la gestión de usuarios de EcoMarket",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(RuntimeError, handle_infrastructure_error)

    application.include_router(users_router, prefix="/api/users")

    return application


# Create application instance
app = create_application()
