# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api import registration_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container, reset_container
from .domain.exceptions import ConnectivityError
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import connect_to_mongo, close_mongo_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Connects to MongoDB and creates the unique email index. Failures are
    logged and the server keeps starting; the repository creates the index
    before its first insert, so registrations fail with the generic error
    until the store is reachable and indexed.
    """
    try:
        await connect_to_mongo()
    except ConnectivityError as e:
        logger.error(f"Error connecting to MongoDB: {e}", exc_info=True)
    else:
        logger.info("Connected to MongoDB")
        try:
            user_repository = get_container().get(UserRepository)
            await user_repository.ensure_indexes()
        except ConnectivityError as e:
            logger.error(f"Error creating MongoDB indexes: {e}", exc_info=True)

    yield

    close_mongo_connection()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    configure_logging(get_settings().log_level)

    application = FastAPI(
        title="User Registration API",
        version="1.0.0",
        description="Registers users with bcrypt-hashed passwords in MongoDB",
        lifespan=lifespan
    )

    application.include_router(registration_router)

    return application


# Create application instance
app = create_application()
