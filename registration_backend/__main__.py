"""Run the registration server: python -m registration_backend"""
# Standard library imports
import logging

# External package imports
import uvicorn

# Local application imports
from .main import app
from .core.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logger.info(f"Server is running at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
