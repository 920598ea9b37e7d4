# Standard library imports
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_STREAM_HANDLER_ATTR = "_is_registration_stream_handler"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once for the process.

    Installs a single stream handler on the root logger. Calling it again
    only updates the level, so repeated app creation (tests) does not stack
    handlers.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(getattr(handler, _STREAM_HANDLER_ATTR, False) for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _STREAM_HANDLER_ATTR, True)
    root.addHandler(handler)
