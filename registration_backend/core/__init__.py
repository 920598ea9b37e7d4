from .config import Settings, get_settings, reset_settings
from .logging_config import configure_logging
from .security import (
    hash_password,
    hash_password_async,
    verify_password,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "hash_password",
    "hash_password_async",
    "verify_password",
]
