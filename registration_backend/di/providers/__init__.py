from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .registration_provider import RegistrationProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "RegistrationProvider",
]
