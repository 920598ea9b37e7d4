from abc import ABC, abstractmethod
from typing import Awaitable, Callable, List, Optional

from ..constants import UserFields
from ..exceptions import ValidationError
from ..models.user import User, UserInput
from ...core.security import hash_password_async

PasswordHasher = Callable[[str], Awaitable[str]]


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.

    create() owns the write path shared by every store: check required
    fields, hash the password once, then hand the finished User to insert().
    Concrete stores only implement insert() and find_by_email().
    """

    def __init__(self, password_hasher: Optional[PasswordHasher] = None) -> None:
        self.password_hasher = password_hasher or hash_password_async

    async def create(self, candidate: UserInput) -> User:
        """
        Validate, hash and persist a new user

        Args:
            candidate: Registration input carrying the plain password

        Returns:
            Stored User with id and version set and the password digest

        Raises:
            ValidationError: If name, email or password is missing
            HashingError: If the password cannot be hashed
            DuplicateKeyError: If the email is already registered
            ConnectivityError: If the store cannot be reached
        """
        missing = self._missing_fields(candidate)
        if missing:
            raise ValidationError(missing)

        digest = await self.password_hasher(candidate.plain_password)

        return await self.insert(
            User(
                id=None,  # Will be set by the store
                name=candidate.name,
                email=candidate.email,
                password=digest,
            )
        )

    @staticmethod
    def _missing_fields(candidate: UserInput) -> List[str]:
        values = {
            UserFields.NAME: candidate.name,
            UserFields.EMAIL: candidate.email,
            UserFields.PASSWORD: candidate.plain_password,
        }
        missing = []
        for field in UserFields.REQUIRED:
            value = values[field]
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(field)
        return missing

    async def ensure_indexes(self) -> None:
        """Create store-side indexes; stores that enforce uniqueness otherwise need nothing"""
        return None

    @abstractmethod
    async def insert(self, user: User) -> User:
        """Insert an already-hashed user and return it with id and version set"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
