# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.registration_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Validation, hashing and the unique-email check all happen inside the
        repository's create(), so any of its errors propagate unchanged.

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with the stored user, hashed password included
        """
        saved_user = await self.user_repository.create(request.to_input())
        logger.info(f"Saved user: {saved_user}")
        return UserResponse.from_user(saved_user)
