from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.registration.register_user import RegisterUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RegistrationProvider:
    """Registration use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register registration use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
