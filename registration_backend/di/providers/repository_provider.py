from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        user_collection = container.get("user_collection")

        # Domain interface -> Infrastructure implementation
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=user_collection)
        )
