# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import PasswordHasher, UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import ConnectivityError, DuplicateKeyError
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(
        self,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        password_hasher: Optional[PasswordHasher] = None,
    ) -> None:
        super().__init__(password_hasher=password_hasher)
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self._indexes_ready = False

    async def ensure_indexes(self) -> None:
        """
        Create the unique index on email

        Called at startup and again before the first insert if startup could
        not reach MongoDB; no document is written until the index exists.

        Raises:
            ConnectivityError: If the index cannot be created
        """
        try:
            await self.user_collection.create_index(
                UserFields.EMAIL,
                unique=True,
                name=UserFields.EMAIL_UNIQUE_INDEX,
            )
        except PyMongoError as e:
            raise ConnectivityError(f"Error creating user indexes: {str(e)}") from e
        self._indexes_ready = True

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise ConnectivityError(f"Error finding user by email: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def insert(self, user: User) -> User:
        """
        Insert a new user document

        Args:
            user: User domain model with the password already hashed

        Returns:
            Stored User domain model with ID and version set

        Raises:
            DuplicateKeyError: If the email is already taken
            ConnectivityError: If MongoDB fails or the email index cannot be created
        """
        if not user:
            raise ValueError("User cannot be None")

        if not self._indexes_ready:
            await self.ensure_indexes()

        user_dict = self._user_to_dict(user)

        try:
            result = await self.user_collection.insert_one(user_dict)

            # Fetch and return the newly created document
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(user.email) from e
        except PyMongoError as e:
            raise ConnectivityError(f"Error saving user: {str(e)}") from e

        if new_document is None:
            raise RuntimeError("User was created but could not be retrieved")

        return self._document_to_user(new_document)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password=document.get(UserFields.PASSWORD, ""),
            version=document.get(UserFields.MONGO_VERSION, 0),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        The _id is left out so MongoDB assigns it on insert.
        """
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.password,
            UserFields.MONGO_VERSION: user.version,
        }
