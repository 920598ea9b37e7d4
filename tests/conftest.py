"""
Shared pytest fixtures for registration backend tests.
"""
import os
from typing import Dict, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError
from pymongo.errors import ServerSelectionTimeoutError
from pymongo.results import InsertOneResult

from registration_backend.core.security import hash_password_async
from registration_backend.domain.exceptions import DuplicateKeyError
from registration_backend.domain.models.user import User
from registration_backend.domain.repositories.user_repository import UserRepository

# Lowest bcrypt cost; keeps hashing fast in unit tests
FAST_ROUNDS = 4


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a dict, unique on email like the Mongo index"""

    def __init__(self, password_hasher=None) -> None:
        super().__init__(password_hasher=password_hasher)
        self.documents: Dict[str, User] = {}
        self.insert_calls = 0

    async def insert(self, user: User) -> User:
        self.insert_calls += 1
        if user.email in self.documents:
            raise DuplicateKeyError(user.email)
        stored = User(
            id=f"{len(self.documents) + 1:024x}",
            name=user.name,
            email=user.email,
            password=user.password,
            version=0,
        )
        self.documents[user.email] = stored
        return stored

    async def find_by_email(self, email: str) -> Optional[User]:
        return self.documents.get(email)


class FakeUserCollection:
    """
    Async stand-in for a Motor collection.

    Unique fields are only enforced after create_index, like a real server;
    reachable=False makes every call fail the way an unreachable server does.
    """

    def __init__(self) -> None:
        self.documents = []
        self.unique_fields = set()
        self.reachable = True

    def _check_reachable(self) -> None:
        if not self.reachable:
            raise ServerSelectionTimeoutError("No servers available")

    async def create_index(self, field, unique=False, name=None):
        self._check_reachable()
        if unique:
            self.unique_fields.add(field)
        return name or f"{field}_1"

    async def insert_one(self, document):
        self._check_reachable()
        for field in self.unique_fields:
            if any(existing.get(field) == document.get(field) for existing in self.documents):
                raise MongoDuplicateKeyError(
                    f"E11000 duplicate key error index: {field}_1", code=11000
                )
        stored = {**document, "_id": ObjectId()}
        self.documents.append(stored)
        return InsertOneResult(stored["_id"], acknowledged=True)

    async def find_one(self, query):
        self._check_reachable()
        for document in self.documents:
            if all(document.get(key) == value for key, value in query.items()):
                return dict(document)
        return None


async def fast_hasher(plain_password):
    return await hash_password_async(plain_password, FAST_ROUNDS)


@pytest.fixture
def make_memory_repo():
    """Factory for in-memory user stores; defaults to cheap bcrypt rounds."""
    def _make(password_hasher=fast_hasher):
        return InMemoryUserRepository(password_hasher=password_hasher)
    return _make


@pytest.fixture
def memory_repo(make_memory_repo):
    """In-memory user store using cheap bcrypt rounds."""
    return make_memory_repo()


@pytest.fixture
def fake_user_collection():
    """Motor-like users collection held in memory."""
    return FakeUserCollection()


@pytest.fixture
def fast_password_hasher():
    """Real bcrypt hashing at the lowest cost."""
    return fast_hasher


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_registration_db",
        "BCRYPT_ROUNDS": "4",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.users_collection_name = "users"
    mock.mongo_server_selection_timeout_ms = 100
    mock.bcrypt_rounds = FAST_ROUNDS
    mock.host = "127.0.0.1"
    mock.port = 3000
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("registration_backend.core.config.get_settings", return_value=mock), patch(
        "registration_backend.core.security.get_settings", return_value=mock
    ), patch(
        "registration_backend.infrastructure.db.mongo_connection.get_settings", return_value=mock
    ):
        yield mock
