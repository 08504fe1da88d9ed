"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry
from mongomock_motor import AsyncMongoMockClient

from postboard.graphql.context import StoreContext
from postboard.hashing import Sha256Hasher


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    """In-memory Motor-compatible client, fresh per test."""
    return AsyncMongoMockClient()


@pytest.fixture
def store(mongo_client: AsyncMongoMockClient) -> StoreContext:
    """Store context over the in-memory client.

    Uses the sha256 hasher so tests stay fast and digests are predictable.
    """
    db = mongo_client["postboard_test"]
    return StoreContext(
        users=db["users"],
        posts=db["posts"],
        comments=db["comments"],
        hasher=Sha256Hasher(),
    )


@pytest.fixture
def mock_info(store: StoreContext) -> Any:
    """Create a mock GraphQL info object carrying the store context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
