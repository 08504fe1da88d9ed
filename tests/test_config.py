"""
Tests for settings and store context wiring
"""

import os
from unittest.mock import patch

import pytest

from postboard.config import Settings, settings
from postboard.database.connection import (
    build_store_context,
    init_database,
    reset_database,
    test_database_connection as ping_database,
)
from postboard.hashing import ScryptHasher, Sha256Hasher, get_hasher


def test_settings_read_prefixed_environment():
    os.environ["POSTBOARD_MONGO_DATABASE"] = "elsewhere"
    os.environ["POSTBOARD_PASSWORD_HASHER"] = "sha256"

    settings = Settings()

    assert settings.mongo_database == "elsewhere"
    assert settings.password_hasher == "sha256"


def test_settings_defaults():
    settings = Settings(_env_file=None)

    assert settings.users_collection == "users"
    assert settings.posts_collection == "posts"
    assert settings.comments_collection == "comments"


class TestStoreContext:
    @pytest.fixture(autouse=True)
    def wired(self, mongo_client):
        init_database(client=mongo_client, database_name="ctx", force_reinit=True)
        yield
        reset_database()

    def test_build_store_context_uses_configured_collections(self):
        store = build_store_context()

        assert store.users.name == "users"
        assert store.posts.name == "posts"
        assert store.comments.name == "comments"
        assert isinstance(store.hasher, ScryptHasher)

    def test_each_request_gets_its_own_context(self):
        assert build_store_context() is not build_store_context()

    def test_explicit_hasher(self):
        hasher = Sha256Hasher()
        assert build_store_context(hasher=hasher).hasher is hasher

    def test_hasher_is_shared_across_requests(self):
        assert build_store_context().hasher is build_store_context().hasher

    def test_hasher_built_once_at_init(self, mongo_client, monkeypatch):
        monkeypatch.setattr(settings, "password_hasher", "sha256")

        with patch("postboard.database.connection.get_hasher", wraps=get_hasher) as factory:
            init_database(client=mongo_client, database_name="ctx", force_reinit=True)
            contexts = [build_store_context() for _ in range(3)]

        assert factory.call_count == 1
        assert all(isinstance(ctx.hasher, Sha256Hasher) for ctx in contexts)


@pytest.mark.asyncio
async def test_ping_without_client():
    reset_database()

    success, error = await ping_database()

    assert success is False
    assert error == "Database client not initialized"


def test_settings_use_prefixed_model_config():
    assert Settings.model_config["env_prefix"] == "POSTBOARD_"
    assert Settings.model_config["case_sensitive"] is False
