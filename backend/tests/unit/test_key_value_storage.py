"""Unit tests for the key-value storage backends."""

import pytest

from prms.application.services.session_store import SessionStore
from prms.domain.entities import UserRole
from prms.infrastructure.database import build_engine
from prms.infrastructure.storage import InMemoryKeyValueStore, SQLAlchemyKeyValueStore

CREDENTIALS = {"admin": ("772012", UserRole.ADMIN)}


@pytest.fixture
def sql_store():
    engine = build_engine("sqlite://")
    yield SQLAlchemyKeyValueStore(engine)
    engine.dispose()


def test_in_memory_store_basic_operations():
    store = InMemoryKeyValueStore({"theme": "dark"})

    store.set("isAuth", "true")
    store.remove("missing")

    assert store.get("theme") == "dark"
    assert sorted(store.keys()) == ["isAuth", "theme"]
    store.remove("theme")
    assert store.get("theme") is None


def test_sql_store_set_overwrites(sql_store):
    sql_store.set("theme", "light")
    sql_store.set("theme", "dark")

    assert sql_store.get("theme") == "dark"
    assert sql_store.keys() == ["theme"]


def test_sql_store_remove(sql_store):
    sql_store.set("username", "admin")
    sql_store.remove("username")
    sql_store.remove("username")

    assert sql_store.get("username") is None
    assert sql_store.keys() == []


def test_session_persists_across_engines(tmp_path):
    url = f"sqlite:///{tmp_path / 'nested' / 'prms.db'}"

    engine = build_engine(url)
    SessionStore(SQLAlchemyKeyValueStore(engine), CREDENTIALS).login("admin", "772012")
    engine.dispose()

    engine = build_engine(url)
    restored = SessionStore(SQLAlchemyKeyValueStore(engine), CREDENTIALS)
    engine.dispose()

    assert restored.is_authenticated is True
    assert restored.role is UserRole.ADMIN
    assert restored.username == "admin"
