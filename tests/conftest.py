"""Shared pytest fixtures for all tests."""

import pytest

from cli.config import Config
from cli.session import RegistrySession
from registry.services import FileRegistry
from registry.store import MemoryRecordStore, SqliteRecordStore

ALICE = "alice"


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Returns:
        Path to temporary .file-registry directory
    """
    config_dir = tmp_path / '.file-registry'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance pointing at a temporary database.
    """
    config = Config(temp_config_dir / 'config.json')
    config.data['database_path'] = str(temp_config_dir / 'registry.db')
    config.data['identity'] = ALICE
    return config


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "registry.db")


@pytest.fixture
def sqlite_store(db_path):
    store = SqliteRecordStore(db_path)
    yield store
    store.close()


@pytest.fixture
def memory_store():
    return MemoryRecordStore()


@pytest.fixture(params=["memory", "sqlite"])
def store(request, db_path):
    """
    Every record store implementation.
    """
    if request.param == "memory":
        yield MemoryRecordStore()
    else:
        store = SqliteRecordStore(db_path)
        yield store
        store.close()


@pytest.fixture
def registry(store):
    return FileRegistry(store)


@pytest.fixture
def session(temp_config, memory_store):
    return RegistrySession(temp_config, store=memory_store)
