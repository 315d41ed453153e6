"""Shared pytest fixtures for the Kasir API tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from kasir_api.app.core.config import STORAGE_DATABASE, STORAGE_MEMORY, Settings
from kasir_api.app.core.db import init_db
from kasir_api.app.main import create_app


def make_settings(**overrides) -> Settings:
    values = {
        "storage_backend": STORAGE_MEMORY,
        "db_conn": "",
        "db_required": False,
        "log_level": "WARNING",
        "log_file": "",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def db_path(tmp_path) -> str:
    """A freshly migrated SQLite database file."""
    return init_db(str(tmp_path / "kasir.db"))


@pytest.fixture
def memory_client() -> Iterator[TestClient]:
    app = create_app(make_settings())
    with TestClient(app) as client:
        yield client


@pytest.fixture
def database_client(tmp_path) -> Iterator[TestClient]:
    settings = make_settings(
        storage_backend=STORAGE_DATABASE,
        db_conn=f"sqlite:///{tmp_path / 'api.db'}",
    )
    app = create_app(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def degraded_client(tmp_path) -> Iterator[TestClient]:
    # A database inside a directory that does not exist cannot be opened.
    settings = make_settings(
        storage_backend=STORAGE_DATABASE,
        db_conn=str(tmp_path / "missing" / "kasir.db"),
    )
    app = create_app(settings)
    with TestClient(app) as client:
        yield client
