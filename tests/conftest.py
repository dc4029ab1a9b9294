from __future__ import annotations

from datetime import datetime

import pytest

from worktrack.container import build_container
from worktrack.main import create_app
from worktrack.storage.memory import InMemoryStorage


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 10, 9, 0, 0)


@pytest.fixture
def container():
    return build_container(
        storage_backend="memory",
        durable_session=InMemoryStorage(),
        ephemeral_session=InMemoryStorage(),
    )


@pytest.fixture
def app():
    return create_app("worktrack.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
