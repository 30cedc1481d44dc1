"""Pytest fixtures shared across the test modules."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from registry.core.config import Settings
from registry.db.store import PersonStore
from registry.main import create_app


NOW = datetime(2024, 2, 3, 4, 5, 6, tzinfo=timezone.utc)


@pytest.fixture
def now():
  return NOW


@pytest.fixture
def store():
  return PersonStore.seeded()


@pytest.fixture
def context(store, now):
  return {"store": store, "clock": lambda: now}


@pytest.fixture
def config():
  return Settings()


@pytest.fixture
def client(config, store, now):
  app = create_app(config, store=store, clock=lambda: now)

  with TestClient(app) as client:
    yield client
