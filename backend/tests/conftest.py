from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from companies_api.core.config import Settings
from companies_api.crud.companies import CompanyRegistry
from companies_api.main import create_app


@pytest.fixture
def settings() -> Settings:
    # ignore any local .env so tests see the defaults
    return Settings(_env_file=None, RESET_ENABLED=False)


@pytest.fixture
def registry() -> CompanyRegistry:
    return CompanyRegistry()


@pytest.fixture
def app(settings, registry):
    return create_app(settings, registry)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
