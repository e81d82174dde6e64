"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from currency_converter.core.config import Settings
from currency_converter.main import create_app
from currency_converter.services.converter_service import ConversionService
from currency_converter.services.rates.table import get_rate_table


@pytest.fixture
def settings():
    """Settings isolated from the process environment."""
    return Settings(_env_file=None, debug=False)


@pytest.fixture
def app(settings):
    return create_app(settings_override=settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def table():
    return get_rate_table()


@pytest.fixture
def service(table):
    return ConversionService(table)
