"""Pytest fixtures for the payment server tests."""

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.utils.config_loader import PaymentServerConfig

from tests.fakes import StubProvider


@pytest.fixture
def config(tmp_path):
    return PaymentServerConfig(
        stripe_secret_key="sk_test_123",
        stripe_publishable_key="pk_test_123",
        static_dir=tmp_path / "public",
    )


@pytest.fixture
def stub_provider():
    return StubProvider()


@pytest.fixture
def client(config, stub_provider):
    with TestClient(create_app(config, payment_client=stub_provider)) as c:
        yield c
