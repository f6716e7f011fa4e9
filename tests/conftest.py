import pytest
from django.core.cache import cache
from django.test import Client

from tests.factories import UserFactory


@pytest.fixture(autouse=True)
def dashboard_settings(settings):
    # Worker threads would open their own connections outside the test transaction.
    settings.DASHBOARD_PARALLEL_QUERIES = False
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def client():
    return Client()


@pytest.fixture
def user(db):
    return UserFactory(username="testuser", email="test@example.com")


@pytest.fixture
def authenticated_client(client, user):
    client.force_login(user)
    return client
