"""
Authentication Tests
Sign-in through the credentials provider, error mapping and the login views.
"""
from unittest.mock import patch

import pytest
from django.contrib.auth import SESSION_KEY
from django.db import DatabaseError
from django.test import RequestFactory
from django.urls import reverse

from invoices.auth_services import (
    GENERIC_FAILURE_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    AuthErrorKind,
    AuthenticationError,
    AuthService,
)
from invoices.backends import EmailBackend
from tests.factories import UserFactory


@pytest.fixture
def auth_request(client):
    request = RequestFactory().post("/login/")
    request.session = client.session
    return request


@pytest.mark.django_db
class TestEmailBackend:
    def test_authenticates_by_email(self, user):
        assert EmailBackend().authenticate(None, email="TEST@example.com", password="secret123") == user

    def test_wrong_password(self, user):
        assert EmailBackend().authenticate(None, email="test@example.com", password="wrong-password") is None

    def test_unknown_email(self):
        assert EmailBackend().authenticate(None, email="ghost@example.com", password="secret123") is None

    def test_inactive_user(self):
        UserFactory(username="sleepy", email="sleepy@example.com", is_active=False)
        assert EmailBackend().authenticate(None, email="sleepy@example.com", password="secret123") is None


@pytest.mark.django_db
class TestSignIn:
    def test_valid_credentials_log_in(self, user, auth_request):
        signed_in = AuthService.sign_in(
            auth_request, "credentials", {"email": "test@example.com", "password": "secret123"}
        )
        assert signed_in == user
        assert auth_request.session[SESSION_KEY] == str(user.pk)

    def test_wrong_password_is_credentials_error(self, user, auth_request):
        with pytest.raises(AuthenticationError) as exc_info:
            AuthService.sign_in(auth_request, "credentials", {"email": "test@example.com", "password": "nope-nope"})
        assert exc_info.value.kind == AuthErrorKind.CREDENTIALS_SIGNIN

    def test_malformed_credentials_are_credentials_error(self, auth_request):
        with pytest.raises(AuthenticationError) as exc_info:
            AuthService.sign_in(auth_request, "credentials", {"email": "bad", "password": "1"})
        assert exc_info.value.kind == AuthErrorKind.CREDENTIALS_SIGNIN

    def test_unknown_provider_is_other_error(self, auth_request):
        with pytest.raises(AuthenticationError) as exc_info:
            AuthService.sign_in(auth_request, "github", {})
        assert exc_info.value.kind == AuthErrorKind.OTHER


@pytest.mark.django_db
class TestAuthenticate:
    def test_success_returns_none(self, user, auth_request):
        assert AuthService.authenticate(auth_request, {"email": "test@example.com", "password": "secret123"}) is None

    def test_bad_credentials_message(self, user, auth_request):
        message = AuthService.authenticate(auth_request, {"email": "test@example.com", "password": "wrong-one"})
        assert message == INVALID_CREDENTIALS_MESSAGE == "Invalid credentials."

    def test_backend_failure_message(self, auth_request):
        with patch("invoices.auth_services.django_authenticate", side_effect=DatabaseError("down")):
            message = AuthService.authenticate(auth_request, {"email": "test@example.com", "password": "secret123"})
        assert message == GENERIC_FAILURE_MESSAGE == "Something went wrong."


@pytest.mark.django_db
class TestLoginViews:
    def test_login_page(self, client):
        response = client.get(reverse("invoices:login"))
        assert response.status_code == 200
        assert response.json()["fields"] == ["email", "password"]

    def test_login_redirects_to_dashboard(self, client, user):
        response = client.post(reverse("invoices:login"), {"email": "test@example.com", "password": "secret123"})
        assert response.status_code == 302
        assert response.url == "/dashboard/"

    def test_login_honours_safe_next(self, client, user):
        response = client.post(
            reverse("invoices:login") + "?next=/dashboard/customers/",
            {"email": "test@example.com", "password": "secret123"},
        )
        assert response.url == "/dashboard/customers/"

    def test_login_ignores_external_next(self, client, user):
        response = client.post(
            reverse("invoices:login") + "?next=https://evil.example.com/",
            {"email": "test@example.com", "password": "secret123"},
        )
        assert response.url == "/dashboard/"

    def test_login_failure_message(self, client, user):
        response = client.post(reverse("invoices:login"), {"email": "test@example.com", "password": "wrong-one"})
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid credentials."}

    def test_authenticated_user_skips_login(self, authenticated_client):
        response = authenticated_client.get(reverse("invoices:login"))
        assert response.status_code == 302

    def test_logout(self, authenticated_client):
        response = authenticated_client.post(reverse("invoices:logout"))
        assert response.status_code == 302
        assert response.url == "/login/"
        assert SESSION_KEY not in authenticated_client.session

    def test_dashboard_requires_login(self, client):
        response = client.get(reverse("invoices:dashboard"))
        assert response.status_code == 302
        assert response.url.startswith("/login/")
