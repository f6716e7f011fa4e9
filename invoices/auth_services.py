"""
Authentication Services
Signs users in through django.contrib.auth and turns failures into
user-facing messages.
"""
import logging
from enum import Enum
from typing import Any, Mapping, Optional

from django.contrib.auth import authenticate as django_authenticate, login, logout
from django.db import DatabaseError

from .forms import LoginForm

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_FAILURE_MESSAGE = "Something went wrong."


class AuthErrorKind(str, Enum):
    CREDENTIALS_SIGNIN = "credentials_signin"
    OTHER = "other"


class AuthenticationError(Exception):
    def __init__(self, kind: AuthErrorKind, message: str = ""):
        self.kind = kind
        super().__init__(message or kind.value)


class AuthService:
    @classmethod
    def sign_in(cls, request, provider: str, credentials: Mapping[str, Any]):
        """Authenticate and log in, raising AuthenticationError on any failure."""
        if provider != CREDENTIALS_PROVIDER:
            raise AuthenticationError(AuthErrorKind.OTHER, f"Unsupported provider: {provider}")

        form = LoginForm(credentials)
        if not form.is_valid():
            raise AuthenticationError(AuthErrorKind.CREDENTIALS_SIGNIN, "Malformed credentials")

        email = form.cleaned_data['email']
        try:
            user = django_authenticate(request, email=email, password=form.cleaned_data['password'])
        except DatabaseError as e:
            logger.error(f"Authentication error: {e}")
            raise AuthenticationError(AuthErrorKind.OTHER, "Authentication backend unavailable") from e

        if user is None:
            logger.warning(f"Failed sign-in attempt for {email}")
            raise AuthenticationError(AuthErrorKind.CREDENTIALS_SIGNIN, "Credentials did not match")

        login(request, user)
        logger.info(f"User {user.pk} signed in")
        return user

    @classmethod
    def authenticate(cls, request, data: Mapping[str, Any]) -> Optional[str]:
        """Sign in with submitted form data; returns an error message or None."""
        try:
            cls.sign_in(request, CREDENTIALS_PROVIDER, data)
        except AuthenticationError as e:
            if e.kind == AuthErrorKind.CREDENTIALS_SIGNIN:
                return INVALID_CREDENTIALS_MESSAGE
            return GENERIC_FAILURE_MESSAGE
        return None

    @classmethod
    def logout_user(cls, request):
        if request.user.is_authenticated:
            logger.info(f"User {request.user.pk} signed out")
        logout(request)
