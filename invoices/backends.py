from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend

User = get_user_model()


class EmailBackend(ModelBackend):
    """Authenticates with an e-mail address instead of a username."""

    def authenticate(self, request, email=None, password=None, **kwargs):
        if email is None or password is None:
            return None

        user = User.objects.filter(email__iexact=email.strip()).order_by('pk').first()
        if user is None:
            # Run the hasher anyway so response time does not reveal unknown accounts.
            User().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
