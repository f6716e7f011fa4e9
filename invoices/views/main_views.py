import logging

from django.conf import settings
from django.http import JsonResponse
from django.shortcuts import redirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods, require_POST

from ..auth_services import AuthService

logger = logging.getLogger(__name__)


def _next_url(request):
    next_url = request.POST.get('next') or request.GET.get('next')
    if next_url and url_has_allowed_host_and_scheme(
        next_url,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return next_url
    return settings.LOGIN_REDIRECT_URL


@require_http_methods(["GET", "POST"])
def login_view(request):
    if request.user.is_authenticated:
        return redirect(settings.LOGIN_REDIRECT_URL)

    if request.method == 'POST':
        error_message = AuthService.authenticate(request, request.POST)
        if error_message:
            return JsonResponse({'message': error_message}, status=400)
        return redirect(_next_url(request))

    return JsonResponse({'fields': ['email', 'password']})


@require_POST
def logout_view(request):
    AuthService.logout_user(request)
    return redirect(settings.LOGOUT_REDIRECT_URL)
