from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView

from invoices import health

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", health.health_check, name="health_check"),
    path("health/ready/", health.readiness_check, name="readiness_check"),
    path("health/live/", health.liveness_check, name="liveness_check"),
    path("api/v1/schema/", SpectacularAPIView.as_view(), name="api-schema"),
    path("api/v1/", include("invoices.api.urls")),
    path("", include("invoices.urls", namespace="invoices")),
]
