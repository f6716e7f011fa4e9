import logging

import pytest
from django.http import HttpResponse
from django.test import RequestFactory

from acme.middleware import RequestIDFilter, RequestIDMiddleware


def _filtered_request_id():
    record = logging.LogRecord("acme", logging.INFO, __file__, 1, "message", None, None)
    RequestIDFilter().filter(record)
    return record.request_id


class TestRequestIDMiddleware:
    def test_log_records_carry_request_id_only_during_request(self):
        seen = []

        def view(request):
            seen.append(_filtered_request_id())
            return HttpResponse()

        request = RequestFactory().get("/dashboard/", HTTP_X_REQUEST_ID="req-9")
        response = RequestIDMiddleware(view)(request)

        assert seen == ["req-9"]
        assert response["X-Request-ID"] == "req-9"
        assert _filtered_request_id() == "no-id"

    def test_request_id_cleared_when_view_raises(self):
        def view(request):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            RequestIDMiddleware(view)(RequestFactory().get("/dashboard/"))

        assert _filtered_request_id() == "no-id"
