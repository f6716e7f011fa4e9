import json

import pytest
from django.core.cache import cache
from django.http import Http404
from django.test import RequestFactory

from invoices.services import (
    INVOICE_LIST_ROUTE,
    DataAccessError,
    InvoiceValidationError,
    Navigator,
    RecordNotFound,
    RouteCache,
)
from invoices.validation import FormValidationError, NotFoundError, api_error_for
from invoices.validation.middleware import ErrorHandlingMiddleware
from tests.factories import CustomerFactory


class TestRouteCache:
    def test_get_or_set_computes_once(self):
        route_cache = RouteCache()
        calls = []

        def compute():
            calls.append(1)
            return {"value": len(calls)}

        assert route_cache.get_or_set(INVOICE_LIST_ROUTE, {"page": 1}, compute) == {"value": 1}
        assert route_cache.get_or_set(INVOICE_LIST_ROUTE, {"page": 1}, compute) == {"value": 1}
        assert len(calls) == 1

    def test_params_are_part_of_the_key(self):
        route_cache = RouteCache()
        assert route_cache.make_key(INVOICE_LIST_ROUTE, {"page": 1}) != route_cache.make_key(INVOICE_LIST_ROUTE, {"page": 2})

    def test_invalidate_forces_recompute(self):
        route_cache = RouteCache()
        route_cache.get_or_set(INVOICE_LIST_ROUTE, None, lambda: "stale")

        route_cache.invalidate(INVOICE_LIST_ROUTE)

        assert route_cache.get_or_set(INVOICE_LIST_ROUTE, None, lambda: "fresh") == "fresh"

    def test_invalidate_only_affects_its_route(self):
        route_cache = RouteCache()
        route_cache.get_or_set("invoices:customer_list", None, lambda: "customers")

        route_cache.invalidate(INVOICE_LIST_ROUTE)

        assert route_cache.get_or_set("invoices:customer_list", None, lambda: "other") == "customers"

    def test_invalidate_without_existing_counter(self):
        route_cache = RouteCache()
        route_cache.invalidate(INVOICE_LIST_ROUTE)
        assert route_cache.version(INVOICE_LIST_ROUTE) == 2

    def test_expired_counter_starts_over(self):
        route_cache = RouteCache()
        route_cache.invalidate(INVOICE_LIST_ROUTE)
        cache.delete(RouteCache.VERSION_KEY.format(route=INVOICE_LIST_ROUTE))
        assert route_cache.version(INVOICE_LIST_ROUTE) == 1


class TestNavigator:
    def test_redirect_resolves_and_records(self):
        navigator = Navigator()

        assert navigator.redirect(INVOICE_LIST_ROUTE) == "/dashboard/invoices/"
        assert navigator.redirect("invoices:invoice_edit", invoice_id="inv_1") == "/dashboard/invoices/inv_1/edit/"
        assert navigator.history == ["/dashboard/invoices/", "/dashboard/invoices/inv_1/edit/"]


class TestErrorHandlingMiddleware:
    @pytest.fixture
    def middleware(self):
        return ErrorHandlingMiddleware(lambda request: None)

    def test_data_access_error_is_error_boundary(self, middleware):
        request = RequestFactory().get("/dashboard/")
        request.request_id = "req-1"

        response = middleware.process_exception(request, DataAccessError("Failed to fetch revenue data."))

        assert response.status_code == 500
        assert json.loads(response.content) == {
            "success": False,
            "error": {"code": "DATA_ACCESS_ERROR", "message": "Failed to fetch revenue data."},
            "request_id": "req-1",
        }

    def test_record_not_found(self, middleware):
        request = RequestFactory().post("/dashboard/invoices/x/delete/")
        response = middleware.process_exception(request, RecordNotFound("Invoice not found."))
        assert response.status_code == 404

    def test_page_404_left_to_django(self, middleware):
        request = RequestFactory().get("/dashboard/invoices/x/edit/")
        assert middleware.process_exception(request, Http404("Invoice not found.")) is None

    def test_api_404_rendered_as_json(self, middleware):
        request = RequestFactory().get("/dashboard/invoices/x/edit/", HTTP_ACCEPT="application/json")
        response = middleware.process_exception(request, Http404("Invoice not found."))
        assert json.loads(response.content)["error"]["code"] == "RESOURCE_NOT_FOUND"

    def test_unexpected_error_on_page_left_to_django(self, middleware):
        request = RequestFactory().get("/dashboard/")
        assert middleware.process_exception(request, RuntimeError("boom")) is None


@pytest.mark.django_db
class TestCustomerSignals:
    def test_customer_save_and_delete_invalidate_invoice_list(self):
        route_cache = RouteCache()
        version = route_cache.version(INVOICE_LIST_ROUTE)

        customer = CustomerFactory()
        assert route_cache.version(INVOICE_LIST_ROUTE) == version + 1

        customer.delete()
        assert route_cache.version(INVOICE_LIST_ROUTE) == version + 2


class TestServiceErrorMapping:
    def test_validation_error_lists_field_messages(self):
        error = api_error_for(
            InvoiceValidationError({"amount": ["Please enter an amount greater than $0"]}, "Missing Fields."),
            "req-2",
        )

        assert isinstance(error, FormValidationError)
        assert error.status == 400
        assert error.to_response().to_dict() == {
            "success": False,
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Missing Fields.",
                "fields": [{
                    "field": "amount",
                    "code": "FIELD_OUT_OF_RANGE",
                    "message": "Please enter an amount greater than $0",
                }],
            },
            "request_id": "req-2",
        }

    def test_not_found_and_data_access(self):
        assert isinstance(api_error_for(RecordNotFound("Invoice not found.")), NotFoundError)
        assert api_error_for(DataAccessError("Failed to fetch customers.")).status == 500

    def test_other_exceptions_are_not_mapped(self):
        assert api_error_for(RuntimeError("boom")) is None
