from decimal import Decimal

import pytest

from invoices.forms import AMOUNT_MESSAGE, CUSTOMER_MESSAGE, STATUS_MESSAGE, InvoiceForm, LoginForm


class TestInvoiceForm:
    def test_valid_submission(self):
        form = InvoiceForm({"customer_id": "cust_1", "amount": "50", "status": "paid"})
        assert form.is_valid()
        assert form.cleaned_data["amount"] == Decimal("50")
        assert form.cleaned_data["status"] == "paid"

    @pytest.mark.parametrize("amount", ["-5", "0", "abc", ""])
    def test_amount_must_be_positive_number(self, amount):
        form = InvoiceForm({"customer_id": "cust_1", "amount": amount, "status": "pending"})
        assert not form.is_valid()
        assert form.field_errors()["amount"] == [AMOUNT_MESSAGE]

    def test_missing_fields_report_each_field(self):
        form = InvoiceForm({})
        assert not form.is_valid()
        errors = form.field_errors()
        assert errors["customer_id"] == [CUSTOMER_MESSAGE]
        assert errors["amount"] == [AMOUNT_MESSAGE]
        assert errors["status"] == [STATUS_MESSAGE]

    def test_unknown_status_rejected(self):
        form = InvoiceForm({"customer_id": "cust_1", "amount": "10", "status": "overdue"})
        assert not form.is_valid()
        assert form.field_errors() == {"status": [STATUS_MESSAGE]}

    @pytest.mark.parametrize("amount", ["0.004", "0.0049", "1e17", "1e30", "10000000000"])
    def test_amount_must_be_storable_in_cents(self, amount):
        form = InvoiceForm({"customer_id": "cust_1", "amount": amount, "status": "paid"})
        assert not form.is_valid()
        assert form.field_errors() == {"amount": [AMOUNT_MESSAGE]}

    @pytest.mark.parametrize("amount", ["0.005", "0.01", "9999999999.99"])
    def test_amount_bounds_accepted(self, amount):
        form = InvoiceForm({"customer_id": "cust_1", "amount": amount, "status": "paid"})
        assert form.is_valid()
        assert form.cleaned_data["amount"] == Decimal(amount)


class TestLoginForm:
    def test_email_is_normalized(self):
        form = LoginForm({"email": "  User@Example.COM ", "password": "secret123"})
        assert form.is_valid()
        assert form.cleaned_data["email"] == "user@example.com"

    def test_short_password_rejected(self):
        form = LoginForm({"email": "user@example.com", "password": "12345"})
        assert not form.is_valid()
        assert "password" in form.errors

    def test_invalid_email_rejected(self):
        form = LoginForm({"email": "not-an-email", "password": "secret123"})
        assert not form.is_valid()
        assert "email" in form.errors
