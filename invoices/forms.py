"""
Dashboard Forms
Parse untrusted form submissions into typed, constrained values.
"""
from decimal import Decimal
from typing import Dict, List

from django import forms

from .models import Invoice
from .money import Money

CUSTOMER_MESSAGE = "Please select a customer."
AMOUNT_MESSAGE = "Please enter an amount greater than $0"
STATUS_MESSAGE = "Please choose status"

MAX_AMOUNT = Decimal("9999999999.99")


class BaseFormMixin:
    def field_errors(self) -> Dict[str, List[str]]:
        """Errors keyed by field name, each a list of plain messages."""
        return {name: [str(message) for message in messages] for name, messages in self.errors.items()}


class InvoiceForm(BaseFormMixin, forms.Form):
    customer_id = forms.CharField(
        max_length=64,
        error_messages={'required': CUSTOMER_MESSAGE, 'max_length': CUSTOMER_MESSAGE},
    )
    amount = forms.DecimalField(
        max_value=MAX_AMOUNT,
        error_messages={'required': AMOUNT_MESSAGE, 'invalid': AMOUNT_MESSAGE, 'max_value': AMOUNT_MESSAGE},
    )
    status = forms.ChoiceField(
        choices=Invoice.Status.choices,
        error_messages={'required': STATUS_MESSAGE, 'invalid_choice': STATUS_MESSAGE},
    )

    def clean_amount(self):
        amount = self.cleaned_data['amount']
        # Must still be positive once rounded to whole cents.
        if amount <= Decimal('0') or Money.from_major_units(amount).cents <= 0:
            raise forms.ValidationError(AMOUNT_MESSAGE)
        return amount


class LoginForm(BaseFormMixin, forms.Form):
    email = forms.EmailField(
        widget=forms.EmailInput(attrs={
            'placeholder': 'Enter your email address',
            'autocomplete': 'email',
            'autofocus': True,
        }),
    )
    password = forms.CharField(
        min_length=6,
        strip=False,
        widget=forms.PasswordInput(attrs={
            'placeholder': 'Enter password',
            'autocomplete': 'current-password',
        }),
    )

    def clean_email(self):
        return self.cleaned_data.get('email', '').lower().strip()
