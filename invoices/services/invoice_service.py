import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from django.db import DatabaseError
from django.utils import timezone

from ..forms import CUSTOMER_MESSAGE, InvoiceForm
from ..money import Money
from .results import ErrorKind, Result
from .revalidation import INVOICE_LIST_ROUTE, Navigator, RouteCache
from .store import Store, default_store

logger = logging.getLogger(__name__)

CREATE_FAILED_MESSAGE = "Missing Fields. Failed to Create Invoice."
UPDATE_FAILED_MESSAGE = "Missing Fields. Failed to Update Invoice."
NOT_FOUND_MESSAGE = "Invoice not found."


@dataclass(frozen=True)
class ActionOutcome:
    invoice_id: str
    redirect_to: Optional[str] = None


@dataclass(frozen=True)
class InvoiceInput:
    customer_id: str
    amount: Money
    status: str


class InvoiceActions:
    """
    Create, update and delete invoices.

    Every action validates its input, performs a single write through the
    injected store, then invalidates the invoice list route. Create and
    update also navigate back to the list.
    """

    def __init__(
        self,
        store: Optional[Store] = None,
        cache: Optional[RouteCache] = None,
        navigator: Optional[Navigator] = None,
    ):
        self.store = store or default_store()
        self.cache = cache or RouteCache()
        self.navigator = navigator or Navigator()

    def _validate(self, data: Mapping[str, Any], failure_message: str):
        form = InvoiceForm(data)
        if not form.is_valid():
            return None, Result.failure(ErrorKind.VALIDATION, failure_message, form.field_errors())

        cleaned = form.cleaned_data
        invoice_input = InvoiceInput(
            customer_id=cleaned['customer_id'],
            amount=Money.from_major_units(cleaned['amount']),
            status=cleaned['status'],
        )
        return invoice_input, None

    def _unknown_customer(self, customer_id: str, failure_message: str):
        if self.store.customers.filter(pk=customer_id).exists():
            return None
        return Result.failure(ErrorKind.VALIDATION, failure_message, {'customer_id': [CUSTOMER_MESSAGE]})

    def create_invoice(self, data: Mapping[str, Any]) -> Result[ActionOutcome]:
        invoice_input, failure = self._validate(data, CREATE_FAILED_MESSAGE)
        if failure:
            return failure

        try:
            failure = self._unknown_customer(invoice_input.customer_id, CREATE_FAILED_MESSAGE)
            if failure:
                return failure

            invoice = self.store.invoices.create(
                customer_id=invoice_input.customer_id,
                amount=invoice_input.amount.to_minor_units(),
                status=invoice_input.status,
                date=timezone.localdate(),
            )
        except DatabaseError as e:
            logger.error(f"Database error creating invoice: {e}")
            return Result.failure(ErrorKind.DATA_ACCESS, "Failed to create new invoice.")

        logger.info(f"Invoice {invoice.id} created for customer {invoice.customer_id}")
        self.cache.invalidate(INVOICE_LIST_ROUTE)
        redirect_to = self.navigator.redirect(INVOICE_LIST_ROUTE)
        return Result.success(ActionOutcome(invoice_id=invoice.id, redirect_to=redirect_to))

    def update_invoice(self, invoice_id: str, data: Mapping[str, Any]) -> Result[ActionOutcome]:
        invoice_input, failure = self._validate(data, UPDATE_FAILED_MESSAGE)
        if failure:
            return failure

        try:
            failure = self._unknown_customer(invoice_input.customer_id, UPDATE_FAILED_MESSAGE)
            if failure:
                return failure

            updated = self.store.invoices.filter(pk=invoice_id).update(
                customer_id=invoice_input.customer_id,
                amount=invoice_input.amount.to_minor_units(),
                status=invoice_input.status,
            )
        except DatabaseError as e:
            logger.error(f"Database error updating invoice {invoice_id}: {e}")
            return Result.failure(ErrorKind.DATA_ACCESS, "Failed to update invoice.")

        if not updated:
            return Result.failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        logger.info(f"Invoice {invoice_id} updated")
        self.cache.invalidate(INVOICE_LIST_ROUTE)
        redirect_to = self.navigator.redirect(INVOICE_LIST_ROUTE)
        return Result.success(ActionOutcome(invoice_id=invoice_id, redirect_to=redirect_to))

    def delete_invoice(self, invoice_id: str) -> Result[ActionOutcome]:
        try:
            deleted, _ = self.store.invoices.filter(pk=invoice_id).delete()
        except DatabaseError as e:
            logger.error(f"Database error deleting invoice {invoice_id}: {e}")
            return Result.failure(ErrorKind.DATA_ACCESS, "Failed to delete invoice.")

        # A repeated delete lands here as well.
        if not deleted:
            logger.warning(f"Delete requested for missing invoice {invoice_id}")
            return Result.failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        logger.info(f"Invoice {invoice_id} deleted")
        self.cache.invalidate(INVOICE_LIST_ROUTE)
        return Result.success(ActionOutcome(invoice_id=invoice_id))
