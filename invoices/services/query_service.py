"""Read side of the dashboard: filtered, paginated and aggregate queries."""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from decimal import Decimal
from functools import wraps
from typing import Any, Callable, List, Optional, Tuple

from django.conf import settings
from django.db import DatabaseError, connections
from django.db.models import BigIntegerField, Count, Q, Sum, Value
from django.db.models.functions import Coalesce

from ..models import Customer, Invoice, Revenue
from ..money import Money
from .results import DataAccessError
from .store import Store, default_store

logger = logging.getLogger(__name__)

ITEMS_PER_PAGE = 6
LATEST_INVOICES_COUNT = 5


@dataclass(frozen=True)
class InvoiceDetail:
    id: str
    customer_id: str
    amount: Decimal
    status: str
    date: Any


@dataclass(frozen=True)
class LatestInvoice:
    id: str
    name: str
    email: str
    image_url: str
    amount: str


@dataclass(frozen=True)
class CardData:
    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: Money
    total_pending_invoices: Money


def data_access(message: str) -> Callable:
    """Log persistence failures and re-raise them as a generic DataAccessError."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except DatabaseError as e:
                logger.error(f"Database error in {func.__name__}: {e}")
                raise DataAccessError(message) from e
        return wrapper
    return decorator


def invoice_search(query: str) -> Q:
    """Case-insensitive match on customer name, customer email or status."""
    return (
        Q(customer__name__icontains=query)
        | Q(customer__email__icontains=query)
        | Q(status__icontains=query)
    )


def parse_page(value: Any) -> int:
    """Page number from a query string value; anything unusable means page 1."""
    try:
        return max(int(value), 1)
    except (TypeError, ValueError):
        return 1


def page_offset(page: int) -> int:
    return (max(int(page), 1) - 1) * ITEMS_PER_PAGE


class InvoiceQueries:
    def __init__(self, store: Optional[Store] = None, parallel: Optional[bool] = None):
        self.store = store or default_store()
        if parallel is None:
            parallel = getattr(settings, "DASHBOARD_PARALLEL_QUERIES", True)
        self.parallel = parallel

    def run_concurrently(self, *calls: Callable[[], Any]) -> Tuple[Any, ...]:
        """Run independent reads together; results keep the order of ``calls``."""
        if not self.parallel or len(calls) < 2:
            return tuple(call() for call in calls)

        def run(call):
            try:
                return call()
            finally:
                connections.close_all()

        with ThreadPoolExecutor(max_workers=len(calls), thread_name_prefix="dashboard_query") as executor:
            futures = [executor.submit(run, call) for call in calls]
            return tuple(future.result() for future in futures)

    def _filtered_invoices(self, query: str):
        invoices = self.store.invoices
        if query:
            invoices = invoices.filter(invoice_search(query))
        return invoices

    @data_access("Failed to fetch invoices.")
    def fetch_filtered_invoices(self, query: str, page: int = 1) -> List[Invoice]:
        offset = page_offset(page)
        invoices = (
            self._filtered_invoices(query)
            .select_related("customer")
            .order_by("-date", "id")
        )
        return list(invoices[offset:offset + ITEMS_PER_PAGE])

    @data_access("Failed to fetch total number of invoices.")
    def fetch_invoices_pages(self, query: str) -> int:
        count = self._filtered_invoices(query).count()
        return math.ceil(count / ITEMS_PER_PAGE)

    @data_access("Failed to fetch invoice.")
    def fetch_invoice_by_id(self, invoice_id: str) -> Optional[InvoiceDetail]:
        invoice = self.store.invoices.filter(pk=invoice_id).first()
        if invoice is None:
            return None

        return InvoiceDetail(
            id=invoice.id,
            customer_id=invoice.customer_id,
            amount=invoice.money.amount,
            status=invoice.status,
            date=invoice.date,
        )

    @data_access("Failed to fetch all customers.")
    def fetch_customers(self) -> List[Customer]:
        return list(self.store.customers.order_by("name"))

    @data_access("Failed to fetch customer table.")
    def fetch_filtered_customers(self, query: str = "") -> List[Customer]:
        customers = self.store.customers
        if query:
            customers = customers.filter(Q(name__icontains=query) | Q(email__icontains=query))

        customers = customers.annotate(
            total_invoices=Count("invoices"),
            total_pending=Coalesce(Sum("invoices__amount", filter=Q(invoices__status=Invoice.Status.PENDING)), Value(0), output_field=BigIntegerField()),
            total_paid=Coalesce(Sum("invoices__amount", filter=Q(invoices__status=Invoice.Status.PAID)), Value(0), output_field=BigIntegerField()),
        ).order_by("name")

        results = list(customers)
        for customer in results:
            customer.total_pending = Money.from_minor_units(customer.total_pending)
            customer.total_paid = Money.from_minor_units(customer.total_paid)
        return results

    def _sum_for_status(self, status: str) -> Money:
        total = self.store.invoices.filter(status=status).aggregate(
            total=Coalesce(Sum("amount"), Value(0), output_field=BigIntegerField())
        )["total"]
        return Money.from_minor_units(total or 0)

    @data_access("Failed to fetch card data.")
    def fetch_card_data(self) -> CardData:
        invoice_count, customer_count, paid, pending = self.run_concurrently(
            lambda: self.store.invoices.count(),
            lambda: self.store.customers.count(),
            lambda: self._sum_for_status(Invoice.Status.PAID),
            lambda: self._sum_for_status(Invoice.Status.PENDING),
        )
        return CardData(
            number_of_invoices=int(invoice_count or 0),
            number_of_customers=int(customer_count or 0),
            total_paid_invoices=paid,
            total_pending_invoices=pending,
        )

    @data_access("Failed to fetch the latest invoices.")
    def fetch_latest_invoices(self) -> List[LatestInvoice]:
        invoices = (
            self.store.invoices
            .select_related("customer")
            .order_by("-date", "id")[:LATEST_INVOICES_COUNT]
        )
        return [
            LatestInvoice(
                id=invoice.id,
                name=invoice.customer.name,
                email=invoice.customer.email,
                image_url=invoice.customer.image_url,
                amount=invoice.money.format(),
            )
            for invoice in invoices
        ]

    @data_access("Failed to fetch revenue data.")
    def fetch_revenue(self) -> List[Revenue]:
        return sorted(self.store.revenue.all(), key=lambda row: row.month_index)

    def fetch_edit_context(self, invoice_id: str) -> Tuple[Optional[InvoiceDetail], List[Customer]]:
        """Invoice and customer list for the edit form, loaded together."""
        return self.run_concurrently(
            lambda: self.fetch_invoice_by_id(invoice_id),
            self.fetch_customers,
        )

