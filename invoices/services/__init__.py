"""
Dashboard Services Layer

This module provides the business logic layer following strict separation:
- Models: Pure data + constraints (no business logic)
- Services: Queries, mutations, cache invalidation and navigation
- Views/APIs: Request parsing, auth, response mapping

All reads and writes flow through these services with an injected Store.
"""

from .query_service import InvoiceQueries, CardData, InvoiceDetail, LatestInvoice, ITEMS_PER_PAGE, parse_page
from .invoice_service import InvoiceActions, ActionOutcome
from .results import Result, ErrorKind, ActionError, DataAccessError, RecordNotFound, InvoiceValidationError
from .revalidation import RouteCache, Navigator, INVOICE_LIST_ROUTE
from .store import Store, default_store

__all__ = [
    "InvoiceQueries",
    "CardData",
    "InvoiceDetail",
    "LatestInvoice",
    "ITEMS_PER_PAGE",
    "parse_page",
    "InvoiceActions",
    "ActionOutcome",
    "Result",
    "ErrorKind",
    "ActionError",
    "DataAccessError",
    "RecordNotFound",
    "InvoiceValidationError",
    "RouteCache",
    "Navigator",
    "INVOICE_LIST_ROUTE",
    "Store",
    "default_store",
]
