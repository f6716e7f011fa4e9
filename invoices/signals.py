"""
Signal handlers for the dashboard:
- Cache invalidation for customer edits made outside the invoice actions
"""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .services.revalidation import INVOICE_LIST_ROUTE, RouteCache


@receiver(post_save, sender='invoices.Customer')
@receiver(post_delete, sender='invoices.Customer')
def invalidate_invoice_list_on_customer_change(sender, instance, **kwargs):
    # Invoice list rows embed the customer's name and email.
    RouteCache().invalidate(INVOICE_LIST_ROUTE)
