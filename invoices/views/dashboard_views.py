"""
Dashboard overview: summary cards, latest invoices and the revenue chart.
"""
import logging

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from ..services import InvoiceQueries

logger = logging.getLogger(__name__)


@login_required
@require_GET
def dashboard_overview(request):
    queries = InvoiceQueries()

    card_data = queries.fetch_card_data()
    latest_invoices = queries.fetch_latest_invoices()
    revenue = queries.fetch_revenue()

    return JsonResponse({
        'cards': {
            'collected': card_data.total_paid_invoices.format(),
            'pending': card_data.total_pending_invoices.format(),
            'total_invoices': card_data.number_of_invoices,
            'total_customers': card_data.number_of_customers,
        },
        'latest_invoices': [
            {
                'id': invoice.id,
                'name': invoice.name,
                'email': invoice.email,
                'image_url': invoice.image_url,
                'amount': invoice.amount,
            }
            for invoice in latest_invoices
        ],
        'revenue': [{'month': row.month, 'revenue': row.revenue} for row in revenue],
    })
