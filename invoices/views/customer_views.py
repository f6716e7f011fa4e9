from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from ..services import InvoiceQueries


@login_required
@require_GET
def customer_list(request):
    query = request.GET.get('query', '').strip()
    customers = InvoiceQueries().fetch_filtered_customers(query)

    return JsonResponse({
        'query': query,
        'customers': [
            {
                'id': customer.id,
                'name': customer.name,
                'email': customer.email,
                'image_url': customer.image_url,
                'total_invoices': customer.total_invoices,
                'total_pending': customer.total_pending.format(),
                'total_paid': customer.total_paid.format(),
            }
            for customer in customers
        ],
    })
