import logging

from django.contrib.auth.decorators import login_required
from django.http import Http404, JsonResponse
from django.shortcuts import redirect
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from ..services import (
    INVOICE_LIST_ROUTE,
    ErrorKind,
    InvoiceActions,
    InvoiceQueries,
    RouteCache,
    parse_page,
)

logger = logging.getLogger(__name__)


def _invoice_row(invoice):
    return {
        'id': invoice.id,
        'customer': {
            'id': invoice.customer.id,
            'name': invoice.customer.name,
            'email': invoice.customer.email,
            'image_url': invoice.customer.image_url,
        },
        'amount': invoice.money.format(),
        'status': invoice.status,
        'date': invoice.date.isoformat(),
    }


def _customer_options(customers):
    return [{'id': customer.id, 'name': customer.name} for customer in customers]


def _action_response(result):
    """Redirect on success, re-render form state on validation errors, raise otherwise."""
    if result.ok:
        return redirect(result.value.redirect_to)
    if result.error.kind == ErrorKind.VALIDATION:
        return JsonResponse(result.error.to_state(), status=400)
    raise result.error.to_exception()


@login_required
@require_GET
def invoice_list(request):
    query = request.GET.get('query', '').strip()
    page = parse_page(request.GET.get('page'))

    def build_page():
        queries = InvoiceQueries()
        invoices = queries.fetch_filtered_invoices(query, page)
        return {
            'query': query,
            'page': page,
            'total_pages': queries.fetch_invoices_pages(query),
            'invoices': [_invoice_row(invoice) for invoice in invoices],
        }

    payload = RouteCache().get_or_set(INVOICE_LIST_ROUTE, {'query': query, 'page': page}, build_page)
    return JsonResponse(payload)


@login_required
@require_http_methods(["GET", "POST"])
def invoice_create(request):
    if request.method == 'POST':
        return _action_response(InvoiceActions().create_invoice(request.POST))

    customers = InvoiceQueries().fetch_customers()
    return JsonResponse({'customers': _customer_options(customers)})


@login_required
@require_http_methods(["GET", "POST"])
def invoice_edit(request, invoice_id):
    if request.method == 'POST':
        return _action_response(InvoiceActions().update_invoice(invoice_id, request.POST))

    invoice, customers = InvoiceQueries().fetch_edit_context(invoice_id)
    if invoice is None:
        raise Http404("Invoice not found.")

    return JsonResponse({
        'invoice': {
            'id': invoice.id,
            'customer_id': invoice.customer_id,
            'amount': str(invoice.amount),
            'status': invoice.status,
            'date': invoice.date.isoformat(),
        },
        'customers': _customer_options(customers),
    })


@login_required
@require_POST
def invoice_delete(request, invoice_id):
    InvoiceActions().delete_invoice(invoice_id).unwrap()
    return JsonResponse({'message': 'Deleted Invoice.'})
