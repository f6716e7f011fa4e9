from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from invoices.services import (
    ITEMS_PER_PAGE,
    InvoiceActions,
    InvoiceQueries,
    RecordNotFound,
    parse_page,
)

from .response import APIResponse
from .serializers import (
    CardDataSerializer,
    CustomerSerializer,
    CustomerTableSerializer,
    InvoiceDetailSerializer,
    InvoiceInputSerializer,
    InvoiceListSerializer,
    LatestInvoiceSerializer,
    RevenueSerializer,
)

INVOICE_ID_PARAM = OpenApiParameter(
    name="invoice_id",
    description="Invoice ID",
    required=True,
    type=OpenApiTypes.STR,
    location=OpenApiParameter.PATH,
)

QUERY_PARAM = OpenApiParameter(
    name="query",
    description="Case-insensitive search on customer name, customer email or status",
    required=False,
    type=str,
)

PAGE_PARAM = OpenApiParameter(name="page", description="1-based page number", required=False, type=int)


class DashboardAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get_queries(self) -> InvoiceQueries:
        return InvoiceQueries()

    def get_actions(self) -> InvoiceActions:
        return InvoiceActions()


class InvoiceListAPIView(DashboardAPIView):
    @extend_schema(
        summary="List invoices",
        description=f"Search invoices, {ITEMS_PER_PAGE} per page, newest first.",
        parameters=[QUERY_PARAM, PAGE_PARAM],
        responses={200: InvoiceListSerializer(many=True)},
    )
    def get(self, request):
        query = request.query_params.get("query", "")
        page = parse_page(request.query_params.get("page"))
        queries = self.get_queries()

        invoices = queries.fetch_filtered_invoices(query, page)
        total_pages = queries.fetch_invoices_pages(query)
        return APIResponse.paginated(
            InvoiceListSerializer(invoices, many=True).data,
            page=page,
            page_size=ITEMS_PER_PAGE,
            total_pages=total_pages,
        )

    @extend_schema(
        summary="Create invoice",
        description="Create a pending or paid invoice dated today. Amounts are in dollars.",
        request=InvoiceInputSerializer,
        responses={201: OpenApiTypes.OBJECT},
    )
    def post(self, request):
        outcome = self.get_actions().create_invoice(request.data).unwrap()
        return APIResponse.success(
            data={"id": outcome.invoice_id},
            message="Invoice created",
            status_code=status.HTTP_201_CREATED,
        )


class InvoiceDetailAPIView(DashboardAPIView):
    @extend_schema(
        summary="Get invoice",
        parameters=[INVOICE_ID_PARAM],
        responses={200: InvoiceDetailSerializer},
    )
    def get(self, request, invoice_id):
        invoice = self.get_queries().fetch_invoice_by_id(invoice_id)
        if invoice is None:
            raise RecordNotFound("Invoice not found.")
        return APIResponse.success(data=InvoiceDetailSerializer(invoice).data)

    @extend_schema(
        summary="Update invoice",
        parameters=[INVOICE_ID_PARAM],
        request=InvoiceInputSerializer,
        responses={200: OpenApiTypes.OBJECT},
    )
    def put(self, request, invoice_id):
        outcome = self.get_actions().update_invoice(invoice_id, request.data).unwrap()
        return APIResponse.success(data={"id": outcome.invoice_id}, message="Invoice updated")

    @extend_schema(
        summary="Delete invoice",
        parameters=[INVOICE_ID_PARAM],
        responses={200: OpenApiTypes.OBJECT},
    )
    def delete(self, request, invoice_id):
        self.get_actions().delete_invoice(invoice_id).unwrap()
        return APIResponse.success(message="Deleted Invoice.")


class CustomerListAPIView(DashboardAPIView):
    @extend_schema(
        summary="List customers",
        description="All customers ordered by name, for invoice forms.",
        responses={200: CustomerSerializer(many=True)},
    )
    def get(self, request):
        return APIResponse.success(data=CustomerSerializer(self.get_queries().fetch_customers(), many=True).data)


class CustomerTableAPIView(DashboardAPIView):
    @extend_schema(
        summary="Customer table",
        description="Customers with invoice counts and paid/pending totals.",
        parameters=[QUERY_PARAM],
        responses={200: CustomerTableSerializer(many=True)},
    )
    def get(self, request):
        customers = self.get_queries().fetch_filtered_customers(request.query_params.get("query", ""))
        return APIResponse.success(data=CustomerTableSerializer(customers, many=True).data)


class CardDataAPIView(DashboardAPIView):
    @extend_schema(summary="Dashboard summary cards", responses={200: CardDataSerializer})
    def get(self, request):
        return APIResponse.success(data=CardDataSerializer(self.get_queries().fetch_card_data()).data)


class LatestInvoicesAPIView(DashboardAPIView):
    @extend_schema(summary="Latest invoices", responses={200: LatestInvoiceSerializer(many=True)})
    def get(self, request):
        latest = self.get_queries().fetch_latest_invoices()
        return APIResponse.success(data=LatestInvoiceSerializer(latest, many=True).data)


class RevenueAPIView(DashboardAPIView):
    @extend_schema(summary="Monthly revenue", responses={200: RevenueSerializer(many=True)})
    def get(self, request):
        return APIResponse.success(data=RevenueSerializer(self.get_queries().fetch_revenue(), many=True).data)
