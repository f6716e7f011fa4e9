from rest_framework import serializers

from invoices.models import Customer, Invoice, Revenue


class MoneyField(serializers.Field):
    """Renders a Money value as its formatted currency string."""

    def to_representation(self, value):
        return value.format()


class CustomerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Customer
        fields = ["id", "name", "email", "image_url"]


class CustomerTableSerializer(serializers.ModelSerializer):
    total_invoices = serializers.IntegerField(read_only=True)
    total_pending = MoneyField(read_only=True)
    total_paid = MoneyField(read_only=True)

    class Meta:
        model = Customer
        fields = ["id", "name", "email", "image_url", "total_invoices", "total_pending", "total_paid"]


class InvoiceListSerializer(serializers.ModelSerializer):
    customer = CustomerSerializer(read_only=True)
    amount = serializers.SerializerMethodField()

    class Meta:
        model = Invoice
        fields = ["id", "customer", "amount", "status", "date"]

    def get_amount(self, obj) -> str:
        return obj.money.format()


class InvoiceInputSerializer(serializers.Serializer):
    """Request body for create and update; validation itself runs in InvoiceForm."""

    customer_id = serializers.CharField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    status = serializers.ChoiceField(choices=Invoice.Status.choices)


class InvoiceDetailSerializer(serializers.Serializer):
    id = serializers.CharField()
    customer_id = serializers.CharField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    status = serializers.CharField()
    date = serializers.DateField()


class CardDataSerializer(serializers.Serializer):
    number_of_invoices = serializers.IntegerField()
    number_of_customers = serializers.IntegerField()
    total_paid_invoices = MoneyField()
    total_pending_invoices = MoneyField()


class LatestInvoiceSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.EmailField()
    image_url = serializers.CharField()
    amount = serializers.CharField()


class RevenueSerializer(serializers.ModelSerializer):
    class Meta:
        model = Revenue
        fields = ["month", "revenue"]
