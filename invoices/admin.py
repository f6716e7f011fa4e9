from django.contrib import admin
from django.db.models import Count

from .models import Customer, Invoice, Revenue


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'invoice_count')
    search_fields = ('name', 'email')

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(invoice_count=Count('invoices'))

    @admin.display(ordering='invoice_count')
    def invoice_count(self, obj):
        return obj.invoice_count


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = ('id', 'customer', 'formatted_amount', 'status', 'date')
    list_filter = ('status', 'date')
    search_fields = ('id', 'customer__name', 'customer__email')
    list_select_related = ('customer',)
    date_hierarchy = 'date'

    @admin.display(description='Amount', ordering='amount')
    def formatted_amount(self, obj):
        return obj.money.format()


@admin.register(Revenue)
class RevenueAdmin(admin.ModelAdmin):
    list_display = ('month', 'revenue')
