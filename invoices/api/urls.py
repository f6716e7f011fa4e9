"""API URL routing for the dashboard."""
from django.urls import path

from . import views

urlpatterns = [
    path('invoices/', views.InvoiceListAPIView.as_view(), name='api-invoice-list'),
    path('invoices/<str:invoice_id>/', views.InvoiceDetailAPIView.as_view(), name='api-invoice-detail'),
    path('customers/', views.CustomerListAPIView.as_view(), name='api-customer-list'),
    path('customers/table/', views.CustomerTableAPIView.as_view(), name='api-customer-table'),
    path('dashboard/cards/', views.CardDataAPIView.as_view(), name='api-dashboard-cards'),
    path('dashboard/latest-invoices/', views.LatestInvoicesAPIView.as_view(), name='api-latest-invoices'),
    path('dashboard/revenue/', views.RevenueAPIView.as_view(), name='api-revenue'),
]
