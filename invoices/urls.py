from django.urls import path
from django.views.generic import RedirectView

from .views import main_views as views
from .views import customer_views
from .views import dashboard_views
from .views import invoice_views

app_name = "invoices"

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='invoices:dashboard'), name='home'),
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),

    path('dashboard/', dashboard_views.dashboard_overview, name='dashboard'),
    path('dashboard/invoices/', invoice_views.invoice_list, name='invoice_list'),
    path('dashboard/invoices/create/', invoice_views.invoice_create, name='invoice_create'),
    path('dashboard/invoices/<str:invoice_id>/edit/', invoice_views.invoice_edit, name='invoice_edit'),
    path('dashboard/invoices/<str:invoice_id>/delete/', invoice_views.invoice_delete, name='invoice_delete'),
    path('dashboard/customers/', customer_views.customer_list, name='customer_list'),
]
