from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command

from invoices.models import Customer, Invoice, Revenue
from invoices.services import InvoiceQueries


@pytest.mark.django_db
class TestSeedDashboard:
    def test_seeds_placeholder_data(self):
        out = StringIO()
        call_command("seed_dashboard", stdout=out)

        assert Customer.objects.count() == 6
        assert Invoice.objects.count() == 13
        assert Revenue.objects.count() == 12
        assert get_user_model().objects.filter(email="user@example.com").exists()
        assert "Seeded 6 customers" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_dashboard", stdout=StringIO())
        call_command("seed_dashboard", stdout=StringIO())

        assert Invoice.objects.count() == 13
        assert get_user_model().objects.filter(email="user@example.com").count() == 1

    def test_seeded_data_feeds_dashboard(self):
        call_command("seed_dashboard", stdout=StringIO())

        queries = InvoiceQueries(parallel=False)
        assert queries.fetch_invoices_pages("") == 3
        assert queries.fetch_card_data().number_of_customers == 6
        assert [row.month for row in queries.fetch_revenue()][:3] == ["Jan", "Feb", "Mar"]


@pytest.mark.django_db
def test_health_check_command():
    out = StringIO()
    call_command("health_check", stdout=out)

    output = out.getvalue()
    assert "Connection:" in output
    assert "All systems are operational!" in output
