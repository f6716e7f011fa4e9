"""Load placeholder customers, invoices, revenue and a demo user."""
import logging
from datetime import date

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from invoices.models import Customer, Invoice, Revenue

logger = logging.getLogger(__name__)

CUSTOMERS = [
    ("cust_1", "Evil Rabbit", "evil@rabbit.com", "/customers/evil-rabbit.png"),
    ("cust_2", "Delba de Oliveira", "delba@oliveira.com", "/customers/delba-de-oliveira.png"),
    ("cust_3", "Lee Robinson", "lee@robinson.com", "/customers/lee-robinson.png"),
    ("cust_4", "Michael Novotny", "michael@novotny.com", "/customers/michael-novotny.png"),
    ("cust_5", "Amy Burns", "amy@burns.com", "/customers/amy-burns.png"),
    ("cust_6", "Balazs Orban", "balazs@orban.com", "/customers/balazs-orban.png"),
]

# (customer id, amount in cents, status, date)
INVOICES = [
    ("cust_1", 15795, Invoice.Status.PENDING, date(2022, 12, 6)),
    ("cust_2", 20348, Invoice.Status.PENDING, date(2022, 11, 14)),
    ("cust_5", 3040, Invoice.Status.PAID, date(2022, 10, 29)),
    ("cust_4", 44800, Invoice.Status.PAID, date(2023, 9, 10)),
    ("cust_6", 34577, Invoice.Status.PENDING, date(2023, 8, 5)),
    ("cust_3", 54246, Invoice.Status.PENDING, date(2023, 7, 16)),
    ("cust_1", 666, Invoice.Status.PENDING, date(2023, 6, 27)),
    ("cust_4", 32545, Invoice.Status.PAID, date(2023, 6, 9)),
    ("cust_5", 1250, Invoice.Status.PAID, date(2023, 6, 17)),
    ("cust_6", 8546, Invoice.Status.PAID, date(2023, 6, 7)),
    ("cust_2", 500, Invoice.Status.PAID, date(2023, 8, 19)),
    ("cust_6", 8945, Invoice.Status.PAID, date(2023, 6, 3)),
    ("cust_3", 1000, Invoice.Status.PAID, date(2022, 6, 5)),
]

REVENUE = [
    ("Jan", 2000), ("Feb", 1800), ("Mar", 2200), ("Apr", 2500),
    ("May", 2300), ("Jun", 3200), ("Jul", 3500), ("Aug", 3700),
    ("Sep", 2500), ("Oct", 2800), ("Nov", 3000), ("Dec", 4800),
]


class Command(BaseCommand):
    help = "Seed the dashboard with placeholder data"

    def add_arguments(self, parser):
        parser.add_argument("--user-email", default="user@example.com")
        parser.add_argument("--user-password", default="123456")
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete existing invoices, customers and revenue first",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            Invoice.objects.all().delete()
            Customer.objects.all().delete()
            Revenue.objects.all().delete()

        for customer_id, name, email, image_url in CUSTOMERS:
            Customer.objects.update_or_create(
                id=customer_id,
                defaults={"name": name, "email": email, "image_url": image_url},
            )

        created_invoices = 0
        for customer_id, amount, status, invoice_date in INVOICES:
            _, created = Invoice.objects.get_or_create(
                customer_id=customer_id,
                amount=amount,
                status=status,
                date=invoice_date,
            )
            created_invoices += int(created)

        for month, revenue in REVENUE:
            Revenue.objects.update_or_create(month=month, defaults={"revenue": revenue})

        self._ensure_user(options["user_email"], options["user_password"])

        logger.info(f"Seeded {len(CUSTOMERS)} customers and {created_invoices} new invoices")
        self.stdout.write(self.style.SUCCESS(
            f"Seeded {len(CUSTOMERS)} customers, {created_invoices} new invoices, {len(REVENUE)} revenue months"
        ))

    def _ensure_user(self, email, password):
        User = get_user_model()
        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            user = User(username=email.split("@")[0], email=email.lower())
        user.set_password(password)
        user.save()
