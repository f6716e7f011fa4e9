from __future__ import annotations

import uuid

from django.db import models
from django.utils import timezone

from .money import Money


def generate_id() -> str:
    return str(uuid.uuid4())


class Customer(models.Model):
    id = models.CharField(primary_key=True, max_length=64, default=generate_id, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    image_url = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ['name']
        indexes = [
            models.Index(fields=['email'], name='customer_email_idx'),
        ]

    def __str__(self):
        return self.name


class Invoice(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        PAID = "paid", "Paid"

    id = models.CharField(primary_key=True, max_length=64, default=generate_id, editable=False)
    # Invoices keep their customer alive: deleting a referenced customer is refused.
    customer = models.ForeignKey(Customer, on_delete=models.PROTECT, related_name="invoices")
    amount = models.BigIntegerField(help_text="Amount in cents")
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING, db_index=True)
    date = models.DateField(default=timezone.localdate, db_index=True)

    class Meta:
        ordering = ['-date', 'id']
        indexes = [
            models.Index(fields=['customer', 'status'], name='invoice_customer_status_idx'),
        ]

    def __str__(self):
        return f"{self.customer.name} - {self.money} ({self.status})"

    @property
    def money(self) -> Money:
        return Money.from_minor_units(self.amount)


class Revenue(models.Model):
    MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

    month = models.CharField(max_length=4, unique=True)
    revenue = models.IntegerField()

    class Meta:
        verbose_name_plural = "revenue"

    def __str__(self):
        return f"{self.month}: {self.revenue}"

    @property
    def month_index(self) -> int:
        try:
            return self.MONTHS.index(self.month)
        except ValueError:
            return len(self.MONTHS)
