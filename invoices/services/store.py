"""
Persistence client handed to the query and action services.

Services never reach for ``Model.objects`` directly; they receive a ``Store``
bound to a database alias. Tests pass doubles in its place.
"""

from django.db import DEFAULT_DB_ALIAS

from ..models import Customer, Invoice, Revenue


class Store:
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def invoices(self):
        return Invoice.objects.using(self.using)

    @property
    def customers(self):
        return Customer.objects.using(self.using)

    @property
    def revenue(self):
        return Revenue.objects.using(self.using)

    def __repr__(self):
        return f"Store(using={self.using!r})"


def default_store() -> Store:
    return Store()
