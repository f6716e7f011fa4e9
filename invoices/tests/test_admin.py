"""
Test suite for the Django admin registrations.
"""

from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse

from invoices.models import Customer, Invoice, Revenue


class AdminRegistrationTestCase(TestCase):
    def setUp(self):
        self.admin_user = User.objects.create_superuser(
            username='admin',
            email='admin@example.com',
            password='testpass123',
        )
        self.regular_user = User.objects.create_user(
            username='regular',
            email='regular@example.com',
            password='testpass123',
        )
        customer = Customer.objects.create(id='cust_1', name='Acme', email='a@x.com')
        Invoice.objects.create(customer=customer, amount=123450, status=Invoice.Status.PAID)
        Revenue.objects.create(month='Jan', revenue=2000)

    def test_regular_user_cannot_access_admin(self):
        self.client.force_login(self.regular_user)
        response = self.client.get(reverse('admin:invoices_invoice_changelist'))
        self.assertEqual(response.status_code, 302)

    def test_changelists(self):
        self.client.force_login(self.admin_user)
        for model in ['customer', 'invoice', 'revenue']:
            response = self.client.get(reverse(f'admin:invoices_{model}_changelist'))
            self.assertEqual(response.status_code, 200)

    def test_invoice_changelist_shows_formatted_amount(self):
        self.client.force_login(self.admin_user)
        response = self.client.get(reverse('admin:invoices_invoice_changelist'))
        self.assertContains(response, '$1,234.50')
