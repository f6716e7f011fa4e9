from django.contrib.auth.models import User
from django.test import TestCase, override_settings
from django.urls import reverse

from invoices.models import Customer, Invoice


@override_settings(DASHBOARD_PARALLEL_QUERIES=False)
class CoreWorkflowsTest(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='owner', email='owner@example.com', password='testpass123')
        self.customer = Customer.objects.create(id='cust_1', name='Acme', email='a@x.com')

    def test_home_redirects_to_login_when_anonymous(self):
        response = self.client.get(reverse('invoices:home'), follow=True)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.redirect_chain[-1][0], '/login/?next=/dashboard/')

    def test_dashboard_pages_require_login(self):
        for url_name in ['dashboard', 'invoice_list', 'invoice_create', 'customer_list']:
            response = self.client.get(reverse(f'invoices:{url_name}'))
            self.assertEqual(response.status_code, 302)

    def test_invoice_lifecycle(self):
        self.client.post(reverse('invoices:login'), {'email': 'owner@example.com', 'password': 'testpass123'})

        response = self.client.post(
            reverse('invoices:invoice_create'),
            {'customer_id': 'cust_1', 'amount': '120.00', 'status': 'pending'},
        )
        self.assertRedirects(response, reverse('invoices:invoice_list'))
        invoice = Invoice.objects.get()

        listing = self.client.get(reverse('invoices:invoice_list')).json()
        self.assertEqual(listing['invoices'][0]['amount'], '$120.00')

        self.client.post(
            reverse('invoices:invoice_edit', args=[invoice.id]),
            {'customer_id': 'cust_1', 'amount': '120.00', 'status': 'paid'},
        )
        listing = self.client.get(reverse('invoices:invoice_list')).json()
        self.assertEqual(listing['invoices'][0]['status'], 'paid')

        overview = self.client.get(reverse('invoices:dashboard')).json()
        self.assertEqual(overview['cards']['collected'], '$120.00')

        response = self.client.post(reverse('invoices:invoice_delete', args=[invoice.id]))
        self.assertEqual(response.status_code, 200)
        listing = self.client.get(reverse('invoices:invoice_list')).json()
        self.assertEqual(listing['invoices'], [])
        self.assertEqual(listing['total_pages'], 0)
