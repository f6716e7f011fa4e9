import django.db.models.deletion
import django.utils.timezone
import invoices.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Customer',
            fields=[
                ('id', models.CharField(default=invoices.models.generate_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('email', models.EmailField(max_length=254)),
                ('image_url', models.CharField(blank=True, max_length=255)),
            ],
            options={
                'ordering': ['name'],
                'indexes': [models.Index(fields=['email'], name='customer_email_idx')],
            },
        ),
        migrations.CreateModel(
            name='Revenue',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('month', models.CharField(max_length=4, unique=True)),
                ('revenue', models.IntegerField()),
            ],
            options={
                'verbose_name_plural': 'revenue',
            },
        ),
        migrations.CreateModel(
            name='Invoice',
            fields=[
                ('id', models.CharField(default=invoices.models.generate_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('amount', models.BigIntegerField(help_text='Amount in cents')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('paid', 'Paid')], db_index=True, default='pending', max_length=20)),
                ('date', models.DateField(db_index=True, default=django.utils.timezone.localdate)),
                ('customer', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='invoices', to='invoices.customer')),
            ],
            options={
                'ordering': ['-date', 'id'],
                'indexes': [models.Index(fields=['customer', 'status'], name='invoice_customer_status_idx')],
            },
        ),
    ]
