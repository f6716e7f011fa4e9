"""Management command for system health check."""
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from acme.env_validation import get_env_status
from invoices.health import check_cache, check_database
from invoices.models import Customer, Invoice, Revenue


class Command(BaseCommand):
    help = "Run health checks on the database, cache and configuration"

    def handle(self, *args, **options):
        self.stdout.write(self.style.NOTICE("Acme Dashboard Health Check"))
        self.stdout.write("=" * 60)

        checks_passed = 0
        checks_failed = 0

        for check in (self._check_database, self._check_cache, self._check_security):
            passed, failed = check()
            checks_passed += passed
            checks_failed += failed

        self.stdout.write("\n" + "=" * 60)
        self.stdout.write(f"Results: {checks_passed} passed, {checks_failed} failed")

        if checks_failed:
            raise CommandError(f"{checks_failed} check(s) need attention.")
        self.stdout.write(self.style.SUCCESS("\nAll systems are operational!"))

    def _check_database(self):
        self.stdout.write("\n[Database]")
        if not check_database():
            self.stdout.write(f"  Connection: {self.style.ERROR('FAILED')}")
            return 0, 1

        self.stdout.write(f"  Connection: {self.style.SUCCESS('OK')}")
        self.stdout.write(
            f"  Rows: {Customer.objects.count()} customers, "
            f"{Invoice.objects.count()} invoices, {Revenue.objects.count()} revenue months"
        )
        return 1, 0

    def _check_cache(self):
        self.stdout.write("\n[Cache]")
        backend = settings.CACHES["default"]["BACKEND"].rsplit(".", 1)[-1]
        if check_cache():
            self.stdout.write(f"  {backend}: {self.style.SUCCESS('OK')}")
            return 1, 0
        self.stdout.write(f"  {backend}: {self.style.ERROR('FAILED')}")
        return 0, 1

    def _check_security(self):
        self.stdout.write("\n[Security]")
        env_status = get_env_status()
        if not env_status["production"]:
            self.stdout.write(f"  Mode: {self.style.WARNING('Development')}")
            return 0, 0

        missing = [name for name, status in env_status["required"].items() if not status["configured"]]
        if missing:
            self.stdout.write(f"  Missing: {self.style.ERROR(', '.join(missing))}")
            return 0, 1
        if settings.DEBUG:
            self.stdout.write(f"  DEBUG Mode: {self.style.ERROR('Enabled')}")
            return 0, 1

        self.stdout.write(f"  Configuration: {self.style.SUCCESS('OK')}")
        return 1, 0
