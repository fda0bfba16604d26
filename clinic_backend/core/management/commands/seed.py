"""
Seed command - creates reproducible demo data.

Usage:
    python manage.py seed           # patients + records (only where missing)
    python manage.py seed --flush   # wipe patients/records first
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from clinic_backend.medical.seeders import seed_records
from clinic_backend.patients.seeders import seed_patients


class Command(BaseCommand):
    help = "Seed database with demo patients and medical records"

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete existing patients and records before seeding.",
        )
        parser.add_argument(
            "--patients",
            type=int,
            default=20,
            help="Number of patients to create (default: 20).",
        )

    def handle(self, *args, **options):
        flush = options.get("flush", False)

        self.stdout.write("=" * 60)
        self.stdout.write("  Clinic records seed")
        self.stdout.write("=" * 60)

        try:
            with transaction.atomic():
                stats = {}

                self.stdout.write("\n[1/2] Seeding patients...")
                patient_stats = seed_patients(flush=flush, count=options["patients"])
                stats.update(patient_stats)
                self._print_stats(patient_stats)

                self.stdout.write("\n[2/2] Seeding medical records...")
                record_stats = seed_records(flush=flush)
                stats.update(record_stats)
                self._print_stats(record_stats)

        except Exception as e:
            self.stderr.write(f"\nSeeding failed: {e}")
            raise

        self.stdout.write(self.style.SUCCESS("\nSeeding finished."))
        for key, value in sorted(stats.items()):
            self.stdout.write(f"  - {key}: {value}")

    def _print_stats(self, stats):
        for key, value in stats.items():
            self.stdout.write(f"  + {key}: {value}")
