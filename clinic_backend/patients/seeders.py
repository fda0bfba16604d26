import random

from django.db import transaction

from .models import Patient

RANDOM_SEED = 42


def seed_patients(flush: bool = False, count: int = 20) -> dict:
    """
    Seeds demo patients.

    Without ``flush`` nothing is created when patients already exist, so the
    command is safe to re-run against a populated database.
    """
    random.seed(RANDOM_SEED)
    stats: dict[str, int] = {"patients": 0}

    with transaction.atomic():
        if flush:
            Patient.objects.all().delete()
        elif Patient.objects.exists():
            return stats

        patients = _seed_patients(count)
        stats["patients"] = len(patients)

    return stats


def _seed_patients(count: int) -> list[Patient]:
    first_names = ["Ali", "Omar", "Sara", "Layla", "Mariam", "Yusuf", "Anna", "Jonas", "Mia", "Lukas"]
    last_names = ["Ahmad", "Haddad", "Khalil", "Schmidt", "Weber", "Fischer", "Becker", "Rahman"]

    return [
        Patient.objects.create(
            first_name=random.choice(first_names),
            last_name=random.choice(last_names),
        )
        for _ in range(count)
    ]
