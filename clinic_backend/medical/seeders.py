import random
from datetime import date, timedelta

from django.db import transaction

from clinic_backend.patients.models import Patient

from .cache import PatientRecordsCache
from .models import MedicalRecord

RANDOM_SEED = 42

DIAGNOSES = [
    ("Acute bronchitis", "Rest, fluids, dextromethorphan 15mg as needed"),
    ("Hypertension", "Lisinopril 10mg once daily"),
    ("Type 2 diabetes", "Metformin 500mg twice daily"),
    ("Migraine", "Sumatriptan 50mg at onset"),
    ("Seasonal allergies", "Cetirizine 10mg once daily"),
    ("Lower back pain", "Ibuprofen 400mg three times daily, physiotherapy"),
    ("Otitis media", "Amoxicillin 500mg three times daily for 7 days"),
]


def seed_records(flush: bool = False, per_patient: int = 3) -> dict:
    """
    Seeds up to ``per_patient`` records for each patient without records.

    Touched patients get their cached records list evicted.
    """
    random.seed(RANDOM_SEED)
    stats: dict[str, int] = {"medical_records": 0}
    cache = PatientRecordsCache()
    today = date.today()

    with transaction.atomic():
        if flush:
            MedicalRecord.objects.all().delete()

        patients = Patient.objects.filter(medical_records__isnull=True).order_by("id")
        for patient in patients:
            for _ in range(random.randint(1, per_patient)):
                diagnosis, prescription = random.choice(DIAGNOSES)
                MedicalRecord.objects.create(
                    patient=patient,
                    visit_date=today - timedelta(days=random.randint(0, 730)),
                    diagnosis=diagnosis,
                    prescription=prescription,
                )
                stats["medical_records"] += 1
            cache.forget(patient.pk)

    return stats
