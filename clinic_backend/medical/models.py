"""Medical record model.

A record always belongs to exactly one ``patients.Patient``. The records of
a patient are read newest ``visit_date`` first; the composite index backs
that lookup.
"""

from django.db import models

from clinic_backend.patients.models import Patient


class MedicalRecord(models.Model):
    patient = models.ForeignKey(
        Patient,
        on_delete=models.CASCADE,
        related_name='medical_records',
    )
    visit_date = models.DateField()
    diagnosis = models.TextField()
    prescription = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'medical_records'
        ordering = ['id']
        verbose_name = 'Medical record'
        verbose_name_plural = 'Medical records'
        indexes = [
            models.Index(fields=['patient', 'visit_date'], name='medrec_patient_visit_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.visit_date} {self.diagnosis[:40]} (patient_id={self.patient_id})"
