from django.db import models


class Patient(models.Model):
    """A clinic patient.

    Owns zero or more ``medical.MedicalRecord`` rows (``medical_records``).
    Deleting a patient removes its records as well.
    """

    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'patients'
        ordering = ['id']
        verbose_name = 'Patient'
        verbose_name_plural = 'Patients'

    def __str__(self) -> str:
        return f"{self.last_name}, {self.first_name}"
