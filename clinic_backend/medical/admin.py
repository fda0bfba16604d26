"""
Medical App - Admin
"""

from django.contrib import admin

from clinic_backend.medical.cache import PatientRecordsCache
from clinic_backend.medical.models import MedicalRecord


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    """Records edited here evict the patient's cached list like API writes do."""

    list_display = ("id", "patient", "visit_date", "diagnosis")
    list_filter = ("visit_date",)
    search_fields = ("diagnosis", "prescription", "patient__last_name")
    ordering = ("-visit_date", "-id")
    list_select_related = ("patient",)
    readonly_fields = ("id", "created_at", "updated_at")

    def save_model(self, request, obj, form, change):
        previous_patient_id = form.initial.get("patient") if change else None
        super().save_model(request, obj, form, change)
        cache = PatientRecordsCache()
        cache.forget(obj.patient_id)
        if previous_patient_id and previous_patient_id != obj.patient_id:
            cache.forget(previous_patient_id)

    def delete_model(self, request, obj):
        patient_id = obj.patient_id
        super().delete_model(request, obj)
        PatientRecordsCache().forget(patient_id)

    def delete_queryset(self, request, queryset):
        patient_ids = set(queryset.values_list("patient_id", flat=True))
        super().delete_queryset(request, queryset)
        cache = PatientRecordsCache()
        for patient_id in patient_ids:
            cache.forget(patient_id)
