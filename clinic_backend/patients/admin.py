"""
Patients App - Admin
"""

from django.contrib import admin
from django.db.models import Count

from clinic_backend.medical.cache import PatientRecordsCache
from clinic_backend.patients.models import Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ("id", "last_name", "first_name", "record_count", "created_at")
    search_fields = ("first_name", "last_name")
    ordering = ("last_name", "first_name")
    list_per_page = 50
    readonly_fields = ("id", "created_at", "updated_at")

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(record_total=Count("medical_records"))

    @admin.display(description="Records", ordering="record_total")
    def record_count(self, obj):
        return obj.record_total

    def delete_model(self, request, obj):
        patient_id = obj.pk
        super().delete_model(request, obj)
        PatientRecordsCache().forget(patient_id)

    def delete_queryset(self, request, queryset):
        patient_ids = list(queryset.values_list("pk", flat=True))
        super().delete_queryset(request, Patient.objects.filter(pk__in=patient_ids))
        cache = PatientRecordsCache()
        for patient_id in patient_ids:
            cache.forget(patient_id)
