"""Serializers for medical records.

Read serializers render rows; the write serializer is the validation layer
for create and update. Writes themselves go through ``medical.services``.
"""

from rest_framework import serializers

from clinic_backend.core.fields import StrictCharField
from clinic_backend.medical.models import MedicalRecord
from clinic_backend.patients.models import Patient
from clinic_backend.patients.serializers import PatientSummarySerializer


class VisitDateField(serializers.DateField):
    """Date field that also takes an ISO datetime and keeps its date part."""

    def to_internal_value(self, value):
        if isinstance(value, str) and 'T' in value:
            value = value.split('T', 1)[0]
        return super().to_internal_value(value)


class PatientIdField(serializers.PrimaryKeyRelatedField):
    """Primary key field that only takes whole numbers.

    The ORM would truncate ``1.5`` to ``1`` during the lookup, so floats,
    booleans and non-digit strings are rejected before it runs.
    """

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, str)):
            self.fail('incorrect_type', data_type=type(data).__name__)
        if isinstance(data, str) and not (data.isascii() and data.isdigit()):
            self.fail('incorrect_type', data_type=type(data).__name__)
        return super().to_internal_value(data)


class MedicalRecordSerializer(serializers.ModelSerializer):
    """Plain record row (no nested patient)."""

    patient_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = MedicalRecord
        fields = [
            'id',
            'patient_id',
            'visit_date',
            'diagnosis',
            'prescription',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class MedicalRecordDetailSerializer(MedicalRecordSerializer):
    """Record row with the owning patient's id and names attached."""

    patient = PatientSummarySerializer(read_only=True)

    class Meta(MedicalRecordSerializer.Meta):
        fields = MedicalRecordSerializer.Meta.fields + ['patient']
        read_only_fields = fields


class MedicalRecordWriteSerializer(serializers.ModelSerializer):
    """Validates create (all fields required) and partial update input."""

    patient_id = PatientIdField(
        source='patient',
        queryset=Patient.objects.all(),
        error_messages={
            'does_not_exist': 'The selected patient id is invalid.',
            'incorrect_type': 'The patient id must be an integer.',
        },
    )
    visit_date = VisitDateField(
        error_messages={'invalid': 'The visit date is not a valid date.'},
    )
    diagnosis = StrictCharField()
    prescription = StrictCharField()

    class Meta:
        model = MedicalRecord
        fields = [
            'patient_id',
            'visit_date',
            'diagnosis',
            'prescription',
        ]
