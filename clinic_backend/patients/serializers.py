from rest_framework import serializers

from clinic_backend.core.fields import StrictCharField
from clinic_backend.patients.models import Patient


class PatientReadSerializer(serializers.ModelSerializer):
    """Read-only serializer with all fields."""

    class Meta:
        model = Patient
        fields = [
            'id',
            'first_name',
            'last_name',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class PatientSummarySerializer(serializers.ModelSerializer):
    """Owner summary attached to medical records."""

    class Meta:
        model = Patient
        fields = ['id', 'first_name', 'last_name']
        read_only_fields = fields


class PatientWriteSerializer(serializers.ModelSerializer):
    """Write serializer for create/update operations.

    Both names are required on create. Updates are always partial: a field
    that is sent must still pass the same checks.
    """

    first_name = StrictCharField(max_length=255)
    last_name = StrictCharField(max_length=255)

    class Meta:
        model = Patient
        fields = [
            'first_name',
            'last_name',
        ]
