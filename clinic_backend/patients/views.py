from rest_framework import generics, status
from rest_framework.response import Response

from clinic_backend.core.utils import validation_error_response
from clinic_backend.medical.services import refresh_patient_records
from clinic_backend.medical.views import RecordsCacheMixin
from clinic_backend.patients.models import Patient
from clinic_backend.patients.serializers import PatientReadSerializer, PatientWriteSerializer
from clinic_backend.patients.services import (
    PatientChanges,
    create_patient,
    delete_patient,
    update_patient,
)


class PatientListCreateView(generics.ListCreateAPIView):
    """List all patients or create a new patient."""

    def get_queryset(self):
        return Patient.objects.all()

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return PatientWriteSerializer
        return PatientReadSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        patient = create_patient(serializer.validated_data)
        data = PatientReadSerializer(patient).data
        return Response(data, status=status.HTTP_201_CREATED, headers=self.get_success_headers(data))


class PatientDetailView(RecordsCacheMixin, generics.RetrieveUpdateDestroyAPIView):
    """Retrieve, update (PUT/PATCH, always partial) or delete a patient."""

    serializer_class = PatientReadSerializer

    def get_queryset(self):
        return Patient.objects.all()

    def update(self, request, *args, **kwargs):
        patient = self.get_object()

        serializer = PatientWriteSerializer(
            patient,
            data=request.data,
            partial=True,
            context=self.get_serializer_context(),
        )
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        patient = update_patient(patient, PatientChanges.from_validated(serializer.validated_data))
        return Response(PatientReadSerializer(patient).data, status=status.HTTP_200_OK)

    def destroy(self, request, *args, **kwargs):
        patient = self.get_object()
        delete_patient(patient, self.get_records_cache())
        return Response(status=status.HTTP_204_NO_CONTENT)


class PatientRecordsView(RecordsCacheMixin, generics.GenericAPIView):
    """A patient's records, newest visit first, re-read and re-cached on every call."""

    def get_queryset(self):
        return Patient.objects.all()

    def get(self, request, *args, **kwargs):
        patient = self.get_object()
        records = refresh_patient_records(patient.pk, self.get_records_cache())
        return Response(records, status=status.HTTP_200_OK)
