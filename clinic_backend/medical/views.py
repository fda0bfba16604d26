"""Medical record API views.

Update and delete responses always carry permissive cross-origin headers,
whatever the outcome, because the records screen calls them from another
origin.
"""

import logging

from rest_framework import generics, status
from rest_framework.response import Response

from clinic_backend.core.utils import server_error_response, validation_error_response

from .cache import PatientRecordsCache
from .exceptions import RecordDeleteFailed
from .models import MedicalRecord
from .serializers import (
    MedicalRecordDetailSerializer,
    MedicalRecordSerializer,
    MedicalRecordWriteSerializer,
)
from .services import RecordChanges, create_record, delete_record, update_record

logger = logging.getLogger(__name__)


class RecordsCacheMixin:
    """Supplies the records cache; pass ``records_cache=`` to ``as_view`` to swap it."""

    records_cache = None

    def get_records_cache(self) -> PatientRecordsCache:
        if self.records_cache is not None:
            return self.records_cache
        return PatientRecordsCache()


class CrossOriginHeadersMixin:
    cross_origin_methods = {
        'PUT': 'PUT, OPTIONS',
        'PATCH': 'PUT, OPTIONS',
        'DELETE': 'DELETE, OPTIONS',
    }

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        allowed_methods = self.cross_origin_methods.get(request.method)
        if allowed_methods:
            response['Access-Control-Allow-Origin'] = '*'
            response['Access-Control-Allow-Methods'] = allowed_methods
            response['Access-Control-Allow-Headers'] = 'Content-Type, Accept'
        return response


class MedicalRecordListCreateView(RecordsCacheMixin, generics.ListCreateAPIView):
    """List all records (with patient summary) or create one."""

    def get_queryset(self):
        return MedicalRecord.objects.select_related('patient').all()

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return MedicalRecordWriteSerializer
        return MedicalRecordDetailSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            record = create_record(serializer.validated_data, self.get_records_cache())
        except Exception as exc:
            logger.exception('Error creating medical record: %s', exc)
            return server_error_response('Error creating medical record', exc)

        data = MedicalRecordSerializer(record).data
        return Response(data, status=status.HTTP_201_CREATED, headers=self.get_success_headers(data))


class MedicalRecordDetailView(CrossOriginHeadersMixin, RecordsCacheMixin, generics.RetrieveUpdateDestroyAPIView):
    """Retrieve, update (PUT/PATCH, always partial) or delete a record."""

    serializer_class = MedicalRecordDetailSerializer

    def get_queryset(self):
        return MedicalRecord.objects.select_related('patient').all()

    def _find(self, pk):
        record = self.get_queryset().filter(pk=pk).first()
        if record is None:
            logger.warning('Record not found (id=%s)', pk)
        return record

    def _not_found(self):
        return Response({'message': 'Record not found'}, status=status.HTTP_404_NOT_FOUND)

    def retrieve(self, request, *args, **kwargs):
        record = self._find(kwargs.get('pk'))
        if record is None:
            return self._not_found()
        return Response(self.get_serializer(record).data)

    def update(self, request, *args, **kwargs):
        pk = kwargs.get('pk')
        record = self._find(pk)
        if record is None:
            return self._not_found()

        serializer = MedicalRecordWriteSerializer(
            record,
            data=request.data,
            partial=True,
            context=self.get_serializer_context(),
        )
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        changes = RecordChanges.from_validated(serializer.validated_data)
        try:
            record = update_record(record, changes, self.get_records_cache())
        except Exception as exc:
            logger.exception('Error updating medical record (id=%s): %s', pk, exc)
            return server_error_response('Error updating medical record', exc)

        return Response(MedicalRecordSerializer(record).data, status=status.HTTP_200_OK)

    def destroy(self, request, *args, **kwargs):
        pk = kwargs.get('pk')
        logger.info('Deleting medical record (id=%s)', pk)

        record = self._find(pk)
        if record is None:
            return self._not_found()

        try:
            delete_record(record, self.get_records_cache())
        except RecordDeleteFailed as exc:
            logger.error('Failed to delete record (id=%s)', pk)
            return Response(exc.to_dict(), status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        except Exception as exc:
            logger.exception('Error deleting medical record (id=%s): %s', pk, exc)
            return server_error_response('Error deleting medical record', exc)

        logger.info('Medical record deleted (id=%s, patient_id=%s)', pk, record.patient_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
