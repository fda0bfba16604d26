"""Per-patient records list cache.

The cache is never authoritative: a missing entry only means the list gets
rebuilt from the database. Entries expire after
``settings.PATIENT_RECORDS_CACHE_TTL`` seconds and are evicted on every
write to one of the patient's records.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.cache import caches

logger = logging.getLogger(__name__)


class PatientRecordsCache:
    """Thin wrapper around a Django cache backend.

    The backend is passed in so views and tests can swap it; by default the
    alias from ``settings.PATIENT_RECORDS_CACHE_ALIAS`` is used.
    """

    key_template = 'patient.{patient_id}.records'

    def __init__(self, backend=None, ttl: int | None = None):
        if backend is None:
            backend = caches[getattr(settings, 'PATIENT_RECORDS_CACHE_ALIAS', 'default')]
        if ttl is None:
            ttl = getattr(settings, 'PATIENT_RECORDS_CACHE_TTL', 300)
        self.backend = backend
        self.ttl = ttl

    def key(self, patient_id) -> str:
        return self.key_template.format(patient_id=patient_id)

    def get(self, patient_id) -> list[dict] | None:
        return self.backend.get(self.key(patient_id))

    def put(self, patient_id, records: list[dict]) -> None:
        self.backend.set(self.key(patient_id), list(records), timeout=self.ttl)

    def forget(self, patient_id) -> None:
        logger.debug('Evicting records cache (patient_id=%s)', patient_id)
        self.backend.delete(self.key(patient_id))
