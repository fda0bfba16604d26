"""
Medical record write errors.

Raised by ``medical.services`` and translated to DRF responses in the views.
"""

from __future__ import annotations

from typing import Any


class MedicalRecordError(Exception):
    """Base exception for record write failures."""

    def to_dict(self) -> dict[str, Any]:
        return {'detail': str(self)}


class RecordDeleteFailed(MedicalRecordError):
    """The row was found but the delete reported zero affected rows."""

    def __init__(self, record_id: int, message: str = 'Unknown error occurred'):
        self.record_id = record_id
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            'message': 'Failed to delete record',
            'error': str(self),
        }
