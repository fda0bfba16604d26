"""Serializer fields shared by the patients and medical apps."""

from rest_framework import serializers


class StrictCharField(serializers.CharField):
    """CharField that rejects non-string input instead of coercing it.

    DRF's CharField happily turns ``123`` into ``"123"``; the API contract
    requires a real JSON string.
    """

    default_error_messages = {
        'not_a_string': 'The {field_name} field must be a string.',
    }

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('not_a_string', field_name=self.field_name.replace('_', ' '))
        return super().to_internal_value(data)
