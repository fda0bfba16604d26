"""Explicit present-or-absent field sets for partial updates."""

from __future__ import annotations

from dataclasses import fields
from typing import Any


class _Unset:
    """Marker for a field that was not part of the request."""

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class Changes:
    """Mixin for frozen dataclasses whose fields default to ``UNSET``."""

    @classmethod
    def from_validated(cls, validated_data: dict):
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in validated_data.items() if key in names})

    def present(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
