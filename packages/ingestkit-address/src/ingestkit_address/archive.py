"""Persistence capability protocols and an in-memory keyed archive.

``Archiver`` and ``Unarchiver`` describe the two halves of a generic
named-field persistence backend.  Any object with matching methods
satisfies them (structural subtyping); ``KeyedArchive`` is the ordered,
dict-backed implementation used by default and in tests.
"""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

__all__ = ["Archiver", "Unarchiver", "KeyedArchive"]


@runtime_checkable
class Archiver(Protocol):
    """Write side of a named-field archive."""

    def encode_text(self, key: str, value: str) -> None: ...


@runtime_checkable
class Unarchiver(Protocol):
    """Read side of a named-field archive."""

    def contains_key(self, key: str) -> bool: ...

    def decode_text(self, key: str) -> Any: ...


class KeyedArchive:
    """Ordered key-value archive that keeps values exactly as written."""

    def __init__(self, fields: dict[str, Any] | None = None) -> None:
        self._fields: dict[str, Any] = dict(fields or {})

    def encode_text(self, key: str, value: str) -> None:
        self._fields[key] = value

    def contains_key(self, key: str) -> bool:
        return key in self._fields

    def decode_text(self, key: str) -> Any:
        """Return the stored value for *key*.

        Raises
        ------
        KeyError
            If *key* was never written.
        """
        return self._fields[key]

    def keys(self) -> list[str]:
        return list(self._fields)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._fields)

    def to_json(self) -> str:
        return json.dumps(self._fields, ensure_ascii=False)

    @classmethod
    def from_json(cls, data: str) -> KeyedArchive:
        """Rebuild an archive from :meth:`to_json` output.

        Raises
        ------
        ValueError
            If *data* is not a JSON object.
        """
        loaded = json.loads(data)
        if not isinstance(loaded, dict):
            raise ValueError("Archive JSON must be an object")
        return cls(loaded)
