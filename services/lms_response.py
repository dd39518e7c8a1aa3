"""
Typed access to LMS JSON-RPC results.

The server answers every command with a flat ``result`` mapping whose values
are plain JSON. ``LmsResponse`` is the only place raw values are inspected;
everything past it works with typed values or gets an explicit error.
"""

from __future__ import annotations

from typing import Any, Mapping

from models.errors import FieldMissing, FieldTypeMismatch


class LmsResponse:
    """Read-only view over one ``result`` mapping (or one entry of a ``*_loop`` array)."""

    def __init__(self, result: Mapping[str, Any]):
        self._result = result

    def __contains__(self, key: str) -> bool:
        return key in self._result

    def __repr__(self) -> str:
        return f"LmsResponse({dict(self._result)!r})"

    def _get(self, key: str) -> Any:
        try:
            return self._result[key]
        except KeyError:
            raise FieldMissing(key) from None

    def get_int(self, key: str) -> int:
        """Return a JSON integer of either sign.

        Raises:
            FieldMissing: If the key is absent.
            FieldTypeMismatch: If the value is not an integer.
        """
        value = self._get(key)
        # bool is an int subclass; JSON true/false is never a number
        if isinstance(value, bool) or not isinstance(value, int):
            raise FieldTypeMismatch(key, "int", value)
        return value

    def get_uint(self, key: str) -> int:
        """Return a non-negative JSON integer.

        Raises:
            FieldMissing: If the key is absent.
            FieldTypeMismatch: If the value is not a non-negative integer.
        """
        value = self._get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise FieldTypeMismatch(key, "uint", value)
        return value

    def get_float(self, key: str) -> float:
        """Return a JSON number as float. Integers are numbers too.

        Raises:
            FieldMissing: If the key is absent.
            FieldTypeMismatch: If the value is not a number.
        """
        value = self._get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FieldTypeMismatch(key, "float", value)
        return float(value)

    def get_str(self, key: str) -> str:
        """Return a JSON string.

        Raises:
            FieldMissing: If the key is absent.
            FieldTypeMismatch: If the value is not a string.
        """
        value = self._get(key)
        if not isinstance(value, str):
            raise FieldTypeMismatch(key, "string", value)
        return value

    def get_array(self, key: str) -> list[Any]:
        """Return a JSON array.

        Raises:
            FieldMissing: If the key is absent.
            FieldTypeMismatch: If the value is not an array.
        """
        value = self._get(key)
        if not isinstance(value, list):
            raise FieldTypeMismatch(key, "array", value)
        return value

    def get_records(self, key: str) -> list[LmsResponse]:
        """Return a JSON array of objects, each wrapped in its own accessor.

        Raises:
            FieldMissing: If the key is absent.
            FieldTypeMismatch: If the value is not an array of objects.
        """
        records = []
        for item in self.get_array(key):
            if not isinstance(item, dict):
                raise FieldTypeMismatch(key, "array of objects", item)
            records.append(LmsResponse(item))
        return records
