"""
Generic partial-update builder.

Collects (field, value) pairs for a single keyed record and compiles them
into one update that sets exactly those fields. Every entity's update path
goes through here; there is no per-entity update code.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class UpdateBuilder:
    """
    Accumulates field assignments for one record.

    Field names are used verbatim. Callers strip immutable attributes (the
    primary key above all) before adding them; `without` exists for that.
    Assigning the same field twice keeps the last value, and `touch`
    overrides whatever the caller supplied for that field.
    """

    def __init__(self, fields: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None):
        self._fields: dict[str, Any] = {}
        if fields:
            items = fields.items() if isinstance(fields, Mapping) else fields
            for name, value in items:
                self.set(name, value)

    def set(self, name: str, value: Any) -> UpdateBuilder:
        if not isinstance(name, str) or not name:
            raise ValueError("Update field names must be non-empty strings")
        self._fields[name] = value
        return self

    def touch(self, name: str, value: Any) -> UpdateBuilder:
        """Force-set a bookkeeping field such as ``updatedAt``."""
        self._fields.pop(name, None)
        return self.set(name, value)

    def without(self, *names: str) -> UpdateBuilder:
        for name in names:
            self._fields.pop(name, None)
        return self

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    def is_empty(self) -> bool:
        return not self._fields

    def apply(self, record: Mapping[str, Any]) -> dict[str, Any]:
        """Merge the assignments into a copy of `record`."""
        merged = dict(record)
        merged.update(self._fields)
        return merged

    def compile(self, key_attribute: str) -> dict[str, Any]:
        """
        Compile to DynamoDB ``UpdateItem`` keyword arguments.

        Names and values go through placeholders so reserved words
        (``status``, ``name``, ``timestamp``) need no special casing. The
        ``attribute_exists`` condition keeps the update from creating a
        record for an unknown key.
        """
        if self.is_empty():
            raise ValueError("Nothing to update")

        assignments = []
        names = {"#pk": key_attribute}
        values = {}
        for index, (name, value) in enumerate(self._fields.items()):
            assignments.append(f"#f{index} = :v{index}")
            names[f"#f{index}"] = name
            values[f":v{index}"] = value

        return {
            "UpdateExpression": "SET " + ", ".join(assignments),
            "ConditionExpression": "attribute_exists(#pk)",
            "ExpressionAttributeNames": names,
            "ExpressionAttributeValues": values,
            "ReturnValues": "ALL_NEW",
        }

    def __repr__(self) -> str:
        return f"UpdateBuilder({sorted(self._fields)})"
