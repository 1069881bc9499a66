"""
Flat name -> value records shared by the DNS parser and the system collector.

A record has one designated field (its header, e.g. "RecordName" or
"DeviceID") that is set first and never replaced. Every other field is
optional; two records of the same collection may carry different fields.
"""

import re
from types import MappingProxyType

_KEY_STRIP_RE = re.compile(r"[\s.()\-]")


def normalize_key(raw: str) -> str:
    """'A (Host) Record . . . ' -> 'AHostRecord'"""
    return _KEY_STRIP_RE.sub("", raw)


class Record:
    """An immutable, ordered mapping of field name to string value."""

    __slots__ = ("name_field", "_fields")

    def __init__(self, name_field: str, name: str, properties=None):
        fields = {name_field: name}
        for key, value in (properties or {}).items():
            if key and key != name_field:
                fields[key] = value
        self.name_field = name_field
        self._fields = MappingProxyType(fields)

    @property
    def name(self) -> str:
        return self._fields[self.name_field]

    @property
    def fields(self):
        return self._fields

    def properties(self):
        """(label, value) pairs except the designated field, in insertion order."""
        return [(k, v) for k, v in self._fields.items() if k != self.name_field]

    def get(self, key, default=None):
        return self._fields.get(key, default)

    def __getitem__(self, key):
        return self._fields[key]

    def __contains__(self, key):
        return key in self._fields

    def __eq__(self, other):
        if not isinstance(other, Record):
            return NotImplemented
        return (self.name_field == other.name_field
                and list(self._fields.items()) == list(other._fields.items()))

    def __repr__(self):
        return f"Record({self.name_field}={self.name!r}, {len(self._fields) - 1} field(s))"


class RecordBuilder:
    """Mutable accumulator used while a block is being scanned."""

    def __init__(self, name_field: str, name: str):
        self.name_field = name_field
        self.name = name
        self._properties = {}

    def set(self, key: str, value: str) -> bool:
        # the designated field is fixed by the block header
        if not key or key == self.name_field:
            return False
        self._properties[key] = value
        return True

    def build(self) -> Record:
        return Record(self.name_field, self.name, self._properties)
