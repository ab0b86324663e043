"""
Record sets: a collection of records of a single kind, keyed by name.

A set is either empty (no kind at all) or bound to one record kind.
Records keep insertion order, so documents written from a set are
deterministic, and lookup by name is a dict access.
"""

from collections.abc import Iterable, Iterator

from brewcalc.exceptions import RecordSetError
from brewcalc.models import Record, RecordKind


class RecordSet:
    """
    Either nothing, or a name-keyed collection of one kind of record.

    Use ``RecordSet.empty()`` for the former. A set bound to a kind may
    itself hold no records; it is still written as an (empty) container.
    """

    def __init__(self, kind: RecordKind | str | None = None, records: Iterable[Record] = ()):
        if isinstance(kind, str):
            kind = RecordKind(kind)
        self._kind = kind
        self._records: dict[str, Record] = {}
        for record in records:
            self.add(record)

    @classmethod
    def empty(cls) -> "RecordSet":
        """The set with no kind and no records."""
        return cls()

    @classmethod
    def of(cls, records: Iterable[Record]) -> "RecordSet":
        """
        Build a set from records, inferring the kind from the first one.

        Raises:
            RecordSetError: If there are no records, or they are mixed
        """
        records = list(records)
        if not records:
            raise RecordSetError("Cannot infer a record kind from no records")
        return cls(RecordKind.of(records[0]), records)

    @property
    def kind(self) -> RecordKind | None:
        return self._kind

    @property
    def is_empty(self) -> bool:
        """True for the kindless empty set."""
        return self._kind is None

    def add(self, record: Record) -> None:
        """
        Add a record under its name.

        Raises:
            RecordSetError: If the set is kindless, the record is of another
                kind, or a record with the same name is already present
        """
        if self._kind is None:
            raise RecordSetError("Cannot add records to the empty record set")
        kind = RecordKind.of(record)
        if kind is not self._kind:
            raise RecordSetError(
                f"Cannot add a {kind.value} record to a {self._kind.value} set"
            )
        if record.name in self._records:
            raise RecordSetError(f"Duplicate {kind.value} record: {record.name!r}")
        self._records[record.name] = record

    def get(self, name: str) -> Record | None:
        return self._records.get(name)

    def names(self) -> list[str]:
        return list(self._records)

    def __getitem__(self, name: str) -> Record:
        return self._records[name]

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        if self._kind is None:
            return "RecordSet.empty()"
        return f"RecordSet({self._kind.value!r}, {len(self)} records)"
