"""Identity-keyed in-memory collection with monotonic id assignment."""

from collections.abc import Iterator, Mapping
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class EntityCollection(Mapping[int, T], Generic[T]):
    """Records of one entity kind keyed by integer id.

    Ids start at 1 and are handed out by ``allocate_id``. They are never
    reused, since nothing is ever deleted.
    """

    def __init__(self, kind: str):
        self.kind = kind
        self._records: dict[int, T] = {}
        self._next_id = 1

    def allocate_id(self) -> int:
        """Reserve and return the next id."""
        entity_id = self._next_id
        self._next_id += 1
        return entity_id

    def put(self, record: T) -> T:
        """Insert or replace a record under its own id."""
        self._records[record.id] = record  # type: ignore[attr-defined]
        return record

    def merge(self, entity_id: int, changes: dict) -> T | None:
        """Shallow-merge ``changes`` onto a stored record.

        Fields absent from ``changes`` are left untouched.

        Returns:
            The merged record, or None if the id is unknown.
        """
        record = self._records.get(entity_id)
        if record is None:
            return None
        merged = record.model_copy(update=changes)
        self._records[entity_id] = merged
        return merged

    def __getitem__(self, entity_id: int) -> T:
        return self._records[entity_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
