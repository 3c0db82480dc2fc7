from typing import Dict, Generic, Iterator, List, Optional, TypeVar

# This file holds the in-memory storage behind each repository.

T = TypeVar("T")


class EntityTable(Generic[T]):
    """Ordered slots plus an id -> slot index.

    Deleting leaves a tombstone (``None``) so the other slots keep their
    positions; once tombstones outnumber live rows the slots are compacted and
    the index rebuilt. Iteration always follows insertion order.
    """

    def __init__(self) -> None:
        self._slots: List[Optional[T]] = []
        self._ids: List[int] = []
        self._index: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, entity_id: int) -> bool:
        return entity_id in self._index

    def __iter__(self) -> Iterator[T]:
        for row in self._slots:
            if row is not None:
                yield row

    def get(self, entity_id: int) -> Optional[T]:
        slot = self._index.get(entity_id)
        if slot is None:
            return None
        return self._slots[slot]

    def append(self, entity_id: int, row: T) -> None:
        if entity_id in self._index:
            raise KeyError(f"duplicate id {entity_id}")
        self._index[entity_id] = len(self._slots)
        self._slots.append(row)
        self._ids.append(entity_id)

    def replace(self, entity_id: int, row: T) -> bool:
        slot = self._index.get(entity_id)
        if slot is None:
            return False
        self._slots[slot] = row
        return True

    def remove(self, entity_id: int) -> bool:
        slot = self._index.pop(entity_id, None)
        if slot is None:
            return False
        self._slots[slot] = None
        if len(self._slots) - len(self._index) > len(self._index):
            self._compact()
        return True

    def _compact(self) -> None:
        slots: List[Optional[T]] = []
        ids: List[int] = []
        index: Dict[int, int] = {}
        for entity_id, row in zip(self._ids, self._slots):
            if row is None:
                continue
            index[entity_id] = len(slots)
            slots.append(row)
            ids.append(entity_id)
        self._slots, self._ids, self._index = slots, ids, index
