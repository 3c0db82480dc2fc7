"""
Segregated CRUD capabilities.

Each protocol is one capability and can be consumed on its own: a component
that only reads depends on ``Readable`` and has no mutating method in reach.
Repositories satisfy all four structurally; nothing has to inherit from them.
"""

from typing import List, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Creatable(Protocol[T_contra]):
    def create(self, entity: T_contra) -> bool:
        """Store a new entity, assigning it a fresh id."""
        ...


@runtime_checkable
class Readable(Protocol[T_co]):
    def get_by_id(self, entity_id: int) -> Optional[T_co]:
        """Return the entity with this id, or None."""
        ...

    def get_all(self) -> List[T_co]:
        """Return every entity in insertion order."""
        ...

    def exists(self, entity_id: int) -> bool:
        ...


@runtime_checkable
class Updatable(Protocol[T_contra]):
    def update(self, entity: T_contra) -> bool:
        """Replace the stored entity whose id matches ``entity.id``."""
        ...


@runtime_checkable
class Deletable(Protocol):
    def delete(self, entity_id: int) -> bool:
        ...


class Writable(Creatable[T], Updatable[T], Deletable, Protocol[T]):
    pass


class CrudRepository(Writable[T], Readable[T], Protocol[T]):
    pass
