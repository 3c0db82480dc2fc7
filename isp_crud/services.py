"""
Read and write services.

A service receives a repository but keeps it typed to the capabilities it
needs. ``ReadService`` only ever sees a ``Readable``; ``WriteService`` sees a
``Creatable``, an ``Updatable`` and a ``Deletable`` and has no read path at
all. Both are thin pass-throughs.
"""

from typing import Generic, List, Optional, TypeVar

from isp_crud.contracts import Creatable, Deletable, Readable, Updatable, Writable
from isp_crud.exceptions import EntityNotFoundError
from isp_crud.models import Product, User

T = TypeVar("T")


class ReadService(Generic[T]):
    entity_name = "Entity"

    def __init__(self, reader: Readable[T]):
        self._reader = reader

    def get_by_id(self, entity_id: int) -> Optional[T]:
        return self._reader.get_by_id(entity_id)

    def get_all(self) -> List[T]:
        return self._reader.get_all()

    def exists(self, entity_id: int) -> bool:
        return self._reader.exists(entity_id)

    def require(self, entity_id: int) -> T:
        """Like ``get_by_id`` but raises ``EntityNotFoundError`` on a miss."""
        entity = self._reader.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity


class WriteService(Generic[T]):
    def __init__(self, creator: Creatable[T], updater: Updatable[T], deleter: Deletable):
        self._creator = creator
        self._updater = updater
        self._deleter = deleter

    @classmethod
    def from_repository(cls, repository: Writable[T]) -> "WriteService[T]":
        return cls(repository, repository, repository)

    def create(self, entity: T) -> bool:
        return self._creator.create(entity)

    def update(self, entity: T) -> bool:
        return self._updater.update(entity)

    def delete(self, entity_id: int) -> bool:
        return self._deleter.delete(entity_id)


class ProductReadService(ReadService[Product]):
    entity_name = "Product"


class ProductWriteService(WriteService[Product]):
    pass


class UserReadService(ReadService[User]):
    entity_name = "User"


class UserWriteService(WriteService[User]):
    pass
