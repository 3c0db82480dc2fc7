"""
In-memory repositories.

Each repository implements every capability in ``isp_crud.contracts`` for one
entity type. Entities are copied on the way in and on the way out, so callers
always hold snapshots: changing a returned object does nothing until it is
passed back through ``update``.
"""

import logging
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from isp_crud.database import EntityTable
from isp_crud.models import Product, User

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


class InMemoryRepository(Generic[E]):
    entity_name = "entity"

    def __init__(self) -> None:
        self._table: EntityTable[E] = EntityTable()
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._table)

    # Create
    def create(self, entity: E) -> bool:
        entity.id = self._next_id
        self._next_id += 1
        self._table.append(entity.id, entity.model_copy(deep=True))
        logger.debug("created %s %d", self.entity_name, entity.id)
        return True

    # Read
    def get_by_id(self, entity_id: int) -> Optional[E]:
        row = self._table.get(entity_id)
        if row is None:
            logger.debug("%s %d not found", self.entity_name, entity_id)
            return None
        return row.model_copy(deep=True)

    def get_all(self) -> List[E]:
        return [row.model_copy(deep=True) for row in self._table]

    def exists(self, entity_id: int) -> bool:
        return entity_id in self._table

    # Update
    def update(self, entity: E) -> bool:
        if not self._table.replace(entity.id, entity.model_copy(deep=True)):
            logger.debug("update skipped, %s %d not found", self.entity_name, entity.id)
            return False
        logger.debug("updated %s %d", self.entity_name, entity.id)
        return True

    # Delete
    def delete(self, entity_id: int) -> bool:
        if not self._table.remove(entity_id):
            logger.debug("delete skipped, %s %d not found", self.entity_name, entity_id)
            return False
        logger.debug("deleted %s %d", self.entity_name, entity_id)
        return True


class ProductRepository(InMemoryRepository[Product]):
    entity_name = "product"


class UserRepository(InMemoryRepository[User]):
    entity_name = "user"
