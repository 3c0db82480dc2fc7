# isp_crud/exceptions.py


class CrudError(Exception):
    pass


class EntityNotFoundError(CrudError):
    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
