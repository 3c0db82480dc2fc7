# tests/test_services.py
import pytest

from isp_crud.exceptions import EntityNotFoundError
from isp_crud.models import Product, User
from isp_crud.repositories import ProductRepository, UserRepository
from isp_crud.services import ProductReadService, ProductWriteService, UserReadService, UserWriteService


class ReadOnlyProducts:
    """Implements only the read capability."""

    def __init__(self, *products):
        self.products = list(products)

    def get_by_id(self, entity_id):
        return next((p for p in self.products if p.id == entity_id), None)

    def get_all(self):
        return list(self.products)

    def exists(self, entity_id):
        return any(p.id == entity_id for p in self.products)


class Recorder:
    def __init__(self, result=True):
        self.calls = []
        self.result = result

    def create(self, entity):
        self.calls.append(("create", entity))
        return self.result

    def update(self, entity):
        self.calls.append(("update", entity))
        return self.result

    def delete(self, entity_id):
        self.calls.append(("delete", entity_id))
        return self.result


def test_read_service_works_with_read_only_backend():
    laptop = Product(id=1, name="Laptop", price=1200.00, stock=10)
    svc = ProductReadService(ReadOnlyProducts(laptop))
    assert svc.get_by_id(1) == laptop
    assert svc.get_by_id(2) is None
    assert svc.get_all() == [laptop]
    assert svc.exists(1)
    assert not svc.exists(2)


def test_read_service_exposes_no_mutation():
    svc = ProductReadService(ProductRepository())
    for name in ("create", "update", "delete"):
        assert not hasattr(svc, name)


def test_write_service_exposes_no_reads():
    svc = ProductWriteService.from_repository(ProductRepository())
    for name in ("get_by_id", "get_all", "exists"):
        assert not hasattr(svc, name)


def test_write_service_routes_to_each_capability():
    creator, updater, deleter = Recorder(), Recorder(), Recorder(result=False)
    svc = ProductWriteService(creator, updater, deleter)
    p = Product(name="Mouse", price=25.50, stock=50)

    assert svc.create(p) is True
    assert svc.update(p) is True
    assert svc.delete(7) is False

    assert creator.calls == [("create", p)]
    assert updater.calls == [("update", p)]
    assert deleter.calls == [("delete", 7)]


def test_from_repository_shares_one_backend():
    repo = UserRepository()
    writes = UserWriteService.from_repository(repo)
    reads = UserReadService(repo)

    u = User(username="admin", email="admin@example.com", password="admin123", role="ADMIN")
    assert writes.create(u)
    assert reads.exists(u.id)

    u.role = "MODERATOR"
    assert writes.update(u)
    assert reads.get_by_id(u.id).role == "MODERATOR"

    assert writes.delete(u.id)
    assert reads.get_by_id(u.id) is None


def test_require_raises_not_found():
    reads = UserReadService(UserRepository())
    with pytest.raises(EntityNotFoundError) as exc:
        reads.require(99)
    assert exc.value.entity == "User"
    assert exc.value.entity_id == 99
    assert str(exc.value) == "User 99 not found"


def test_require_returns_entity():
    repo = ProductRepository()
    p = Product(name="Laptop", price=1200.00, stock=10)
    repo.create(p)
    assert ProductReadService(repo).require(p.id) == p
