# tests/test_reports.py
from rich.console import Console

from isp_crud.models import Product, User
from isp_crud.reports import ProductReportService, UserReportService
from isp_crud.repositories import ProductRepository, UserRepository


def make_console():
    return Console(record=True, width=120)


def product_repo():
    repo = ProductRepository()
    repo.create(Product(name="Laptop", price=1200.00, stock=10))
    repo.create(Product(name="Mouse", price=25.50, stock=50))
    repo.create(Product(name="Teclado", price=89.99, stock=8))
    return repo


def test_low_stock_selects_stock_below_twenty():
    reports = ProductReportService(product_repo(), console=make_console(), low_stock_threshold=20)
    assert [p.stock for p in reports.low_stock()] == [10, 8]


def test_low_stock_threshold_override():
    reports = ProductReportService(product_repo(), console=make_console(), low_stock_threshold=20)
    assert [p.name for p in reports.low_stock(9)] == ["Teclado"]
    assert reports.low_stock(8) == []


def test_price_ranking_descending():
    reports = ProductReportService(product_repo(), console=make_console())
    assert [p.name for p in reports.price_ranking()] == ["Laptop", "Teclado", "Mouse"]


def test_price_ranking_ties_keep_insertion_order():
    repo = ProductRepository()
    for name in ("a", "b", "c"):
        repo.create(Product(name=name, price=10.0, stock=1))
    reports = ProductReportService(repo, console=make_console())
    assert [p.name for p in reports.price_ranking()] == ["a", "b", "c"]


def test_inventory_is_insertion_order():
    reports = ProductReportService(product_repo(), console=make_console())
    assert [p.id for p in reports.inventory()] == [1, 2, 3]


def test_report_service_has_no_mutation():
    reports = ProductReportService(product_repo(), console=make_console())
    for name in ("create", "update", "delete"):
        assert not hasattr(reports, name)


def test_rendered_reports():
    console = make_console()
    reports = ProductReportService(product_repo(), console=console, low_stock_threshold=20)
    reports.generate_full_report()
    reports.generate_low_stock_report()
    reports.generate_price_report()
    out = console.export_text()
    assert "Full Inventory Report" in out
    assert "$1200.00" in out
    assert "Low Stock Report (stock < 20)" in out
    assert "8 units" in out
    assert "50 units" not in out
    assert "Products by Price" in out


def test_low_stock_report_when_nothing_is_low():
    console = make_console()
    reports = ProductReportService(product_repo(), console=console, low_stock_threshold=5)
    reports.generate_low_stock_report()
    assert "No products with low stock" in console.export_text()


def user_repo():
    repo = UserRepository()
    repo.create(User(username="admin", email="admin@example.com", password="admin123", role="ADMIN"))
    repo.create(User(username="usuario1", email="user1@example.com", password="pass123", role="USER"))
    repo.create(User(username="usuario2", email="user2@example.com", password="pass456", role="USER", active=False))
    return repo


def test_user_report_groups_and_active():
    reports = UserReportService(user_repo(), console=make_console())
    assert [u.username for u in reports.active_users()] == ["admin", "usuario1"]
    groups = reports.users_by_role()
    assert list(groups) == ["ADMIN", "USER"]
    assert [u.username for u in groups["USER"]] == ["usuario1", "usuario2"]


def test_user_report_never_prints_passwords():
    console = make_console()
    UserReportService(user_repo(), console=console).generate_user_report()
    out = console.export_text()
    assert "Users by Role" in out
    assert "1/2" in out
    for secret in ("admin123", "pass123", "pass456"):
        assert secret not in out


def test_user_report_empty():
    console = make_console()
    UserReportService(UserRepository(), console=console).generate_user_report()
    assert "No users found" in console.export_text()


def test_reports_render_bracketed_names_verbatim():
    repo = ProductRepository()
    repo.create(Product(name="Cable [/usb]", price=5.0, stock=3))
    repo.create(Product(name="[bold]Mouse", price=25.50, stock=50))
    console = make_console()
    reports = ProductReportService(repo, console=console, low_stock_threshold=20)
    reports.generate_full_report()
    reports.generate_low_stock_report()
    reports.generate_price_report()
    out = console.export_text()
    assert out.count("Cable [/usb]") == 3
    assert out.count("[bold]Mouse") == 2


def test_user_report_renders_bracketed_text_verbatim():
    repo = UserRepository()
    repo.create(User(username="[guest]", email="g@example.com", password="pw", role="[/x]"))
    console = make_console()
    UserReportService(repo, console=console).generate_user_report()
    out = console.export_text()
    assert "[guest]" in out
    assert "[/x]" in out
