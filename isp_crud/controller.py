# isp_crud/controller.py
import logging
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from isp_crud.core import ProductIn, UserIn, _make_product, _make_user
from isp_crud.models import Product, User
from isp_crud.repositories import ProductRepository, UserRepository
from isp_crud.services import ProductReadService, ProductWriteService, UserReadService, UserWriteService

logger = logging.getLogger(__name__)


# ---------------------------
# Display helpers
# ---------------------------
def show_products(console: Console, products: List[Product], title: str = "Products") -> None:
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True,
    )
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Price", justify="right")
    table.add_column("Stock", justify="right")

    for p in products:
        table.add_row(str(p.id), escape(p.name), escape(p.description), f"${p.price:.2f}", str(p.stock))
    console.print(table)


def show_users(console: Console, users: List[User], title: str = "Users") -> None:
    if not users:
        console.print("[italic yellow]No users found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold blue",
        title_style="bold magenta",
        show_lines=True,
    )
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Username", style="bold")
    table.add_column("Email")
    table.add_column("Role")
    table.add_column("Active")

    for u in users:
        active = "[green]yes[/green]" if u.active else "[red]no[/red]"
        table.add_row(str(u.id), escape(u.username), escape(u.email), escape(u.role), active)
    console.print(table)


def show_status(message: str, is_success: bool = True) -> Panel:
    style = "green" if is_success else "red"
    # message is plain text and may contain entity names
    return Panel.fit(f"[{style}]{escape(message)}[/{style}]", title="Status")


class CRUDController:
    """Turns simple commands into service calls and prints the outcome.

    Every method returns what the service returned, so callers (and tests)
    can check results without parsing output.
    """

    def __init__(
        self,
        product_reads: ProductReadService,
        product_writes: ProductWriteService,
        user_reads: UserReadService,
        user_writes: UserWriteService,
        console: Optional[Console] = None,
    ):
        self.product_reads = product_reads
        self.product_writes = product_writes
        self.user_reads = user_reads
        self.user_writes = user_writes
        self.console = console or Console()

    # ---------------------------
    # Products
    # ---------------------------
    def create_product(self, name: str, description: str, price: float, stock: int) -> Optional[Product]:
        logger.info("create product %r", name)
        product = _make_product(0, ProductIn(name=name, description=description, price=price, stock=stock))
        if not self.product_writes.create(product):
            self.console.print(show_status(f"Could not create product '{name}'", False))
            return None
        self.console.print(show_status(f"Product created: {product.name} (id {product.id})"))
        return product

    def read_product(self, product_id: int) -> Optional[Product]:
        logger.info("read product %d", product_id)
        product = self.product_reads.get_by_id(product_id)
        if product is None:
            self.console.print(show_status(f"Product {product_id} not found", False))
            return None
        show_products(self.console, [product], title=f"Product {product_id}")
        return product

    def read_all_products(self) -> List[Product]:
        logger.info("read all products")
        products = self.product_reads.get_all()
        show_products(self.console, products, title=f"Products ({len(products)})")
        return products

    def update_product(self, product_id: int, name: str, description: str, price: float, stock: int) -> bool:
        logger.info("update product %d", product_id)
        product = _make_product(product_id, ProductIn(name=name, description=description, price=price, stock=stock))
        ok = self.product_writes.update(product)
        if ok:
            self.console.print(show_status(f"Product {product_id} updated"))
        else:
            self.console.print(show_status(f"Product {product_id} not found, nothing updated", False))
        return ok

    def delete_product(self, product_id: int) -> bool:
        logger.info("delete product %d", product_id)
        ok = self.product_writes.delete(product_id)
        if ok:
            self.console.print(show_status(f"Product {product_id} deleted"))
        else:
            self.console.print(show_status(f"Product {product_id} not found, nothing deleted", False))
        return ok

    def product_exists(self, product_id: int) -> bool:
        return self.product_reads.exists(product_id)

    # ---------------------------
    # Users
    # ---------------------------
    def create_user(self, username: str, email: str, password: str, role: str, active: bool) -> Optional[User]:
        logger.info("create user %r", username)
        user = _make_user(0, UserIn(username=username, email=email, password=password, role=role, active=active))
        if not self.user_writes.create(user):
            self.console.print(show_status(f"Could not create user '{username}'", False))
            return None
        self.console.print(show_status(f"User created: {user.username} (id {user.id})"))
        return user

    def read_user(self, user_id: int) -> Optional[User]:
        logger.info("read user %d", user_id)
        user = self.user_reads.get_by_id(user_id)
        if user is None:
            self.console.print(show_status(f"User {user_id} not found", False))
            return None
        show_users(self.console, [user], title=f"User {user_id}")
        return user

    def read_all_users(self) -> List[User]:
        logger.info("read all users")
        users = self.user_reads.get_all()
        show_users(self.console, users, title=f"Users ({len(users)})")
        return users

    def update_user(self, user_id: int, username: str, email: str, password: str, role: str, active: bool) -> bool:
        logger.info("update user %d", user_id)
        user = _make_user(user_id, UserIn(username=username, email=email, password=password, role=role, active=active))
        ok = self.user_writes.update(user)
        if ok:
            self.console.print(show_status(f"User {user_id} updated"))
        else:
            self.console.print(show_status(f"User {user_id} not found, nothing updated", False))
        return ok

    def delete_user(self, user_id: int) -> bool:
        logger.info("delete user %d", user_id)
        ok = self.user_writes.delete(user_id)
        if ok:
            self.console.print(show_status(f"User {user_id} deleted"))
        else:
            self.console.print(show_status(f"User {user_id} not found, nothing deleted", False))
        return ok

    def user_exists(self, user_id: int) -> bool:
        return self.user_reads.exists(user_id)


def create_controller(
    product_repository: Optional[ProductRepository] = None,
    user_repository: Optional[UserRepository] = None,
    console: Optional[Console] = None,
) -> CRUDController:
    products = product_repository if product_repository is not None else ProductRepository()
    users = user_repository if user_repository is not None else UserRepository()
    return CRUDController(
        ProductReadService(products),
        ProductWriteService.from_repository(products),
        UserReadService(users),
        UserWriteService.from_repository(users),
        console=console,
    )
