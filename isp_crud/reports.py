# isp_crud/reports.py
import logging
from collections import OrderedDict
from typing import Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from isp_crud.config import settings
from isp_crud.contracts import Readable
from isp_crud.models import Product, User

logger = logging.getLogger(__name__)


class ProductReportService:
    """Inventory reports built from read access only.

    The service is handed a ``Readable[Product]``; it cannot create, change
    or delete products, whatever object sits behind that reference.
    """

    def __init__(self, products: Readable[Product], console: Optional[Console] = None, low_stock_threshold: Optional[int] = None):
        self._products = products
        self.console = console or Console()
        self.low_stock_threshold = settings.low_stock_threshold if low_stock_threshold is None else low_stock_threshold

    # Readable pass-through
    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self._products.get_by_id(product_id)

    def get_all(self) -> List[Product]:
        return self._products.get_all()

    def exists(self, product_id: int) -> bool:
        return self._products.exists(product_id)

    # ---------------------------
    # Report data
    # ---------------------------
    def inventory(self) -> List[Product]:
        return self.get_all()

    def low_stock(self, threshold: Optional[int] = None) -> List[Product]:
        limit = self.low_stock_threshold if threshold is None else threshold
        return [p for p in self.get_all() if p.stock < limit]

    def price_ranking(self) -> List[Product]:
        # sorted() is stable, so equal prices keep insertion order
        return sorted(self.get_all(), key=lambda p: p.price, reverse=True)

    # ---------------------------
    # Rendering
    # ---------------------------
    def generate_full_report(self) -> None:
        products = self.inventory()
        table = Table(
            title="Full Inventory Report",
            box=box.ROUNDED,
            min_width=50,
            header_style="bold cyan",
            title_style="bold magenta",
        )
        table.add_column("ID", style="dim", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Price", justify="right")
        table.add_column("Stock", justify="right")
        for p in products:
            table.add_row(str(p.id), escape(p.name), f"${p.price:.2f}", str(p.stock))
        self.console.print(table)

    def generate_low_stock_report(self, threshold: Optional[int] = None) -> None:
        limit = self.low_stock_threshold if threshold is None else threshold
        products = self.low_stock(limit)
        if not products:
            self.console.print("[green]No products with low stock[/green]")
            return

        table = Table(
            title=f"Low Stock Report (stock < {limit})",
            box=box.ROUNDED,
            min_width=50,
            header_style="bold yellow",
            title_style="bold yellow",
        )
        table.add_column("Name", style="bold")
        table.add_column("Stock", justify="right", style="red")
        for p in products:
            table.add_row(escape(p.name), f"{p.stock} units")
        self.console.print(table)
        logger.info("%d product(s) below stock threshold %d", len(products), limit)

    def generate_price_report(self) -> None:
        table = Table(
            title="Products by Price",
            box=box.ROUNDED,
            min_width=50,
            header_style="bold green",
            title_style="bold green",
        )
        table.add_column("Name", style="bold")
        table.add_column("Price", justify="right")
        for p in self.price_ranking():
            table.add_row(escape(p.name), f"${p.price:.2f}")
        self.console.print(table)


class UserReportService:
    def __init__(self, users: Readable[User], console: Optional[Console] = None):
        self._users = users
        self.console = console or Console()

    def active_users(self) -> List[User]:
        return [u for u in self._users.get_all() if u.active]

    def users_by_role(self) -> Dict[str, List[User]]:
        groups: Dict[str, List[User]] = OrderedDict()
        for u in self._users.get_all():
            groups.setdefault(u.role, []).append(u)
        return groups

    def generate_user_report(self) -> None:
        groups = self.users_by_role()
        if not groups:
            self.console.print("[italic yellow]No users found[/italic yellow]")
            return

        table = Table(
            title="Users by Role",
            box=box.ROUNDED,
            min_width=50,
            header_style="bold blue",
            title_style="bold blue",
            show_lines=True,
        )
        table.add_column("Role", style="bold")
        table.add_column("Users")
        table.add_column("Active", justify="right")
        for role, users in groups.items():
            names = ", ".join(escape(u.username) for u in users)
            active = sum(1 for u in users if u.active)
            table.add_row(escape(role), names, f"{active}/{len(users)}")
        self.console.print(table)
