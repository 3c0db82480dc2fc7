#!/usr/bin/env python
from typing import Optional

from rich.console import Console
from rich.panel import Panel

from isp_crud.config import settings
from isp_crud.controller import CRUDController, create_controller
from isp_crud.logging_config import setup_logging
from isp_crud.reports import ProductReportService, UserReportService
from isp_crud.repositories import ProductRepository, UserRepository


def section(console: Console, title: str) -> None:
    console.print()
    console.rule(f"[bold]{title}[/bold]")


def run(console: Optional[Console] = None) -> CRUDController:
    console = console or Console()
    console.print(Panel.fit("[bold blue]CRUD with segregated interfaces[/bold blue]"))

    products = ProductRepository()
    users = UserRepository()
    controller = create_controller(products, users, console=console)
    # the report services only ever receive read access
    product_reports = ProductReportService(products, console=console)
    user_reports = UserReportService(users, console=console)

    # -----------------------------
    # Create
    # -----------------------------
    section(console, "Creating products")
    controller.create_product("Laptop", "High performance laptop", 1200.00, 10)
    controller.create_product("Mouse", "Ergonomic wireless mouse", 25.50, 50)
    controller.create_product("Teclado", "RGB mechanical keyboard", 89.99, 30)

    section(console, "Creating users")
    controller.create_user("admin", "admin@example.com", "admin123", "ADMIN", True)
    controller.create_user("usuario1", "user1@example.com", "pass123", "USER", True)
    controller.create_user("usuario2", "user2@example.com", "pass456", "USER", False)

    # -----------------------------
    # Read
    # -----------------------------
    section(console, "Reading products")
    controller.read_product(1)
    controller.read_product(2)
    controller.read_product(99)

    section(console, "Listing all products")
    controller.read_all_products()

    section(console, "Reading users")
    controller.read_user(1)
    controller.read_user(2)
    controller.read_user(99)

    section(console, "Listing all users")
    controller.read_all_users()

    # -----------------------------
    # Update
    # -----------------------------
    section(console, "Updating products")
    controller.update_product(1, "Laptop Gaming", "Latest generation gaming laptop", 1500.00, 8)
    controller.update_product(2, "Mouse Gamer", "12,000 DPI gaming mouse", 35.99, 45)

    section(console, "Updating users")
    controller.update_user(2, "usuario2_actualizado", "newuser2@example.com", "newpass", "MODERATOR", True)

    # -----------------------------
    # Exists
    # -----------------------------
    section(console, "Checking existence")
    console.print(f"Product 1 exists? {controller.product_exists(1)}")
    console.print(f"Product 999 exists? {controller.product_exists(999)}")
    console.print(f"User 2 exists? {controller.user_exists(2)}")
    console.print(f"User 999 exists? {controller.user_exists(999)}")

    section(console, "State before deleting")
    controller.read_all_products()
    controller.read_all_users()

    # -----------------------------
    # Delete
    # -----------------------------
    section(console, "Deleting")
    controller.delete_product(3)
    controller.delete_user(3)

    section(console, "State after deleting")
    controller.read_all_products()
    controller.read_all_users()

    # -----------------------------
    # Reports (read-only services)
    # -----------------------------
    section(console, "Reports")
    product_reports.generate_full_report()
    product_reports.generate_low_stock_report()
    product_reports.generate_price_report()
    user_reports.generate_user_report()

    section(console, "Interface segregation")
    console.print(
        "Creatable  -> only creates new entities\n"
        "Readable   -> only reads entities, never modifies them\n"
        "Updatable  -> only replaces existing entities\n"
        "Deletable  -> only removes entities\n\n"
        "ProductReadService and ProductReportService depend on Readable alone.\n"
        "ProductWriteService depends on Creatable, Updatable and Deletable, with no read path."
    )
    console.print(Panel.fit("[bold green]Done[/bold green]"))
    return controller


def main():
    setup_logging(settings.log_level, settings.log_file)
    run()


if __name__ == "__main__":
    main()
