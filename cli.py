# cli.py - interactive shell over the CRUD controller
import logging
import sys
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from isp_crud.config import settings
from isp_crud.controller import create_controller, show_status
from isp_crud.exceptions import CrudError
from isp_crud.logging_config import setup_logging
from isp_crud.reports import ProductReportService, UserReportService
from isp_crud.repositories import ProductRepository, UserRepository

logger = logging.getLogger(__name__)

console = Console()
products = ProductRepository()
users = UserRepository()
controller = create_controller(products, users, console=console)
product_reports = ProductReportService(products, console=console)
user_reports = UserReportService(users, console=console)

# Global state for status messages
status_message = "Ready"

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Action wrapper
# ---------------------------
def try_action(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) and returns its result.
    Exceptions are logged, shown in a status panel and turned into None.
    """
    global status_message
    try:
        result = fn(*args, **kwargs)
        if success_msg:
            status_message = success_msg
        return result
    except CrudError as e:
        logger.info("action %s: %s", getattr(fn, "__name__", fn), e)
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None
    except Exception as e:
        logger.exception("action %s failed", getattr(fn, "__name__", fn))
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    return WordCompleter([str(p.id) for p in products.get_all()])


def get_user_completer():
    return WordCompleter([str(u.id) for u in users.get_all()])


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "isp-crud",
        "[bold blue]Products & Users CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_id(message: str, completer=None) -> int:
    while True:
        raw = prompt_with_autocomplete(message, completer=completer).strip()
        try:
            return int(raw)
        except ValueError:
            console.print("[red]Please enter a numeric id.[/red]")


def ask_product_fields(default_name: str = "", default_description: str = "", default_price: float = 10.0, default_stock: int = 1):
    name = prompt_with_autocomplete("Product name", default=default_name)
    description = prompt_with_autocomplete("Description", default=default_description)
    price = ask_float("Price", default=default_price)
    stock = IntPrompt.ask("Stock", default=default_stock)
    return name, description, price, stock


def ask_user_fields(default_username: str = "", default_email: str = "", default_role: str = "USER", default_active: bool = True):
    username = prompt_with_autocomplete("Username", default=default_username)
    email = prompt_with_autocomplete("Email", default=default_email)
    password = Prompt.ask("Password", password=True)
    role = prompt_with_autocomplete(
        "Role", completer=WordCompleter(["ADMIN", "USER", "MODERATOR"]), default=default_role
    )
    active = Confirm.ask("Active?", default=default_active)
    return username, email, password, role, active


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "List products", "7", "List users"),
            ("2", "Get product by ID", "8", "Get user by ID"),
            ("3", "Create product", "9", "Create user"),
            ("4", "Update product", "10", "Update user"),
            ("5", "Delete product", "11", "Delete user"),
            ("6", "Product reports", "12", "User report"),
            ("", "", "q", "Quit")
        ]

        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 13)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            try_action(controller.read_all_products, success_msg="Products loaded")

        elif choice == "2":
            pid = ask_id("Product ID", completer=get_product_completer())
            try_action(controller.read_product, pid)

        elif choice == "3":
            fields = ask_product_fields()
            try_action(controller.create_product, *fields, success_msg=f"Product '{fields[0]}' created")

        elif choice == "4":
            pid = ask_id("Product ID", completer=get_product_completer())
            current = try_action(controller.product_reads.require, pid)
            if current is not None:
                fields = ask_product_fields(current.name, current.description, current.price, current.stock)
                try_action(controller.update_product, pid, *fields)

        elif choice == "5":
            pid = ask_id("Product ID", completer=get_product_completer())
            if Confirm.ask(f"Delete product {pid}?"):
                try_action(controller.delete_product, pid)

        elif choice == "6":
            try_action(product_reports.generate_full_report)
            try_action(product_reports.generate_low_stock_report)
            try_action(product_reports.generate_price_report)

        elif choice == "7":
            try_action(controller.read_all_users, success_msg="Users loaded")

        elif choice == "8":
            uid = ask_id("User ID", completer=get_user_completer())
            try_action(controller.read_user, uid)

        elif choice == "9":
            fields = ask_user_fields()
            try_action(controller.create_user, *fields, success_msg=f"User '{fields[0]}' created")

        elif choice == "10":
            uid = ask_id("User ID", completer=get_user_completer())
            current = try_action(controller.user_reads.require, uid)
            if current is not None:
                fields = ask_user_fields(current.username, current.email, current.role, current.active)
                try_action(controller.update_user, uid, *fields)

        elif choice == "11":
            uid = ask_id("User ID", completer=get_user_completer())
            if Confirm.ask(f"Delete user {uid}?"):
                try_action(controller.delete_user, uid)

        elif choice == "12":
            try_action(user_reports.generate_user_report)

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye![/bold green]"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


def main():
    setup_logging(settings.log_level, settings.log_file)
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
