"""Menu screens for logging in, registering and managing the product list."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import Callable, Sequence

from .accounts import Account, AccountStore
from .catalog import Catalog
from .menu import render_option, step_selection
from .reports import graph_lines, product_row, table_header, write_product_info
from .terminal import Key, Terminal

ENTER_USERNAME = "Enter Username"
HIDDEN_LOGIN_FIELD = "Enter Password"
HIDDEN_REGISTRATION_FIELD = "Enter password"


class UserInterface:
    """Interactive menus driven by arrow keys and Enter."""

    def __init__(
        self,
        terminal: Terminal | None = None,
        product_info_path: str | PathLike[str] = "productInfoFile.txt",
    ) -> None:
        self.terminal = terminal if terminal is not None else Terminal()
        self.product_info_path = product_info_path

    # drawing helpers

    def _open(self, *headings: str) -> None:
        term = self.terminal
        term.clear()
        term.draw_border()
        term.write("\n\n")
        for heading in headings:
            term.center_text(heading)

    def _close(self) -> None:
        self.terminal.write("\n\n")
        self.terminal.draw_border()

    def _draw_options(
        self, labels: Sequence[str], selected: int, wide: bool
    ) -> None:
        for index, label in enumerate(labels):
            self.terminal.center_text(
                render_option(label, index == selected, wide) + "\n"
            )

    @staticmethod
    def _move(
        options: Sequence[str], selected: int, key: Key, skip_blank: bool = True
    ) -> int:
        step = {Key.UP: -1, Key.DOWN: 1}.get(key)
        if step is None:
            return selected
        if skip_blank:
            return step_selection(options, selected, step)
        return (selected + step) % len(options)

    # main menu and accounts

    def landing_screen(self, options: Sequence[str]) -> int:
        """Show the main menu and return the chosen option, counting from one."""
        selected = 0
        while True:
            self._open("SELLARITY\n", "Sales Management System\n\n")
            self._draw_options(options, selected, wide=True)
            self._close()
            key = self.terminal.read_key()
            if key is Key.ENTER:
                if options[selected]:
                    return selected + 1
            else:
                selected = self._move(options, selected, key)

    def _login(
        self,
        title: str,
        role: str,
        options: Sequence[str],
        accounts: AccountStore,
        on_success: Callable[[], object],
        read: Callable[[str], str],
    ) -> bool:
        term = self.terminal
        username = ""
        hidden_entry = ""
        selected = 0
        logged_in = False
        while True:
            labels = []
            for option in options:
                if option == ENTER_USERNAME and username:
                    option = f"{option}: {username}"
                elif option == HIDDEN_LOGIN_FIELD and hidden_entry:
                    option = f"{option}: {'*' * len(hidden_entry)}"
                labels.append(option)
            self._open(title)
            self._draw_options(labels, selected, wide=False)
            self._close()

            key = term.read_key()
            if key is not Key.ENTER:
                selected = self._move(options, selected, key)
                continue
            choice = options[selected]
            if not choice:
                continue
            if choice == ENTER_USERNAME:
                term.clear()
                username = read("Enter Username: ")
            elif choice == HIDDEN_LOGIN_FIELD:
                term.clear()
                hidden_entry = read(f"{HIDDEN_LOGIN_FIELD}: ")
            elif choice == "Log In":
                if accounts.authenticate(username, hidden_entry):
                    term.clear()
                    on_success()
                    logged_in = True
                    if not term.confirm(f"Continue as {role}? (Y/N): "):
                        return logged_in
                else:
                    term.center_text("Invalid username or password.\n")
                    if not term.confirm("Try again? (Y/N): "):
                        return logged_in
            elif choice == "Back":
                return logged_in

    def login_admin(
        self,
        options: Sequence[str],
        accounts: AccountStore,
        on_success: Callable[[], object],
    ) -> bool:
        """Administrator login; runs ``on_success`` for each good login.

        Returns whether any login succeeded before leaving the screen.
        """
        return self._login(
            "== LOGIN AS ADMIN ==\n\n",
            "admin",
            options,
            accounts,
            on_success,
            self.terminal.read_line,
        )

    def login_customer(
        self,
        options: Sequence[str],
        accounts: AccountStore,
        on_success: Callable[[], object],
    ) -> bool:
        """Customer login; runs ``on_success`` for each good login.

        Returns whether any login succeeded before leaving the screen.
        """
        return self._login(
            "== LOGIN AS CUSTOMER ==\n\n",
            "Customer",
            options,
            accounts,
            on_success,
            self.terminal.read_word,
        )

    def register_customer(
        self, options: Sequence[str], accounts: AccountStore
    ) -> Account | None:
        """Registration form; returns the new account, or None on Back."""
        term = self.terminal
        hidden_prompt = "Enter you " + HIDDEN_REGISTRATION_FIELD[len("Enter "):] + ": "
        fields = {
            "Enter a username": ("Enter a username: ", False),
            "Enter Name": ("Enter customer name: ", False),
            "Enter Contact": ("Enter you Contact No#: ", False),
            HIDDEN_REGISTRATION_FIELD: (hidden_prompt, True),
        }
        values = dict.fromkeys(fields, "")
        selected = 0
        while True:
            labels = []
            for option in options:
                value = values.get(option, "")
                if value:
                    shown = "*" * len(value) if fields[option][1] else value
                    option = f"{option}: {shown}"
                labels.append(option)
            self._open("== REGISTRATION ==\n\n")
            self._draw_options(labels, selected, wide=False)
            self._close()

            key = term.read_key()
            if key is not Key.ENTER:
                selected = self._move(options, selected, key)
                continue
            choice = options[selected]
            if not choice:
                continue
            if choice in fields:
                term.clear()
                values[choice] = term.read_line(fields[choice][0])
            elif choice == "Submit":
                username = values["Enter a username"]
                account = accounts.create_user(
                    username,
                    values["Enter Name"],
                    values["Enter Contact"],
                    values[HIDDEN_REGISTRATION_FIELD],
                )
                term.center_text(f"Successfully registered user{username}\n")
                term.pause()
                return account
            elif choice == "Back":
                return None

    # administrator screens

    def admin_menu(self, options: Sequence[str]) -> int:
        """Show the admin menu and return the chosen option, counting from one."""
        selected = 0
        while True:
            self._open("== ADMIN PANEL ==\n\n")
            self._draw_options(options, selected, wide=True)
            self._close()
            key = self.terminal.read_key()
            if key is Key.ENTER:
                return selected + 1
            selected = self._move(options, selected, key, skip_blank=False)

    def add_panel(self, options: Sequence[str], catalog: Catalog) -> None:
        """Form for adding a product to the catalogue."""
        term = self.terminal
        name = price = ""
        selected = 0
        while True:
            labels = []
            for option in options:
                if option == "Enter a new product" and name:
                    option = f"{option}: {name}"
                elif option == "Enter a price for product" and price:
                    option = f"{option} {name}: {price}"
                labels.append(option)
            self._open("[ YOU ARE ADDING A PRODUCT ]\n\n")
            self._draw_options(labels, selected, wide=False)
            self._close()

            key = term.read_key()
            if key is not Key.ENTER:
                selected = self._move(options, selected, key)
                continue
            choice = options[selected]
            if not choice:
                continue
            if choice == "Enter a new product":
                term.clear()
                name = term.read_line("Enter a new product name: ")
            elif choice == "Enter a price for product":
                term.clear()
                price = term.read_line(f"Enter price for {name}: ")
            elif choice == "Submit":
                try:
                    catalog.add_product(name, price)
                except ValueError:
                    term.center_text("Invalid input. Please enter a valid number.\n")
                else:
                    term.center_text(f"{name} has been added to the product list\n")
                term.pause()
                return
            elif choice == "Back":
                return

    def select_product(self, catalog: Catalog) -> int:
        """Let the user pick a product and return its position."""
        if not len(catalog):
            raise ValueError("there are no products to select")
        term = self.terminal
        selected = 0
        while True:
            self._open("SELECT WHICH PRODUCT YOU WANT TO EDIT\n\n")
            term.center_text(table_header() + "\n")
            term.center_text("-" * 42 + "\n")
            for index, product in enumerate(catalog):
                row = product_row(index, product)
                if index == selected:
                    term.center_text(f">{row}<\n")
                else:
                    term.center_text(f" {row}\n")
            self._close()

            key = term.read_key()
            count = len(catalog)
            if key is Key.UP:
                selected = (selected - 1) % count
            elif key is Key.DOWN:
                selected = (selected + 1) % count
            elif key is Key.ENTER:
                return selected

    def _no_products(self) -> None:
        self.terminal.center_text("No products available.\n")
        self.terminal.pause()

    def update_panel(self, options: Sequence[str], catalog: Catalog) -> None:
        """Change the name or the price of a product."""
        term = self.terminal
        selected = 0
        while True:
            self._open(
                "[ YOU ARE UPDATING A PRODUCT ]\n\n",
                "SELECT WHAT YOU WANT TO UPDATE\n\n",
            )
            self._draw_options(options, selected, wide=True)
            self._close()

            key = term.read_key()
            if key is not Key.ENTER:
                selected = self._move(options, selected, key)
                continue
            choice = options[selected]
            if choice == "Product name":
                try:
                    index = self.select_product(catalog)
                except ValueError:
                    self._no_products()
                    continue
                term.clear()
                new_name = term.read_line(
                    f"Enter a new product name for {catalog[index].name}: "
                )
                old_name = catalog.rename(index, new_name)
                term.center_text(
                    f"Successfully changed the name of {old_name} to {new_name}!\n"
                )
                term.pause()
            elif choice == "Product Price":
                try:
                    index = self.select_product(catalog)
                except ValueError:
                    self._no_products()
                    continue
                term.clear()
                product = catalog[index]
                new_price = term.read_number(
                    f"Enter a new price for {product.name}({product.price:.6f}): "
                )
                old_price = catalog.reprice(index, new_price)
                term.center_text(
                    f"Successfully change the price of {product.name}"
                    f"({old_price:.6f}) to {new_price:.6f}\n"
                )
                term.pause()
            elif choice == "Back":
                return

    def delete_panel(self, catalog: Catalog) -> None:
        """Remove products until the user declines to continue."""
        term = self.terminal
        while True:
            if not len(catalog):
                self._no_products()
                return
            self._open(
                "[ YOU ARE DELETING A PRODUCT ]\n\n",
                "SELECT WHAT YOU WANT TO DELETE\n\n",
            )
            index = self.select_product(catalog)
            removed = catalog.remove(index)
            term.center_text(f"{removed.name} has been removed to the product list\n")
            self._close()
            if not term.confirm("Continue Deleting?(Y/N): "):
                return

    def display_panel(self, options: Sequence[str], catalog: Catalog) -> None:
        """Show the inventory and offer to print it to a file."""
        term = self.terminal
        selected = 0
        while True:
            self._open("PRODUCT INVENTORY\n\n")
            term.center_text(table_header() + "\n")
            term.center_text("-" * 42 + "\n")
            for index, product in enumerate(catalog):
                term.center_text(f" {product_row(index, product)}\n")
            self._draw_options(options, selected, wide=True)
            self._close()

            key = term.read_key()
            if key is not Key.ENTER:
                selected = self._move(options, selected, key, skip_blank=False)
                continue
            choice = options[selected]
            if choice == "Print":
                try:
                    write_product_info(
                        self.product_info_path, catalog, catalog.total_sales()
                    )
                except OSError:
                    print("Error creating product information file!", file=sys.stderr)
                    term.center_text("Failed to print product information\n")
                else:
                    name = Path(self.product_info_path).name
                    term.center_text(
                        "Product Information successfully printed to "
                        f"'{name}'\n"
                    )
                term.pause()
            elif choice == "Back":
                return

    def _draw_graph(self, names: Sequence[str], values: Sequence[float]) -> None:
        term = self.terminal
        lines = graph_lines(names, values)
        self._open("== Product Ratings Bar Graph ==")
        term.write("\n\n")
        term.draw_lines(lines)
        self._close()

    def graph_panel(self, options: Sequence[str], catalog: Catalog) -> None:
        """Offer bar graphs of product ratings or sales."""
        term = self.terminal
        selected = 0
        while True:
            self._open(
                "[ GRAPHS OF THE PRODUCT ]\n\n",
                "SELECT WHAT YOU WANT TO UPDATE\n\n",
            )
            self._draw_options(options, selected, wide=True)
            self._close()

            key = term.read_key()
            if key is not Key.ENTER:
                selected = self._move(options, selected, key)
                continue
            choice = options[selected]
            if not choice:
                continue
            if choice in ("Product Ratings", "Product Sales"):
                if not len(catalog):
                    self._no_products()
                    continue
                if choice == "Product Ratings":
                    values = [product.rating for product in catalog]
                else:
                    values = [product.sales for product in catalog]
                self._draw_graph(catalog.names(), values)
                term.write("\n")
                term.center_text("Press any key to EXIT")
                term.read_key()
            elif choice == "Back":
                return