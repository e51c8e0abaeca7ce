"""The shop application: main menu, administrator panel and customer panel."""

from __future__ import annotations

import argparse
from os import PathLike
from typing import Sequence

from .accounts import AccountStore
from .catalog import Catalog
from .customer import CHECKOUT_OPTIONS, CustomerScreens, OrderChoice
from .navigation import UserInterface
from .terminal import Terminal

MAIN_MENU = (
    " Log in as Admin",
    " Log in as Customer",
    "",
    "Don't have an account Register here",
    "",
    "Exit",
)
LOGIN_MENU = ("Enter Username", "Enter Password", "", "Log In", "Back")
REGISTER_MENU = (
    "Enter a username",
    "Enter Name",
    "Enter Contact",
    "Enter password",
    "",
    "Submit",
    "Back",
)
ADMIN_MENU = (
    "Add a new product",
    "Update a product",
    "Delete a product",
    "View product revenue",
    "View sales bar graph",
    "Exit",
)
ADDING_OPTIONS = ("Enter a new product", "Enter a price for product", "", "Submit", "Back")
UPDATE_OPTIONS = ("Product name", "Product Price", "", "Back")
DISPLAY_OPTIONS = ("Print", "Back")
GRAPH_OPTIONS = ("Product Ratings", "Product Sales", "", "Back")

_ADMIN_LOGIN = 1
_CUSTOMER_LOGIN = 2
_REGISTER = 4
_EXIT = 6


class Application:
    """Holds the shop's state and moves between its screens."""

    def __init__(
        self,
        terminal: Terminal | None = None,
        catalog: Catalog | None = None,
        admins: AccountStore | None = None,
        customers: AccountStore | None = None,
        receipt_path: str | PathLike[str] = "receipt.txt",
        product_info_path: str | PathLike[str] = "productInfoFile.txt",
    ) -> None:
        self.terminal = terminal if terminal is not None else Terminal()
        self.catalog = catalog if catalog is not None else Catalog.default()
        self.admins = admins if admins is not None else AccountStore.default_admins()
        self.customers = (
            customers if customers is not None else AccountStore.default_customers()
        )
        self.ui = UserInterface(self.terminal, product_info_path)
        self.screens = CustomerScreens(
            self.terminal, self.catalog, receipt_path, CHECKOUT_OPTIONS
        )

    def admin_panel(self) -> None:
        """Run the administrator menu until Exit is chosen."""
        actions = {
            1: lambda: self.ui.add_panel(ADDING_OPTIONS, self.catalog),
            2: lambda: self.ui.update_panel(UPDATE_OPTIONS, self.catalog),
            3: lambda: self.ui.delete_panel(self.catalog),
            4: lambda: self.ui.display_panel(DISPLAY_OPTIONS, self.catalog),
            5: lambda: self.ui.graph_panel(GRAPH_OPTIONS, self.catalog),
        }
        while True:
            choice = self.ui.admin_menu(ADMIN_MENU)
            if choice == len(ADMIN_MENU):
                return
            action = actions.get(choice)
            if action is not None:
                action()

    def customer_panel(self) -> list[int]:
        """Let a customer fill a cart and check out until they leave.

        Returns the product positions still in the cart on leaving.
        """
        cart: list[int] = []
        cart_size = 0
        while True:
            response = self.screens.ordering(cart_size)
            if response is OrderChoice.EXIT:
                return cart
            if response is OrderChoice.CHECKOUT:
                if self.screens.checkout(cart):
                    cart.clear()
            else:
                cart.append(response)
                cart_size = len(cart)

    def run(self) -> None:
        """Show the main menu until Exit is chosen."""
        while True:
            choice = self.ui.landing_screen(MAIN_MENU)
            if choice == _ADMIN_LOGIN:
                self.ui.login_admin(LOGIN_MENU, self.admins, self.admin_panel)
            elif choice == _CUSTOMER_LOGIN:
                self.ui.login_customer(LOGIN_MENU, self.customers, self.customer_panel)
            elif choice == _REGISTER:
                self.ui.register_customer(REGISTER_MENU, self.customers)
            elif choice == _EXIT:
                return


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shop on the console; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="sellarity", description="Sales management system."
    )
    parser.parse_args(argv)
    try:
        Application().run()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0