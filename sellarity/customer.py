"""Customer screens: choosing products, checking out and rating purchases."""

from __future__ import annotations

import sys
from collections import Counter
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Iterable, Sequence

from .catalog import MAX_RATING, MIN_RATING, Catalog
from .reports import product_row, table_header, write_receipt
from .terminal import Key, Terminal

CHECKOUT_OPTIONS = ("Enter payment", "Submit", "Back")


class OrderChoice(Enum):
    """What the ordering screen returns when no product is picked."""

    CHECKOUT = "checkout"
    EXIT = "exit"


def order_counts(orders: Iterable[int]) -> dict[int, int]:
    """How many of each product was ordered, by ascending product position."""
    return dict(sorted(Counter(orders).items()))


def order_summary_lines(orders: Iterable[int], catalog: Catalog) -> list[str]:
    """The order summary shown at checkout, ending with the total price."""
    lines = ["", "Your order:", ""]
    total = 0.0
    for index, count in order_counts(orders).items():
        product = catalog[index]
        product_total = product.price * count
        total += product_total
        lines.append(
            f"Product {index + 1}: x{count} - {product.name:<15}   ? {product_total:.2f}"
        )
    lines.append("-----------------------------")
    lines.append(f"Total Price: {total:.2f}")
    return lines


def order_total(orders: Iterable[int], catalog: Catalog) -> float:
    """Total price of the order."""
    total = 0.0
    for index, count in order_counts(orders).items():
        total += catalog[index].price * count
    return total


class CustomerScreens:
    """The interactive screens a logged-in customer works through."""

    def __init__(
        self,
        terminal: Terminal,
        catalog: Catalog,
        receipt_path: str | PathLike[str] = "receipt.txt",
        options: Sequence[str] = CHECKOUT_OPTIONS,
    ) -> None:
        self.terminal = terminal
        self.catalog = catalog
        self.receipt_path = receipt_path
        self.options = list(options)

    def _draw_products(self, selected: int) -> None:
        term = self.terminal
        term.center_text(table_header() + "\n")
        term.center_text("-" * 42 + "\n")
        for index, product in enumerate(self.catalog):
            row = product_row(index, product)
            if index == selected:
                term.center_text(f">{row}<\n")
            else:
                term.center_text(f" {row}\n")

    def ordering(self, cart_size: int) -> int | OrderChoice:
        """Let the customer pick a product; returns its position or a choice."""
        term = self.terminal
        selected = 0
        while True:
            term.clear()
            term.draw_border()
            term.write("\n\n")
            term.center_text("SELECT WHICH PRODUCT YOU WANT TO ORDER\n\n")
            self._draw_products(selected)
            term.write("\n")
            term.center_text(f"{'CART ':<10}{cart_size}\n")
            term.center_text("PRESS SPACE TO CHECKOUT\n")
            term.center_text("PRESS E TO EXIT\n")
            term.write("\n\n")
            term.draw_border()

            key = term.read_key()
            count = len(self.catalog)
            if key is Key.UP and count:
                selected = (selected - 1) % count
            elif key is Key.DOWN and count:
                selected = (selected + 1) % count
            elif key is Key.ENTER and count:
                return selected
            elif key is Key.SPACE:
                return OrderChoice.CHECKOUT
            elif key is Key.LETTER_E:
                return OrderChoice.EXIT

    def checkout(self, orders: Sequence[int]) -> bool:
        """Take payment for the orders.

        Returns True once the purchase went through and the receipt was
        written, so the cart can be emptied; False when the customer goes back.
        """
        term = self.terminal
        orders = list(orders)
        rating_counts = [0] * len(self.catalog)
        selected = 0
        payment = 0.0

        while True:
            term.clear()
            term.draw_border()
            term.write("\n\n")

            lines = order_summary_lines(orders, self.catalog)
            total_cost = order_total(orders, self.catalog)

            term.center_text("== CHECK OUT==\n\n\n")
            term.draw_lines(lines)

            for index, option in enumerate(self.options):
                label = option
                if option == "Enter payment" and payment != 0:
                    label += f": {payment:.2f}"
                if index == selected:
                    term.center_text(f"> {label} <\n")
                else:
                    term.center_text(f" {label}\n")

            term.write("\n\n")
            term.draw_border()

            key = term.read_key()
            if key is Key.UP:
                selected = (selected - 1) % len(self.options)
            elif key is Key.DOWN:
                selected = (selected + 1) % len(self.options)
            elif key is Key.ENTER:
                choice = self.options[selected]
                if choice == "Enter payment":
                    term.clear()
                    payment = term.read_number("Enter your payment: ")
                elif choice == "Submit":
                    if payment < total_cost:
                        term.center_text("Insufficient payment\n")
                        term.pause()
                        continue
                    term.center_text("Purchased Successfully\n")
                    change = payment - total_cost
                    self.catalog.record_sales(orders)
                    term.pause()
                    self.rate_items(orders, rating_counts)
                    term.write("\n")
                    try:
                        write_receipt(
                            self.receipt_path, orders, self.catalog, total_cost, change
                        )
                    except OSError:
                        print("Error creating receipt file!", file=sys.stderr)
                        term.center_text("Failed to print receipt\n")
                        term.pause()
                        continue
                    name = Path(self.receipt_path).name
                    term.center_text(f"Receipt printed to '{name}'\n")
                    term.pause()
                    return True
                elif choice == "Back":
                    return False

    def rate_items(
        self, orders: Iterable[int], rating_counts: list[int]
    ) -> dict[int, float]:
        """Ask for a 1-5 rating of each distinct purchased product.

        ``rating_counts`` is the running tally of ratings per product and is
        updated in place; the new average rating of each product is returned.
        """
        term = self.terminal
        term.clear()
        term.draw_border()
        term.write("\n\n")
        term.center_text("Rate the product you purchased(1-5)\n\n")

        new_ratings: dict[int, float] = {}
        for index in sorted(set(orders)):
            name = self.catalog[index].name
            while True:
                rating = term.read_number(f"Rate product {name}: ")
                if MIN_RATING <= rating <= MAX_RATING:
                    break
                term.center_text("Invalid rating pls enter 1-5 only\n")
            new_ratings[index] = self.catalog.rate(index, rating, rating_counts[index])
            rating_counts[index] += 1

        term.write("\n")
        term.center_text("Thank you for your feedback!\n")
        term.write("\n\n")
        term.draw_border()
        return new_ratings