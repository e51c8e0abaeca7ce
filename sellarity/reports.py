"""Text layouts for tables, bar graphs, receipts and inventory files."""

from __future__ import annotations

from os import PathLike
from typing import Iterable, Sequence

from .catalog import Catalog, Product

MAX_BAR_LENGTH = 25
GRAPH_SCALE = "0   5   10  15  20  25"
ID_WIDTH = 6
COLUMN_WIDTH = 18


def table_header() -> str:
    """The column header used by product tables."""
    return (
        f"{'ID: ':<{ID_WIDTH}}"
        f"{'Product Name':<{COLUMN_WIDTH}}"
        f"{'Product Price':<{COLUMN_WIDTH}}"
        f"{'Product Ratigs':<{COLUMN_WIDTH}}"
        f"{'Product Sales':<{COLUMN_WIDTH}}"
    )


def product_row(index: int, product: Product) -> str:
    """One table row; ``index`` is zero-based and shown counting from one."""
    return (
        f"{index + 1:<{ID_WIDTH}}"
        f"{product.name:<{COLUMN_WIDTH}}"
        f"{product.price:<{COLUMN_WIDTH}.2f}"
        f"{product.rating:<{COLUMN_WIDTH}.2f}"
        f"{product.sales:<{COLUMN_WIDTH}.2f}"
    )


def graph_lines(names: Sequence[str], values: Sequence[float]) -> list[str]:
    """Horizontal bar graph lines scaled so the largest value fills the bar."""
    if not values:
        raise ValueError("cannot draw a graph without values")
    if len(names) != len(values):
        raise ValueError("names and values differ in length")
    largest = max(values)
    name_width = max((len(name) for name in names), default=0)
    lines = []
    for name, value in zip(names, values):
        bars = int(value / largest * MAX_BAR_LENGTH) if largest else 0
        lines.append(f"{name:<{name_width}} | {'*' * max(bars, 0)} {value:.1f}")
    prefix = " " * (name_width + 3)
    lines.append(prefix + "-" * MAX_BAR_LENGTH)
    lines.append(prefix + GRAPH_SCALE)
    return lines


def receipt_text(
    orders: Iterable[int], catalog: Catalog, total_cost: float, change: float
) -> str:
    """The receipt for a purchase, one block per ordered item."""
    parts = ["========== RECEIPT ==========\n\n"]
    for index in orders:
        product = catalog[index]
        parts.append(f"Product name: {product.name}\n")
        parts.append(f"Price       : {product.price:.2f}\n")
        parts.append("-----------------------------\n")
    parts.append(f"TOTAL : {total_cost:.2f}\n")
    parts.append(f"CHANGE: {change:.2f}\n")
    parts.append("=============================\n")
    parts.append("Thank you for your purchase!\n")
    return "".join(parts)


def write_receipt(
    path: str | PathLike[str],
    orders: Iterable[int],
    catalog: Catalog,
    total_cost: float,
    change: float,
) -> None:
    """Write the receipt to ``path``; raises OSError if it cannot be written."""
    text = receipt_text(orders, catalog, total_cost, change)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


def product_info_text(catalog: Catalog, total_sales: float) -> str:
    """The inventory report listing every product and the sales total."""
    rule = "=" * 74 + "\n"
    header = (
        f"{'ID: ':<{ID_WIDTH}}"
        f"{'Product Name':<{COLUMN_WIDTH}}"
        f"{'Product Price':<{COLUMN_WIDTH}}"
        f"{'Product Ratigs':<{COLUMN_WIDTH}}"
        f"{'Product Sales' + chr(10):<{COLUMN_WIDTH}}"
    )
    parts = ["\t\t\t======== PRODUCT INVENTORY ========\n\n", header, "-" * 65 + "\n"]
    parts.extend(
        product_row(index, product) + "\n" for index, product in enumerate(catalog)
    )
    parts.append(rule)
    parts.append(f"TOTAL SALES: {total_sales:.2f}\n")
    parts.append(rule)
    return "".join(parts)


def write_product_info(
    path: str | PathLike[str], catalog: Catalog, total_sales: float
) -> None:
    """Write the inventory report to ``path``; raises OSError on failure."""
    text = product_info_text(catalog, total_sales)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)