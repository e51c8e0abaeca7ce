"""Product catalogue: names, prices, ratings and accumulated sales."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

MIN_RATING = 1.0
MAX_RATING = 5.0


def parse_price(text: str) -> float:
    """Read a price from the start of ``text``, ignoring trailing characters."""
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"invalid price: {text!r}")
    return float(match.group(1))


@dataclass
class Product:
    """One item for sale."""

    name: str
    price: float
    rating: float = 0.0
    sales: float = 0.0


@dataclass
class Catalog:
    """An ordered list of products addressed by zero-based position."""

    products: list[Product] = field(default_factory=list)

    @classmethod
    def default(cls) -> "Catalog":
        """The catalogue the shop starts with."""
        return cls(
            [
                Product("foods", 33.0, 5.0, 44545.0),
                Product("pagkain", 33.33, 3.3, 454545.0),
                Product("tabemono", 32.0, 4.4, 4545454.0),
            ]
        )

    def __len__(self) -> int:
        return len(self.products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __getitem__(self, index: int) -> Product:
        return self.products[self._checked(index)]

    def _checked(self, index: int) -> int:
        if not 0 <= index < len(self.products):
            raise IndexError(f"no product at position {index}")
        return index

    def add_product(self, name: str, price: str | float) -> Product:
        """Append a new product with no rating and no sales.

        A string price is read like a number prefix; a string that does not
        start with a number raises ValueError.
        """
        value = parse_price(price) if isinstance(price, str) else float(price)
        product = Product(name, value)
        self.products.append(product)
        return product

    def rename(self, index: int, name: str) -> str:
        """Give a product a new name and return the old one."""
        product = self[index]
        old, product.name = product.name, name
        return old

    def reprice(self, index: int, price: float) -> float:
        """Give a product a new price and return the old one."""
        product = self[index]
        old, product.price = product.price, float(price)
        return old

    def remove(self, index: int) -> Product:
        """Remove a product and return it."""
        return self.products.pop(self._checked(index))

    def record_sales(self, orders: Iterable[int]) -> None:
        """Add each ordered product's price to its sales."""
        for index in orders:
            product = self[index]
            product.sales += product.price

    def rate(self, index: int, rating: float, previous_count: int) -> float:
        """Fold a new rating into the running average and return it."""
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError(f"rating must be between 1 and 5, got {rating}")
        if previous_count < 0:
            raise ValueError("previous rating count cannot be negative")
        product = self[index]
        product.rating = (product.rating * previous_count + rating) / (
            previous_count + 1
        )
        return product.rating

    def total_sales(self) -> float:
        """Sum of sales over all products."""
        return sum(product.sales for product in self.products)

    def names(self) -> list[str]:
        """Product names in catalogue order."""
        return [product.name for product in self.products]