"""A shop receipt: the list of purchased products and their total."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Product:
    """A purchased product with its name and price."""

    name: str
    price: float


class Receipt:
    """Products in the order they were added."""

    def __init__(self) -> None:
        self._products: list[Product] = []

    def add(self, product: Product) -> None:
        """Append a product to the receipt."""
        self._products.append(product)

    def remove(self, product: Product) -> None:
        """Remove the first occurrence of product; raise ValueError if absent."""
        try:
            self._products.remove(product)
        except ValueError:
            raise ValueError(f"product {product.name!r} is not on the receipt") from None

    def total(self) -> float:
        """Return the sum of all prices."""
        return float(sum(product.price for product in self._products))

    def most_expensive(self) -> Product:
        """Return the first product with the highest price; raise ValueError if empty."""
        if not self._products:
            raise ValueError("the receipt is empty")
        return max(self._products, key=lambda product: product.price)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __str__(self) -> str:
        lines = [f"{product.name}\t{product.price}" for product in self._products]
        lines.append(f"TOTALE\t{self.total()}")
        return "\n".join(lines)