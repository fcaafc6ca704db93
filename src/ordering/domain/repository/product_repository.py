"""Abstract repository for the product catalog.

Orders only read from it while being composed; catalog maintenance
writes through ``save``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordering.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_with_discounts(self) -> list[Product]:
        """Return the products that carry at least one discount ID.

        These are the products that earn a line discount when ordered.
        """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
