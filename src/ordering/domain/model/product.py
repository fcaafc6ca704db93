"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, discounts are attached and detached.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ordering.domain.exceptions import ValidationError
from ordering.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Only the parts an order needs are modelled here: the current price
    and the ids of the discounts attached to the product.
    """

    id: str
    name: str
    price: Money
    discount_ids: list[str] = field(default_factory=list)

    @staticmethod
    def create(
        product_id: str,
        name: str,
        price: Money,
        discount_ids: list[str] | None = None,
    ) -> Product:
        if not product_id or not product_id.strip():
            raise ValidationError("Product ID is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        return Product(
            id=product_id.strip(),
            name=name.strip(),
            price=price,
            discount_ids=list(dict.fromkeys(discount_ids or [])),
        )

    @property
    def has_discounts(self) -> bool:
        return bool(self.discount_ids)

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because order items
        capture a price snapshot at creation time.
        """
        self.price = new_price

    def add_discount(self, discount_id: str) -> None:
        if not discount_id:
            raise ValidationError("Discount ID cannot be empty")
        if discount_id not in self.discount_ids:
            self.discount_ids.append(discount_id)

    def remove_discount(self, discount_id: str) -> None:
        self.discount_ids = [d for d in self.discount_ids if d != discount_id]
