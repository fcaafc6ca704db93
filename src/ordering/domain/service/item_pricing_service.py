"""Domain service: Item Pricing.

Turns a catalog product plus a requested quantity into an OrderItem:
the unit price is snapshotted from the product and the line discount
is computed from the product's attached discounts.  It lives in the
domain layer because the discount rule is a business rule, not just
orchestration.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from ordering.domain.exceptions import ValidationError
from ordering.domain.model.order import OrderItem
from ordering.domain.model.product import Product
from ordering.domain.model.value_objects import Money, Quantity

# Flat line discount applied when a product carries any discount.
ITEM_DISCOUNT_RATE = Decimal("0.10")


class ItemPricingService:

    def line_discount(self, product: Product, quantity: int) -> Money:
        """Fixed discount for a whole line (not per unit)."""
        if not product.has_discounts:
            return Money.zero(product.price.currency)
        gross = product.price.amount * quantity
        return Money.of(gross * ITEM_DISCOUNT_RATE, product.price.currency)

    def build_item(
        self,
        order_item_id: str,
        product: Product,
        quantity: int,
        warehouse_id: str,
    ) -> OrderItem:
        if not warehouse_id or not warehouse_id.strip():
            raise ValidationError("Warehouse ID is required")
        return OrderItem(
            order_item_id=order_item_id,
            product_id=product.id,
            quantity=Quantity(quantity),
            price_at_purchase=product.price,  # <-- price snapshot
            warehouse_id=warehouse_id.strip(),
            discount_amount=self.line_discount(product, quantity),
        )

    @staticmethod
    def assert_unique_products(product_ids: Iterable[str]) -> None:
        """Reject a composition request naming the same product twice."""
        seen: set[str] = set()
        for product_id in product_ids:
            if product_id in seen:
                raise ValidationError(f"Duplicate product ID: {product_id}")
            seen.add(product_id)
