"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.

The order fake stores clones so a test only sees changes that were
actually saved, like it would with the JSON store.
"""

from __future__ import annotations

from itertools import count

from ordering.domain.model.order import Order
from ordering.domain.model.product import Product
from ordering.domain.model.user import User
from ordering.domain.repository.order_repository import OrderRepository
from ordering.domain.repository.product_repository import ProductRepository
from ordering.domain.repository.user_repository import UserRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}

    def get_by_id(self, order_id: str) -> Order | None:
        order = self._store.get(order_id)
        return order.clone() if order is not None else None

    def list_all(self) -> list[Order]:
        return [o.clone() for o in self._store.values()]

    def save(self, order: Order) -> Order:
        self._store[order.order_id] = order.clone()
        return order

    def delete(self, order_id: str) -> bool:
        return self._store.pop(order_id, None) is not None


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def list_with_discounts(self) -> list[Product]:
        return [p for p in self._store.values() if p.has_discounts]

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._store: dict[str, User] = {}
        for u in users or []:
            self._store[u.id] = u

    def get_by_id(self, user_id: str) -> User | None:
        return self._store.get(user_id)

    def list_all(self) -> list[User]:
        return list(self._store.values())

    def save(self, user: User) -> None:
        self._store[user.id] = user


def sequential_ids(prefix: str = "id"):
    """Deterministic id generator: id-1, id-2, ..."""
    counter = count(1)
    return lambda: f"{prefix}-{next(counter)}"
