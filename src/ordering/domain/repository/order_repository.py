"""Abstract repository for Order aggregate.

Callers are expected to serialize access per ``order_id``; the
aggregate itself holds no locks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordering.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every stored order."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Insert or replace the order keyed by its ``order_id``."""

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove an order. Returns False if it did not exist."""
