"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ordering.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from ordering.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ordering.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)

DATA_DIR_ENV = "ORDERING_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def default_data_dir() -> Path:
    configured = os.environ.get(DATA_DIR_ENV)
    return Path(configured) if configured else DEFAULT_DATA_DIR


@dataclass(frozen=True)
class Container:
    """Builds repositories rooted at one data directory."""

    data_dir: Path

    def order_repository(self) -> JsonOrderRepository:
        return JsonOrderRepository(self.data_dir / "orders.json")

    def product_repository(self) -> JsonProductRepository:
        return JsonProductRepository(self.data_dir / "products.json")

    def user_repository(self) -> JsonUserRepository:
        return JsonUserRepository(self.data_dir / "users.json")
