"""User record — the owner an order is composed for."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ordering.domain.exceptions import ValidationError

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50

_EMAIL_RE = re.compile(
    r"^(?!.*\.\.)[a-zA-Z0-9](?:[a-zA-Z0-9._%+-]*[a-zA-Z0-9])?@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
)


@dataclass(frozen=True)
class User:
    id: str
    username: str
    email: str

    @staticmethod
    def create(user_id: str, username: str, email: str) -> User:
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")

        username = (username or "").strip()
        if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
            raise ValidationError(
                f"Username must be between {USERNAME_MIN_LENGTH} and "
                f"{USERNAME_MAX_LENGTH} characters"
            )

        email = (email or "").strip()
        if not _EMAIL_RE.match(email):
            raise ValidationError("Invalid email format")

        return User(id=user_id.strip(), username=username, email=email)
