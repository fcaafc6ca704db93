"""Application service: Add User use case."""

from __future__ import annotations

import logging

from ordering.domain.exceptions import ValidationError
from ordering.domain.model.user import User
from ordering.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AddUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str, username: str, email: str) -> User:
        user = User.create(user_id=user_id, username=username, email=email)
        if self._user_repo.get_by_id(user.id) is not None:
            raise ValidationError(f"User '{user.id}' already exists")

        self._user_repo.save(user)
        logger.info("Added user %s (%s)", user.id, user.username)
        return user
