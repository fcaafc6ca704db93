"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

import json
from pathlib import Path

from ordering.domain.model.user import User
from ordering.domain.repository.user_repository import UserRepository


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_by_id(self, user_id: str) -> User | None:
        return self._load().get(user_id)

    def list_all(self) -> list[User]:
        return list(self._load().values())

    def save(self, user: User) -> None:
        users = self._load()
        users[user.id] = user
        raw = [
            {"id": u.id, "username": u.username, "email": u.email}
            for u in users.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _load(self) -> dict[str, User]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: User(id=item["id"], username=item["username"], email=item["email"])
            for item in raw
        }

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
