"""In-memory user repository."""

from typing import Iterable, Optional

from remitledger.domain.models import User


class InMemoryUserRepository:
    """Read-only user directory over a fixed list of users."""

    def __init__(self, users: Iterable[User]):
        self._users: dict[str, User] = {u.id: u for u in users}

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def list_all(self) -> list[User]:
        return list(self._users.values())
