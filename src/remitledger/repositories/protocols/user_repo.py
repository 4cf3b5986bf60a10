"""User repository protocol."""

from typing import Protocol, Optional

from remitledger.domain.models import User


class UserRepository(Protocol):
    """Interface for the user directory."""

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve user by ID."""
        ...

    def list_all(self) -> list[User]:
        """List all users."""
        ...
