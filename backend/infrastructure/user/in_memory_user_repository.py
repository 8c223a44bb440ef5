"""In-memory User Repository for testing."""

from typing import Any, Dict, List, Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UserConflictError


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Stores users in insertion order keyed by id and enforces the same
    uniqueness rules as the MongoDB indexes.
    Useful for unit tests and local runs without MongoDB dependency.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = await repo.create("abcd", "a@b.com")
        >>> found = await repo.find_by_id(user.id)
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}

    async def create(self, account: str, email: str) -> User:
        if self._collides(account, email, exclude=None):
            raise UserConflictError()

        user = User(id=UserId.generate(), account=account, email=email)
        self._users[str(user.id)] = user
        return user

    async def find_all(self) -> List[User]:
        return list(self._users.values())

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(str(user_id))

    async def is_taken(
        self,
        account: Optional[str] = None,
        email: Optional[str] = None,
        exclude: Optional[UserId] = None,
    ) -> bool:
        return self._collides(account, email, exclude)

    async def update_by_id(self, user_id: UserId, changes: Dict[str, Any]) -> Optional[User]:
        current = self._users.get(str(user_id))
        if current is None:
            return None

        updated = current.with_changes(changes)
        if self._collides(
            changes.get("account"), changes.get("email"), exclude=user_id
        ):
            raise UserConflictError()

        self._users[str(user_id)] = updated
        return updated

    async def delete_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.pop(str(user_id), None)

    def _collides(
        self, account: Optional[str], email: Optional[str], exclude: Optional[UserId]
    ) -> bool:
        for user in self._users.values():
            if exclude is not None and user.id == exclude:
                continue
            if account is not None and user.account == account:
                return True
            if email is not None and user.email == email:
                return True
        return False

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
