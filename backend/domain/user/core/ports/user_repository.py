"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId


class IUserRepository(ABC):
    """Repository interface for User records.

    Defines the document store contract used by the use cases.
    Implementations own id assignment and the uniqueness guarantees on
    ``account`` and ``email``.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def create(self, account: str, email: str) -> User:
        ...         # Insert into MongoDB
        ...         pass
    """

    @abstractmethod
    async def create(self, account: str, email: str) -> User:
        """Persist a new user; the store assigns its id.

        Args:
            account: Validated, trimmed account
            email: Validated email

        Returns:
            Created User including its id

        Raises:
            UserConflictError: If account or email is already stored
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user in the store's natural order."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Fetch a single user by id.

        Args:
            user_id: Store identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def is_taken(
        self,
        account: Optional[str] = None,
        email: Optional[str] = None,
        exclude: Optional[UserId] = None,
    ) -> bool:
        """Check whether another user already holds ``account`` or ``email``.

        Args:
            account: Account to look up (skipped when None)
            email: Email to look up (skipped when None)
            exclude: User whose own values do not count as a conflict

        Returns:
            True if any supplied value is used by a different user
        """
        pass

    @abstractmethod
    async def update_by_id(self, user_id: UserId, changes: Dict[str, Any]) -> Optional[User]:
        """Apply ``changes`` to one user and return the updated document.

        Returns:
            Updated User, or None if the id does not exist

        Raises:
            UserConflictError: If the change collides with another user
        """
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: UserId) -> Optional[User]:
        """Remove one user.

        Returns:
            The removed User, or None if the id does not exist
        """
        pass

    async def close(self) -> None:
        """Release store resources (no-op by default)."""
        return None
