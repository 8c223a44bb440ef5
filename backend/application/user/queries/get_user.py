"""Get user query."""

from dataclasses import dataclass

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UserNotFoundError


@dataclass
class GetUserQuery:
    """Query to get a single user by identifier.

    Read-only operation: one fetch by id, never a filtered scan.

    Examples:
        >>> query = GetUserQuery(repository)
        >>> user = await query.by_id("64b7f0c2a1b2c3d4e5f60718")
    """

    repository: IUserRepository

    async def by_id(self, raw_id: str) -> User:
        """Get user by store id.

        Args:
            raw_id: Identifier as received on the path

        Returns:
            Matching User

        Raises:
            InvalidUserIdError: If raw_id is not a well-formed store id
            UserNotFoundError: If no user has this id
        """
        user_id = UserId(raw_id)
        user = await self.repository.find_by_id(user_id)

        if user is None:
            raise UserNotFoundError(str(user_id))

        return user
