"""Delete user command."""

from dataclasses import dataclass

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UserNotFoundError


@dataclass
class DeleteUserCommand:
    """Command to remove a user by id.

    The identifier format is checked before the store is touched.

    Examples:
        >>> command = DeleteUserCommand(repository)
        >>> removed = await command.execute("64b7f0c2a1b2c3d4e5f60718")
    """

    repository: IUserRepository

    async def execute(self, raw_id: str) -> User:
        """Execute delete command.

        Raises:
            InvalidUserIdError: If raw_id is not a well-formed store id
            UserNotFoundError: If no user has this id
        """
        user_id = UserId(raw_id)
        removed = await self.repository.delete_by_id(user_id)

        if removed is None:
            raise UserNotFoundError(str(user_id))

        return removed
