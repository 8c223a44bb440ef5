"""Create user command."""

from dataclasses import dataclass
from typing import Any, Mapping

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UserConflictError
from domain.user.core.validation import (
    normalize_user_fields,
    uniqueness_lookup,
    validate_user_fields,
)


@dataclass
class CreateUserCommand:
    """Command to register a new user.

    Failure precedence: uniqueness conflict, then field validation.
    Fields outside ``account``/``email`` are dropped without error.

    Examples:
        >>> command = CreateUserCommand(repository)
        >>> user = await command.execute({"account": "abcd", "email": "a@b.com"})
        >>> user.account
        'abcd'
    """

    repository: IUserRepository

    async def execute(self, payload: Mapping[str, Any]) -> User:
        """Execute create command.

        Args:
            payload: Decoded request body

        Returns:
            Created user with its store id

        Raises:
            UserConflictError: If account or email is already in use
            UserValidationError: If a field rule fails (first one reported)
        """
        fields = normalize_user_fields(payload)

        if await self.repository.is_taken(**uniqueness_lookup(fields)):
            raise UserConflictError()

        validate_user_fields(fields)

        return await self.repository.create(account=fields["account"], email=fields["email"])
