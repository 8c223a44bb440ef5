"""Update user command (partial update)."""

from dataclasses import dataclass
from typing import Any, Mapping

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UserConflictError, UserNotFoundError
from domain.user.core.validation import (
    normalize_user_fields,
    uniqueness_lookup,
    validate_user_fields,
)


@dataclass
class UpdateUserCommand:
    """Command to change ``account`` and/or ``email`` of an existing user.

    Failure precedence:
    1. malformed id
    2. uniqueness conflict with another user
    3. field validation of the supplied fields
    4. user not found

    The merged document is validated again before it is persisted.

    Examples:
        >>> command = UpdateUserCommand(repository)
        >>> user = await command.execute(user_id, {"email": "new@b.com"})
    """

    repository: IUserRepository

    async def execute(self, raw_id: str, payload: Mapping[str, Any]) -> User:
        """Execute update command.

        Args:
            raw_id: Identifier as received on the path
            payload: Decoded request body with a subset of mutable fields

        Returns:
            Post-update user

        Raises:
            InvalidUserIdError: If raw_id is not a well-formed store id
            UserConflictError: If a new value belongs to another user
            UserValidationError: If a field rule fails
            UserNotFoundError: If no user has this id
        """
        user_id = UserId(raw_id)
        changes = normalize_user_fields(payload)

        if await self.repository.is_taken(**uniqueness_lookup(changes), exclude=user_id):
            raise UserConflictError()

        validate_user_fields(changes, fields=changes.keys())

        existing = await self.repository.find_by_id(user_id)
        if existing is None:
            raise UserNotFoundError(str(user_id))

        merged = existing.with_changes(changes)
        validate_user_fields(merged.to_dict())

        if not changes:
            return existing

        updated = await self.repository.update_by_id(user_id, changes)
        if updated is None:
            # Removed between the lookup and the write
            raise UserNotFoundError(str(user_id))

        return updated
