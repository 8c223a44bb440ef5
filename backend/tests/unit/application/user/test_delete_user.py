"""Tests for delete user command."""

import pytest
from unittest.mock import AsyncMock

from application.user.commands.delete_user import DeleteUserCommand
from domain.user.core.exceptions.user_errors import InvalidUserIdError, UserNotFoundError

UNUSED_ID = "64b7f0c2a1b2c3d4e5f60718"


@pytest.mark.asyncio
async def test_delete_existing_user(repository):
    user = await repository.create("abcd", "a@b.com")

    removed = await DeleteUserCommand(repository).execute(str(user.id))

    assert removed == user
    assert await repository.find_by_id(user.id) is None


@pytest.mark.asyncio
async def test_delete_not_found(repository):
    with pytest.raises(UserNotFoundError):
        await DeleteUserCommand(repository).execute(UNUSED_ID)


@pytest.mark.asyncio
async def test_delete_twice_is_not_found(repository):
    user = await repository.create("abcd", "a@b.com")
    command = DeleteUserCommand(repository)
    await command.execute(str(user.id))

    with pytest.raises(UserNotFoundError):
        await command.execute(str(user.id))


@pytest.mark.asyncio
async def test_malformed_id_checked_before_store_access():
    store = AsyncMock()

    with pytest.raises(InvalidUserIdError):
        await DeleteUserCommand(store).execute("not-an-id")

    store.delete_by_id.assert_not_called()
