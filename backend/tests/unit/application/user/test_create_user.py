"""Tests for create user command."""

import pytest
from unittest.mock import AsyncMock

from application.user.commands.create_user import CreateUserCommand
from domain.user.core.exceptions.user_errors import UserConflictError, UserValidationError


@pytest.fixture
def command(repository):
    """Create create-user command."""
    return CreateUserCommand(repository)


@pytest.mark.asyncio
async def test_create_user_success(repository, command):
    """Test creating a user assigns an id and persists it."""
    user = await command.execute({"account": "abcd", "email": "a@b.com"})

    assert user.account == "abcd"
    assert user.email == "a@b.com"
    assert await repository.find_by_id(user.id) == user


@pytest.mark.asyncio
async def test_create_user_trims_account_and_drops_extra_fields(repository, command):
    user = await command.execute({"account": "  abcd  ", "email": "a@b.com", "admin": True})

    assert user.account == "abcd"
    assert user.to_dict().keys() == {"id", "account", "email"}


@pytest.mark.asyncio
async def test_duplicate_account_conflicts(command):
    await command.execute({"account": "abcd", "email": "a@b.com"})

    with pytest.raises(UserConflictError):
        await command.execute({"account": "abcd", "email": "other@b.com"})


@pytest.mark.asyncio
async def test_duplicate_email_conflicts(command):
    await command.execute({"account": "abcd", "email": "a@b.com"})

    with pytest.raises(UserConflictError):
        await command.execute({"account": "efgh", "email": "a@b.com"})


@pytest.mark.asyncio
async def test_duplicate_after_trim_conflicts(command):
    await command.execute({"account": "abcd", "email": "a@b.com"})

    with pytest.raises(UserConflictError):
        await command.execute({"account": " abcd ", "email": "other@b.com"})


@pytest.mark.asyncio
async def test_conflict_takes_precedence_over_validation(command):
    """Existing account with an invalid email is reported as conflict."""
    await command.execute({"account": "abcd", "email": "a@b.com"})

    with pytest.raises(UserConflictError):
        await command.execute({"account": "abcd", "email": "not-an-email"})


@pytest.mark.asyncio
async def test_validation_failure_reports_first_field(repository, command):
    with pytest.raises(UserValidationError) as exc_info:
        await command.execute({"account": "ab", "email": "bad"})

    assert exc_info.value.field == "account"
    assert exc_info.value.message == "account must be at least 4 characters"
    assert repository.count() == 0


@pytest.mark.asyncio
async def test_missing_email_is_validation_error(command):
    with pytest.raises(UserValidationError) as exc_info:
        await command.execute({"account": "abcd"})

    assert exc_info.value.message == "email is required"


@pytest.mark.asyncio
async def test_store_conflict_propagates():
    """A uniqueness race detected by the store still surfaces as conflict."""
    repository = AsyncMock()
    repository.is_taken.return_value = False
    repository.create.side_effect = UserConflictError()

    with pytest.raises(UserConflictError):
        await CreateUserCommand(repository).execute({"account": "abcd", "email": "a@b.com"})
