"""List users query."""

from dataclasses import dataclass
from typing import List

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class ListUsersQuery:
    """Query returning every stored user (no filtering, no paging)."""

    repository: IUserRepository

    async def execute(self) -> List[User]:
        return await self.repository.find_all()
