"""User entity."""

from dataclasses import dataclass
from typing import Any, Dict

from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class User:
    """User record.

    Invariants (enforced before persistence, see ``validation``):
    - account: 4-20 chars of ``[A-Za-z1-9]``, trimmed, unique
    - email: valid email shape, unique
    - id is assigned by the store and immutable

    Examples:
        >>> user = User(UserId("64b7f0c2a1b2c3d4e5f60718"), "abcd", "a@b.com")
        >>> user.to_dict()["account"]
        'abcd'
    """

    id: UserId
    account: str
    email: str

    def with_changes(self, changes: Dict[str, Any]) -> "User":
        """Return a copy with mutable fields replaced by ``changes``."""
        return User(
            id=self.id,
            account=changes.get("account", self.account),
            email=changes.get("email", self.email),
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON representation used in API responses."""
        return {
            "id": str(self.id),
            "account": self.account,
            "email": self.email,
        }
