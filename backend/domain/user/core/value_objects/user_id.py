"""UserId value object."""

from dataclasses import dataclass

from bson import ObjectId

from domain.user.core.exceptions.user_errors import InvalidUserIdError


@dataclass(frozen=True)
class UserId:
    """User identifier value object.

    Wraps the store-assigned MongoDB ObjectId in its 24 hex digit string form.
    Immutable; construction fails for anything that is not a well-formed id.

    Examples:
        >>> user_id = UserId("64b7f0c2a1b2c3d4e5f60718")
        >>> user_id.value
        '64b7f0c2a1b2c3d4e5f60718'

        >>> UserId("not-an-id")
        Traceback (most recent call last):
        ...
        InvalidUserIdError: Invalid user id format: 'not-an-id'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate ObjectId format."""
        if not isinstance(self.value, str) or not ObjectId.is_valid(self.value):
            raise InvalidUserIdError(self.value)

    @staticmethod
    def generate() -> "UserId":
        """Generate a new UserId (fresh ObjectId).

        Returns:
            New UserId
        """
        return UserId(str(ObjectId()))

    @staticmethod
    def from_object_id(oid: ObjectId) -> "UserId":
        """Build a UserId from a driver ObjectId."""
        return UserId(str(oid))

    def to_object_id(self) -> ObjectId:
        """Convert to the driver ObjectId used in ``_id`` filters."""
        return ObjectId(self.value)

    def __str__(self) -> str:
        """String representation returns the hex value."""
        return self.value

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"UserId('{self.value}')"
