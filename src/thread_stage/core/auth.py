"""Actor model shared by the visibility rules and the API layer."""

from __future__ import annotations

from dataclasses import dataclass, field

PERMISSION_BAN_POST = "ban_post"


@dataclass(frozen=True)
class Auth:
    """The caller of a request.

    Anonymous callers have ``login`` set to False and ``user_id`` of 0.
    ``permissions`` holds the role capabilities granted to a logged-in user.
    """

    login: bool = False
    user_id: int = 0
    permissions: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def anonymous(cls) -> Auth:
        return cls()

    @classmethod
    def for_user(cls, user_id: int, permissions: frozenset[str] | set[str] = frozenset()) -> Auth:
        return cls(login=True, user_id=user_id, permissions=frozenset(permissions))

    @property
    def ban_post(self) -> bool:
        """Return True if the caller may see banned and pending content."""
        return self.login and PERMISSION_BAN_POST in self.permissions
