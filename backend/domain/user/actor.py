"""Calling actor value object."""

from dataclasses import dataclass

from domain.user.entity import Role


@dataclass(frozen=True)
class Actor:
    """Identity and role of whoever issued the current request."""

    id: str
    role: Role = Role.MEMBER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER
