"""Authenticate actor command."""

from dataclasses import dataclass
from typing import Any

import structlog

from domain.user.actor import Actor
from domain.user.entity import Role, User
from infrastructure.persistence.repositories.user import UserRepository

logger = structlog.get_logger(__name__)


@dataclass
class AuthenticateActorCommand:
    """Command to resolve the calling actor from verified token claims.

    Executed after successful JWT verification. Creates the user record on
    first authentication; the role carried by the token is authoritative
    and is written back when it changed.

    Examples:
        >>> command = AuthenticateActorCommand(repository)
        >>> actor = await command.execute("auth0|123", "manager")
        >>> actor.role
        <Role.MANAGER: 'manager'>
    """

    repository: UserRepository

    async def execute(self, subject: str, role_claim: Any = None) -> Actor:
        """Execute authentication command.

        Args:
            subject: Subject from the verified JWT
            role_claim: Raw value of the role claim (string, list or None)

        Returns:
            Actor for the current request
        """
        role = Role.from_claim(role_claim)
        user = await self.repository.get(subject)

        if user is None:
            # First login - create user
            user = User(user_id=subject, role=role)
            await self.repository.add(user)
            logger.info("User provisioned", user_id=subject, role=role.value)
        elif user.role != role:
            user.role = role
            await self.repository.save(user)
            logger.info("User role synchronized", user_id=subject, role=role.value)

        return Actor(id=user.user_id, role=user.role)
