"""Authentication provider port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class IAuthProvider(ABC):
    """Authentication provider interface.

    Abstracts the identity provider. Allows mocking in tests and
    migration to different providers.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class StaticProvider(IAuthProvider):
        ...     async def verify_token(self, token: str) -> Dict[str, Any]:
        ...         return {"sub": token}
    """

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify JWT token and return claims.

        Args:
            token: JWT access token from Authorization header

        Returns:
            Token claims dictionary with at minimum:
            - sub: Subject identifier (becomes the actor id)
            - aud: Audience
            - iss: Issuer
            - exp: Expiration timestamp
            plus the role claim when the user has one

        Raises:
            InvalidTokenError: Token is invalid, expired, or has wrong audience
            JWKSError: Cannot fetch or verify with the provider public keys
        """
        pass


class InvalidTokenError(Exception):
    """Token verification failed."""

    def __init__(self, reason: str):
        """Initialize with failure reason.

        Args:
            reason: Human-readable reason for failure
        """
        self.reason = reason
        super().__init__(f"Invalid token: {reason}")


class JWKSError(Exception):
    """JWKS fetching or processing failed."""

    def __init__(self, reason: str):
        """Initialize with failure reason.

        Args:
            reason: Human-readable reason for failure
        """
        self.reason = reason
        super().__init__(f"JWKS error: {reason}")
