"""JWKS-based authentication provider implementation."""

import os
from typing import Any, Dict, Optional

import aiohttp
import jwt
from cachetools import TTLCache
from jwt import PyJWK
from jwt.exceptions import ExpiredSignatureError
from jwt.exceptions import InvalidTokenError as JWTError

from domain.user.auth_provider import IAuthProvider, InvalidTokenError, JWKSError


class JwksAuthProvider(IAuthProvider):
    """Authentication provider verifying RS256 JWTs against a JWKS endpoint.

    Features:
    - RS256 JWT verification with JWKS
    - JWKS caching with 1-hour TTL
    - Audience and issuer validation

    Environment Variables:
    - AUTH0_DOMAIN: Identity provider tenant domain (e.g., "menutraining.eu.auth0.com")
    - AUTH0_AUDIENCE: API identifier/audience

    Examples:
        >>> provider = JwksAuthProvider()
        >>> claims = await provider.verify_token(token)
        >>> claims["sub"]
        'auth0|123456789'
    """

    def __init__(
        self,
        domain: Optional[str] = None,
        audience: Optional[str] = None,
        jwks_cache_ttl: int = 3600,
    ):
        """Initialize provider.

        Args:
            domain: Tenant domain (defaults to env AUTH0_DOMAIN)
            audience: API audience (defaults to env AUTH0_AUDIENCE)
            jwks_cache_ttl: JWKS cache TTL in seconds (default: 3600 = 1h)

        Raises:
            ValueError: If required config is missing
        """
        self.domain = domain or os.getenv("AUTH0_DOMAIN")
        self.audience = audience or os.getenv("AUTH0_AUDIENCE")

        if not self.domain:
            raise ValueError("AUTH0_DOMAIN is required")
        if not self.audience:
            raise ValueError("AUTH0_AUDIENCE is required")

        self.jwks_cache: TTLCache[str, Dict[str, Any]] = TTLCache(maxsize=10, ttl=jwks_cache_ttl)

    @property
    def issuer(self) -> str:
        return f"https://{self.domain}/"

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify JWT token using the provider JWKS.

        Args:
            token: JWT token from Authorization header

        Returns:
            Decoded JWT claims dictionary

        Raises:
            InvalidTokenError: If token is invalid, expired, or malformed
            JWKSError: If JWKS fetching fails
        """
        try:
            unverified_header = jwt.get_unverified_header(token)
        except JWTError as e:
            raise InvalidTokenError(f"Malformed token header: {str(e)}") from e

        kid = unverified_header.get("kid")
        if not kid:
            raise InvalidTokenError("Token header missing 'kid'")

        # Unknown kid usually means the keys were rotated
        if kid not in self.jwks_cache:
            await self._refresh_jwks()

        rsa_key_dict = self.jwks_cache.get(kid)
        if not rsa_key_dict:
            raise InvalidTokenError(f"JWKS key {kid} not found")

        try:
            jwk = PyJWK.from_dict(rsa_key_dict)
            payload: Dict[str, Any] = jwt.decode(
                token,
                jwk.key,
                algorithms=["RS256"],
                audience=self.audience,
                issuer=self.issuer,
            )
            return payload

        except ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}") from e
        except jwt.PyJWKError as e:
            raise InvalidTokenError(f"Unusable signing key: {str(e)}") from e

    async def _refresh_jwks(self) -> None:
        """Refresh JWKS from the well-known endpoint.

        Raises:
            JWKSError: If JWKS fetching fails
        """
        jwks_url = f"https://{self.domain}/.well-known/jwks.json"

        try:
            async with aiohttp.ClientSession() as session:
                timeout = aiohttp.ClientTimeout(total=5)
                async with session.get(jwks_url, timeout=timeout) as resp:
                    resp.raise_for_status()
                    jwks = await resp.json()

        except aiohttp.ClientError as e:
            raise JWKSError(f"Failed to fetch JWKS: {str(e)}") from e
        except ValueError as e:
            raise JWKSError(f"Failed to parse JWKS: {str(e)}") from e

        for key in jwks.get("keys", []):
            kid = key.get("kid")
            if kid:
                self.jwks_cache[kid] = key
