"""Bearer-token gate in front of every back-office route."""

import logging
import os
from typing import Any, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from domain.user.auth_provider import IAuthProvider, InvalidTokenError, JWKSError
from infrastructure.auth.jwks_provider import JwksAuthProvider

logger = logging.getLogger(__name__)

# Reachable without a token.
PUBLIC_PATHS = frozenset({"/health", "/version", "/docs", "/redoc", "/openapi.json"})


def _unauthorized(code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": code, "message": message},
    )


class AuthMiddleware(BaseHTTPMiddleware):
    """Verify the caller's token and expose its claims.

    Verified claims land on ``request.state.auth_claims`` (None for public
    paths and anonymous requests); ``get_current_actor`` turns them into an
    Actor. With AUTH_REQUIRED=false, requests without a token pass through
    and routes needing an actor answer 401 themselves.
    """

    def __init__(self, app: Any, auth_provider: Optional[IAuthProvider] = None) -> None:
        super().__init__(app)
        self.auth_provider = auth_provider or JwksAuthProvider()
        self.auth_required = os.getenv("AUTH_REQUIRED", "true").lower() == "true"

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        request.state.auth_claims = None
        if request.url.path in PUBLIC_PATHS:
            return await call_next(request)

        token = self._extract_token(request.headers.get("Authorization"))
        if not token:
            if self.auth_required:
                return _unauthorized("unauthorized", "Missing authorization token")
            return await call_next(request)

        try:
            request.state.auth_claims = await self.auth_provider.verify_token(token)
        except InvalidTokenError as e:
            logger.info(
                "auth.invalid_token",
                extra={"path": request.url.path, "reason": e.reason},
            )
            return _unauthorized("invalid_token", str(e))
        except JWKSError as e:
            # Signing keys unavailable: the caller's token may well be valid.
            logger.error("auth.jwks_error", extra={"reason": e.reason})
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "authentication_error",
                    "message": "Authentication service error",
                },
            )

        return await call_next(request)

    @staticmethod
    def _extract_token(auth_header: Optional[str]) -> Optional[str]:
        """Token from ``Bearer <token>``; None for any other shape."""
        scheme, _, token = (auth_header or "").strip().partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token or " " in token:
            return None
        return token
