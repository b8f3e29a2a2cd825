"""Bearer token authentication for protected routes.

The only accepted convention is ``Authorization: Bearer <token>``. The
resolved identity is returned as a ``CurrentUser`` value; route handlers take
the owner id from it and never from the request body.
"""
from fastapi import Request
from pydantic import BaseModel, ConfigDict

from task_manager.errors import AuthenticationError, TokenError, TokenExpiredError
from task_manager.services.token_service import TokenService
from task_manager.utils.logger import get_logger

logger = get_logger("task_manager.auth")

BEARER_SCHEME = "bearer"


class CurrentUser(BaseModel):
    """Authenticated identity extracted from a verified token."""
    model_config = ConfigDict(frozen=True)

    user_id: str


def extract_bearer_token(auth_header: str) -> str:
    """
    Split ``Bearer <token>`` into the token part.

    Raises:
        AuthenticationError: If the header uses another scheme or has no token
    """
    scheme, _, token = auth_header.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token:
        raise AuthenticationError("Invalid token.")
    return token


def authenticate(auth_header: str | None, token_service: TokenService) -> CurrentUser:
    """
    Resolve an Authorization header value to the user it authenticates.

    Raises:
        AuthenticationError: "Unauthorized access." when no credential is
            provided, "Invalid token." for any malformed, tampered or expired
            credential
    """
    if not auth_header or not auth_header.strip():
        raise AuthenticationError("Unauthorized access.")

    token = extract_bearer_token(auth_header)
    try:
        user_id = token_service.verify(token)
    except TokenError as e:
        reason = "expired" if isinstance(e, TokenExpiredError) else "invalid"
        logger.info("Token rejected", reason=reason)
        raise AuthenticationError("Invalid token.") from e

    return CurrentUser(user_id=user_id)


async def get_current_user(request: Request) -> CurrentUser:
    """
    Validate the bearer token on a request and return the authenticated user.

    Args:
        request: FastAPI request object to extract the Authorization header

    Returns:
        CurrentUser with the user_id from the token

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    return authenticate(
        request.headers.get("authorization"),
        request.app.state.token_service,
    )
