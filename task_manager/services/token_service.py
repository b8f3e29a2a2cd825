"""Session token issuance and verification (HS256 JWT)."""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from task_manager.errors import TokenExpiredError, TokenInvalidError

DEFAULT_TTL = timedelta(hours=1)


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = DEFAULT_TTL):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, user_id: str, ttl: Optional[timedelta] = None) -> str:
        """
        Create a signed token bound to a user.

        Args:
            user_id: Identity the token acts for, stored as ``sub``
            ttl: Validity window; defaults to the service's window

        Returns:
            Encoded JWT string
        """
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "sub": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + (ttl if ttl is not None else self.ttl)).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        Verify a token's signature and expiry.

        Args:
            token: Encoded JWT string

        Returns:
            The user id the token was issued for

        Raises:
            TokenExpiredError: If the signature is valid but the token expired
            TokenInvalidError: If the token is malformed, tampered with, or
                lacks the ``sub``/``exp`` claims
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise TokenInvalidError(f"Invalid token: {e}") from e

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise TokenInvalidError("Invalid token: missing user ID")
        return user_id
