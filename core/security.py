"""
security.py - Password hashing and bearer token handling.

Purpose:
- Hash & verify passwords (never store raw passwords).
- Issue and validate JWT access tokens for authentication.

Tokens are stateless: there is no refresh flow and no revocation list, so a
token stays valid until its `exp` claim passes.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

from jose import jwt, JWTError
from passlib.context import CryptContext

from app.exceptions import InvalidTokenError, UnauthenticatedError

logger = logging.getLogger("foodorder.security")


# -----------------------------------------------------------------------------
# Password Hashing
# -----------------------------------------------------------------------------


class PasswordHasher:
    """Thin wrapper around a bcrypt CryptContext."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def hash(self, raw_password: str) -> str:
        return self._context.hash(raw_password)

    def verify(self, raw_password: str, hashed_password: Optional[str]) -> bool:
        if not raw_password or not hashed_password:
            return False
        try:
            return self._context.verify(raw_password, hashed_password)
        except ValueError:
            # stored value is not a recognizable hash
            logger.warning("password_verify_failed reason=unrecognized_hash")
            return False


# -----------------------------------------------------------------------------
# JWT Token Handling
# -----------------------------------------------------------------------------


class TokenService:
    """
    Issues and verifies signed bearer tokens.

    The signing secret is handed in by the caller (see api.dependencies) rather
    than read from a module global, so tests and alternative deployments can
    construct their own instance.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_hours: int = 8784):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_hours = expire_hours

    def create_access_token(
        self, subject: str, expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Create a JWT access token for `subject` (a user id).

        Returns:
            Encoded JWT string carrying `sub`, `iat` and `exp` claims.
        """
        now = datetime.now(timezone.utc)
        if expires_delta is None:
            expires_delta = timedelta(hours=self.expire_hours)
        claims = {"sub": str(subject), "iat": now, "exp": now + expires_delta}
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decode and validate a JWT token.

        Raises:
            InvalidTokenError: bad signature, malformed token, expired, or no subject
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            logger.info(f"token_rejected reason={exc.__class__.__name__}")
            raise InvalidTokenError() from exc
        if not payload.get("sub"):
            raise InvalidTokenError()
        return payload

    def verify_bearer(self, authorization: Optional[str]) -> str:
        """
        Validate an `Authorization` header value and return the subject id.

        Raises:
            UnauthenticatedError: header absent
            InvalidTokenError: header malformed or token rejected
        """
        if not authorization:
            raise UnauthenticatedError()
        scheme, _, token = authorization.strip().partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise InvalidTokenError()
        return self.decode_token(token.strip())["sub"]
