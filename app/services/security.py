"""Password hashing and JWT signing primitives."""
from datetime import timedelta
from typing import Any, Dict, Optional
import logging

from jose import jwt, JWTError
from jose.exceptions import ExpiredSignatureError
from passlib.context import CryptContext

from app import config
from app.errors import AuthError
from app.utils.clock import utcnow

logger = logging.getLogger(__name__)

INVALID_TOKEN = "Invalid token."


class PasswordHasher:
    """Salted bcrypt hashing with a fixed work factor."""

    def __init__(self, rounds: int = config.BCRYPT_ROUNDS):
        self.context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )
        self._dummy_hash: Optional[str] = None

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self.context.verify(password, password_hash)
        except (ValueError, TypeError):
            # Corrupt stored hash, or a password bcrypt refuses (NUL bytes)
            logger.warning("Password could not be checked against the stored hash")
            return False

    def verify_dummy(self, password: str) -> bool:
        """Spend the same bcrypt work as a real check. Always False."""
        if self._dummy_hash is None:
            self._dummy_hash = self.context.hash("dummy-password")
        self.verify(password, self._dummy_hash)
        return False


class TokenService:
    """Issues and verifies HS256 tokens carrying ``userId``, ``iat`` and ``exp``."""

    def __init__(
        self,
        secret: str = config.JWT_SECRET,
        algorithm: str = config.JWT_ALGORITHM,
        expires_in: int = config.JWT_EXPIRES_IN,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, user_id: int) -> str:
        now = utcnow()
        payload: Dict[str, Any] = {
            "userId": user_id,
            "iat": now,
            "exp": now + timedelta(seconds=self.expires_in),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """
        Validate signature and expiry and return the embedded user id.

        Raises:
            AuthError: If the token is malformed, forged, expired or lacks
                an integer ``userId`` claim
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require_exp": True},
            )
        except ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise AuthError(INVALID_TOKEN)
        except JWTError as e:
            logger.info(f"Rejected token: {e}")
            raise AuthError(INVALID_TOKEN)

        user_id = payload.get("userId")
        # bool is an int subclass; reject it explicitly
        if isinstance(user_id, bool):
            raise AuthError(INVALID_TOKEN)
        try:
            return int(user_id)
        except (TypeError, ValueError):
            logger.info("Rejected token without a numeric userId claim")
            raise AuthError(INVALID_TOKEN)
