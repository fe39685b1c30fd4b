"""User registration and login."""
from typing import Optional
import logging
import re

from passlib.exc import PasswordValueError

from app.errors import AuthError, ConflictError, ValidationError
from app.services.security import PasswordHasher, TokenService
from app.stores.credential_store import CredentialStore

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_PASSWORD_LENGTH = 6

INVALID_REGISTRATION = "Invalid email or password"
INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Registers users and exchanges credentials for signed tokens."""

    def __init__(
        self,
        store: CredentialStore,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens

    def register(self, email: Optional[str], password: Optional[str]) -> None:
        """
        Create a user with a bcrypt-hashed password.

        Raises:
            ValidationError: Email absent/malformed or password shorter than 6
            ConflictError: Email already registered
        """
        if not email or not EMAIL_PATTERN.fullmatch(email):
            raise ValidationError(INVALID_REGISTRATION)
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(INVALID_REGISTRATION)

        try:
            password_hash = self.hasher.hash(password)
        except PasswordValueError:
            # bcrypt rejects NUL bytes
            raise ValidationError(INVALID_REGISTRATION)

        if self.store.get_by_email(email) is not None:
            raise ConflictError("Email already in use")

        user = self.store.create(email, password_hash)
        logger.info(f"Registered user {user.id}")

    def login(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Verify credentials and issue a token.

        Unknown email and wrong password raise the same AuthError.
        """
        if not email or not password:
            raise AuthError(INVALID_CREDENTIALS)

        user = self.store.get_by_email(email)
        if user is None:
            self.hasher.verify_dummy(password)
            logger.info("Login failed")
            raise AuthError(INVALID_CREDENTIALS)
        if not self.hasher.verify(password, user.password_hash):
            logger.info("Login failed")
            raise AuthError(INVALID_CREDENTIALS)

        logger.info(f"User {user.id} logged in")
        return self.tokens.issue(user.id)
