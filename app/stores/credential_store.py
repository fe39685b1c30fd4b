"""
Credential store: user records keyed by email.

AuthService depends on the abstract interface only; the SQLModel
implementation is wired in per request and tests substitute an in-memory one.
"""
from abc import ABC, abstractmethod
from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.errors import ConflictError, InternalError
from app.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore(ABC):
    """Holds user records (email, password hash)."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user registered under ``email`` or None."""

    @abstractmethod
    def create(self, email: str, password_hash: str) -> User:
        """
        Insert a new user.

        Raises:
            ConflictError: If the email is already registered
        """


class SQLCredentialStore(CredentialStore):
    """CredentialStore over the ``user`` table."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_email(self, email: str) -> Optional[User]:
        try:
            statement = select(User).where(User.email == email)
            return self.session.exec(statement).first()
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed: {e}")
            raise InternalError("Internal server error") from e

    def create(self, email: str, password_hash: str) -> User:
        user = User(email=email, password_hash=password_hash)
        try:
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        except IntegrityError as e:
            # Lost a race against a concurrent registration of the same email
            self.session.rollback()
            raise ConflictError("Email already in use") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"User insert failed: {e}")
            raise InternalError("Internal server error") from e
        return user
