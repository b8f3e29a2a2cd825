"""Credential store: user registration and credential checks."""
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from task_manager.errors import AuthenticationError, DuplicateError, StoreError
from task_manager.models.user import User
from task_manager.services.password import hash_password, verify_dummy, verify_password
from task_manager.utils.logger import get_logger

logger = get_logger("task_manager.users")


class UserService:
    """Service class for user registration and login."""

    def __init__(self, session: Session):
        self.session = session

    def register(self, username: str, password: str) -> str:
        """
        Register a new user.

        The username's uniqueness is left to the database's unique index, so
        two concurrent registrations cannot both succeed.

        Returns:
            The new user's id

        Raises:
            DuplicateError: If the username is already taken
            StoreError: If the database operation fails
        """
        user = User(username=username, password_hash=hash_password(password))
        user_id = user.id
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.info("Registration rejected: duplicate username", username=username)
            raise DuplicateError()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Failed to register user", username=username, error=str(e))
            raise StoreError() from e

        logger.info("User registered", user_id=user_id, username=username)
        return user_id

    def get_by_username(self, username: str) -> Optional[User]:
        """Look up a user by username."""
        statement = select(User).where(User.username == username)
        try:
            return self.session.exec(statement).first()
        except SQLAlchemyError as e:
            logger.error("Failed to look up user", username=username, error=str(e))
            raise StoreError() from e

    def authenticate(self, username: str, password: str) -> User:
        """
        Check a username/password pair.

        Raises:
            AuthenticationError: With the same message whether the username is
                unknown or the password is wrong
        """
        user = self.get_by_username(username)
        if user is None:
            verify_dummy(password)
            logger.info("Login failed", username=username)
            raise AuthenticationError("Invalid credentials.")

        if not verify_password(password, user.password_hash):
            logger.info("Login failed", username=username)
            raise AuthenticationError("Invalid credentials.")

        return user
