# services/user.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from growth_tracker.core.exceptions import (
    AccountPrivateError,
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    PermissionDeniedError,
)
from growth_tracker.crud.user import crud_user
from growth_tracker.models.user import User
from growth_tracker.schemas.user import LoginRequest, UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for accounts, authentication and profile visibility."""

    def __init__(self):
        self.crud = crud_user

    # =====================================================================
    # REGISTRATION & LOGIN
    # =====================================================================

    def register_user(self, db: Session, user_data: UserCreate) -> User:
        """
        Public user registration.

        Raises:
            ConflictError: If email or username already exists
        """
        if self.crud.get_by_email(db, email=user_data.email):
            raise ConflictError("Email already registered")
        if self.crud.get_by_username(db, username=user_data.username):
            raise ConflictError("Username already taken")

        try:
            user = self.crud.create(db, obj_in=user_data)
        except IntegrityError:
            # Lost a race with a concurrent registration
            db.rollback()
            raise ConflictError("Email or username already registered")

        logger.info(f"Registered user_id={user.id} username={user.username}")
        return user

    def authenticate_user(self, db: Session, login_data: LoginRequest) -> User:
        """
        Authenticate with email or username plus password.

        Raises:
            InvalidCredentialsError: If the identifier or password is wrong
        """
        user = self.crud.get_by_identifier(db, identifier=login_data.identifier)
        if not user or not self.crud.verify_password(login_data.password, user.password_hash):
            raise InvalidCredentialsError()
        return user

    # =====================================================================
    # USER RETRIEVAL
    # =====================================================================

    def get_user_by_username(self, db: Session, username: str) -> User:
        user = self.crud.get_by_username(db, username=username)
        if not user:
            raise NotFoundError(f"User '{username}' not found")
        return user

    def get_viewable_user(self, db: Session, *, viewer: User, username: str) -> User:
        """
        Resolve a username whose data the viewer wants to read.

        Raises:
            NotFoundError: If no such user exists
            AccountPrivateError: If the account is private and not the viewer's
        """
        if username == viewer.username:
            return viewer
        user = self.get_user_by_username(db, username)
        if user.is_private and user.id != viewer.id:
            raise AccountPrivateError()
        return user

    def require_self(self, viewer: User, username: str) -> None:
        """Writes are only allowed on the caller's own account."""
        if username != viewer.username:
            raise PermissionDeniedError(
                "You are not authorized to modify data for this username"
            )

    # =====================================================================
    # USER UPDATES
    # =====================================================================

    def update_username(self, db: Session, *, user: User, new_username: str) -> User:
        """
        Raises:
            ConflictError: If the username belongs to someone else
        """
        if new_username == user.username:
            return user

        existing = self.crud.get_by_username(db, username=new_username)
        if existing and existing.id != user.id:
            raise ConflictError("Username already taken")

        old_username = user.username
        try:
            user = self.crud.update_username(db, db_obj=user, username=new_username)
        except IntegrityError:
            db.rollback()
            raise ConflictError("Username already taken")

        logger.info(f"Renamed user_id={user.id} {old_username} -> {new_username}")
        return user

    def change_password(
        self, db: Session, *, user: User, current_password: str, new_password: str
    ) -> User:
        """
        Raises:
            InvalidCredentialsError: If current password is incorrect
        """
        try:
            user = self.crud.update_password(
                db,
                db_obj=user,
                current_password=current_password,
                new_password=new_password,
            )
        except ValueError as e:
            raise InvalidCredentialsError(str(e))

        logger.info(f"Password changed user_id={user.id}")
        return user

    def set_privacy(self, db: Session, *, user: User, is_private: bool) -> User:
        user = self.crud.update_privacy(db, db_obj=user, is_private=is_private)
        logger.info(f"Privacy updated user_id={user.id} is_private={is_private}")
        return user


user_service = UserService()
