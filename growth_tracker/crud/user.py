# crud/user.py
from typing import Optional
from datetime import datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy import or_
from passlib.context import CryptContext

from growth_tracker.models.user import User
from growth_tracker.schemas.user import UserCreate

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class UserCRUD:
    """CRUD operations for User model."""

    # =====================================================================
    # HELPER METHODS
    # =====================================================================

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return pwd_context.verify(plain_password, hashed_password)

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(self, db: Session, *, obj_in: UserCreate) -> User:
        """
        Create a new user.

        Args:
            db: Database session
            obj_in: UserCreate schema with the plain-text password

        Returns:
            Created User instance
        """
        db_obj = User(
            username=obj_in.username,
            email=obj_in.email,
            password_hash=self.hash_password(obj_in.password),
            is_private=False,
        )

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get(self, db: Session, id: int) -> Optional[User]:
        """Get user by ID."""
        return db.query(User).filter(User.id == id).first()

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        return db.query(User).filter(User.email == email.lower()).first()

    def get_by_username(self, db: Session, username: str) -> Optional[User]:
        """Get user by exact username."""
        return db.query(User).filter(User.username == username).first()

    def get_by_identifier(self, db: Session, identifier: str) -> Optional[User]:
        """Get user by email or username."""
        return (
            db.query(User)
            .filter(or_(User.email == identifier.lower(), User.username == identifier))
            .first()
        )

    # =====================================================================
    # UPDATE OPERATIONS
    # =====================================================================

    def update_username(self, db: Session, *, db_obj: User, username: str) -> User:
        db_obj.username = username
        db_obj.updated_at = datetime.now(timezone.utc)

        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update_password(
        self, db: Session, *, db_obj: User, current_password: str, new_password: str
    ) -> User:
        """
        Update user password (requires current password verification).

        Raises:
            ValueError: If current password is incorrect
        """
        if not self.verify_password(current_password, db_obj.password_hash):
            raise ValueError("Current password is incorrect")

        db_obj.password_hash = self.hash_password(new_password)
        db_obj.updated_at = datetime.now(timezone.utc)

        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update_privacy(self, db: Session, *, db_obj: User, is_private: bool) -> User:
        db_obj.is_private = is_private
        db_obj.updated_at = datetime.now(timezone.utc)

        db.commit()
        db.refresh(db_obj)
        return db_obj


crud_user = UserCRUD()
