"""Admin user service."""
import logging
from typing import List
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequest, NotFound
from app.core.security import get_password_hash
from app.repositories.user_repository import UserRepository
from app.models.user import AdminUser, PRIMARY_ADMIN_USERNAME
from app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Admin user business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def create_user(self, user_data: UserCreate) -> AdminUser:
        """
        Create a new admin user.

        Raises:
            BadRequest: If username or email already exists
        """
        if self.user_repo.exists_by_username(user_data.username):
            raise BadRequest("Username already exists")
        if self.user_repo.exists_by_email(user_data.email):
            raise BadRequest("Email already registered")

        hashed_password = get_password_hash(user_data.password)

        user = self.user_repo.create(
            username=user_data.username,
            email=user_data.email,
            hashed_password=hashed_password,
            full_name=user_data.full_name,
            role=user_data.role,
        )
        logger.info("Created admin user %s (%s)", user.username, user.role.value)
        return user

    def get_user(self, user_id: int) -> AdminUser:
        """
        Get user by ID.

        Raises:
            NotFound: If user not found
        """
        user = self.user_repo.get_by_id(user_id)

        if not user:
            raise NotFound("User not found")

        return user

    def get_users(self) -> List[AdminUser]:
        """All admin users, newest first."""
        return self.user_repo.get_all()

    def update_user(self, user_id: int, user_data: UserUpdate) -> AdminUser:
        """
        Update user information.

        Raises:
            NotFound: If user not found
            BadRequest: If the email is taken or the primary admin would be deactivated
        """
        user = self.get_user(user_id)

        # Check if email is being changed and already exists
        if user_data.email:
            existing = self.user_repo.get_by_email(user_data.email)
            if existing and existing.id != user_id:
                raise BadRequest("Email already registered")

        if user_data.is_active is False and user.username == PRIMARY_ADMIN_USERNAME:
            raise BadRequest("The primary admin account cannot be deactivated")

        return self.user_repo.update(user_id, **user_data.model_dump(exclude_unset=True, exclude_none=True))

    def delete_user(self, user_id: int) -> None:
        """
        Soft delete user.

        Raises:
            NotFound: If user not found
            BadRequest: For the primary admin account
        """
        user = self.get_user(user_id)
        if user.username == PRIMARY_ADMIN_USERNAME:
            raise BadRequest("The primary admin account cannot be deactivated")

        self.user_repo.delete(user_id)
        logger.info("Deactivated admin user %s", user.username)
