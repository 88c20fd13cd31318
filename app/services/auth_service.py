"""Authentication service."""
import logging
from datetime import timedelta
from typing import Optional
from sqlalchemy.orm import Session

from app.core.security import verify_password, create_access_token
from app.core.config import settings
from app.core.exceptions import Unauthorized
from app.models.types import utcnow
from app.repositories.user_repository import UserRepository
from app.models.user import AdminUser
from app.schemas.user import Token, TokenUser

logger = logging.getLogger(__name__)


class AuthService:
    """Authentication business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def authenticate_user(self, username: str, password: str) -> Optional[AdminUser]:
        """
        Authenticate an admin by username and password.

        Returns:
            AdminUser if authentication successful, None otherwise
        """
        user = self.user_repo.get_by_username(username)

        if not user:
            return None

        if not user.is_active:
            return None

        if not verify_password(password, user.hashed_password):
            return None

        return user

    def login(self, username: str, password: str) -> Token:
        """
        Login admin and return a JWT token.

        Raises:
            Unauthorized: If authentication fails
        """
        user = self.authenticate_user(username, password)

        if not user:
            logger.info("Failed login for %s", username)
            raise Unauthorized("Invalid credentials")

        self.user_repo.update(user.id, last_login_at=utcnow())

        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(
            data={"sub": str(user.id), "username": user.username, "role": user.role.value},
            expires_delta=access_token_expires
        )
        logger.info("Admin %s logged in", user.username)

        return Token(token=access_token, user=TokenUser.model_validate(user))
