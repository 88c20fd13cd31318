"""Admin user model."""
from sqlalchemy import Column, Integer, String, Boolean, Enum as SQLEnum
from enum import Enum

from app.core.database import Base
from app.models.types import UTCDateTime, utcnow


class UserRole(str, Enum):
    """Roles for dashboard accounts."""
    ADMIN = "admin"
    VIEWER = "viewer"


PRIMARY_ADMIN_USERNAME = "admin"


class AdminUser(Base):
    """Admin dashboard account."""

    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String(100), nullable=False)
    role = Column(SQLEnum(UserRole), nullable=False, default=UserRole.ADMIN)
    is_active = Column(Boolean, default=True, nullable=False)
    last_login_at = Column(UTCDateTime, nullable=True)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, onupdate=utcnow)

    def __repr__(self):
        return f"<AdminUser(id={self.id}, username={self.username}, role={self.role})>"
