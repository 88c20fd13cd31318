"""Admin user repository."""
from typing import List, Optional
from sqlalchemy.orm import Session

from app.models.user import AdminUser


class UserRepository:
    """Data access for admin users."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[AdminUser]:
        return self.db.query(AdminUser).filter(AdminUser.id == user_id).first()

    def get_by_username(self, username: str) -> Optional[AdminUser]:
        return self.db.query(AdminUser).filter(AdminUser.username == username).first()

    def get_by_email(self, email: str) -> Optional[AdminUser]:
        return self.db.query(AdminUser).filter(AdminUser.email == email).first()

    def exists_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def get_all(self) -> List[AdminUser]:
        return self.db.query(AdminUser).order_by(AdminUser.created_at.desc(), AdminUser.id.desc()).all()

    def create(self, **kwargs) -> AdminUser:
        user = AdminUser(**kwargs)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update(self, user_id: int, **kwargs) -> Optional[AdminUser]:
        user = self.get_by_id(user_id)
        if not user:
            return None
        for field, value in kwargs.items():
            setattr(user, field, value)
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete(self, user_id: int) -> bool:
        """Soft delete: mark inactive."""
        user = self.get_by_id(user_id)
        if not user:
            return False
        user.is_active = False
        self.db.commit()
        return True
