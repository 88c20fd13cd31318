"""Admin user management router."""
import logging
from typing import Annotated, List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.user_service import UserService
from app.schemas.user import UserCreate, UserUpdate, UserResponse
from app.api.dependencies import AdminOnly

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin-users", tags=["Admin Users"])


@router.get("", response_model=List[UserResponse])
def list_users(
    db: Annotated[Session, Depends(get_db)],
    current_user: AdminOnly
):
    """
    List all admin accounts, newest first (Admin only).
    """
    service = UserService(db)
    return service.get_users()


@router.post("", response_model=UserResponse, status_code=201)
def create_user(
    user_data: UserCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: AdminOnly
):
    """
    Create a new admin account (Admin only).
    """
    logger.info("Admin %s creating user %s", current_user.username, user_data.username)
    service = UserService(db)
    return service.create_user(user_data)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    user_data: UserUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: AdminOnly
):
    """
    Update an admin account (Admin only).
    """
    logger.info("Admin %s updating user %s", current_user.username, user_id)
    service = UserService(db)
    return service.update_user(user_id, user_data)


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: AdminOnly
):
    """
    Deactivate an admin account (Admin only). The primary admin cannot be deactivated.
    """
    logger.info("Admin %s deactivating user %s", current_user.username, user_id)
    service = UserService(db)
    service.delete_user(user_id)
    return {"success": True, "message": "User deactivated successfully"}
