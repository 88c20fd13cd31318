"""Authentication router."""
from typing import Annotated
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.auth_service import AuthService
from app.schemas.user import Token, UserLogin, UserResponse
from app.api.dependencies import AnyAdmin

router = APIRouter(tags=["Authentication"])


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)]
):
    """
    Login with username and password.

    Returns a JWT bearer token with the principal's id, username and role.
    """
    auth_service = AuthService(db)
    return auth_service.login(credentials.username, credentials.password)


@router.get("/auth/me", response_model=UserResponse)
def get_current_user_info(current_user: AnyAdmin):
    """
    Get the authenticated admin's account.

    Requires valid JWT token in Authorization header.
    """
    return current_user
