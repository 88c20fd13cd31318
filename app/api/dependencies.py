"""Shared API dependencies: authentication and client identity."""
import logging
from typing import Annotated, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import Forbidden, Unauthorized
from app.core.security import decode_access_token
from app.models.user import AdminUser, UserRole
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_admin(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    db: Annotated[Session, Depends(get_db)],
) -> AdminUser:
    """
    Resolve the bearer token to an active admin account.

    Raises:
        Unauthorized: If the header is missing, the token is invalid or the account is gone
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Missing bearer token")

    payload = decode_access_token(credentials.credentials)
    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise Unauthorized("Invalid token")

    user = UserRepository(db).get_by_id(user_id)
    if not user or not user.is_active:
        raise Unauthorized("Account not found or inactive")
    return user


def require_admin_role(
    current_user: Annotated[AdminUser, Depends(get_current_admin)],
) -> AdminUser:
    """Only accounts with the admin role."""
    if current_user.role != UserRole.ADMIN:
        logger.info("User %s denied: admin role required", current_user.username)
        raise Forbidden()
    return current_user


def client_address(request: Request) -> str:
    """First X-Forwarded-For hop, else the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client:
        return request.client.host
    return "unknown"


# Type aliases for dependency injection
AnyAdmin = Annotated[AdminUser, Depends(get_current_admin)]
AdminOnly = Annotated[AdminUser, Depends(require_admin_role)]
ClientAddress = Annotated[str, Depends(client_address)]
