"""Public survey submission router."""
from typing import Annotated, Any
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.rate_limiter import RateLimiter, get_submission_limiter
from app.services.response_service import ResponseService
from app.api.dependencies import ClientAddress

router = APIRouter(tags=["Survey"])


@router.post("/submit", status_code=201)
def submit_response(
    payload: Annotated[Any, Body()],
    db: Annotated[Session, Depends(get_db)],
    limiter: Annotated[RateLimiter, Depends(get_submission_limiter)],
    client: ClientAddress,
):
    """
    Submit one anonymous survey response.

    The payload is validated first, then the survey window is checked and
    the per-client rate limit applied. If the database is down the response
    is logged for recovery and still acknowledged, with a ``warning``.
    """
    service = ResponseService(db)
    result = service.process_submission(payload, client, limiter)

    body = {
        "success": True,
        "id": result.id,
        "message": "Survey response submitted successfully",
    }
    if result.warning:
        body["warning"] = result.warning
    return body
