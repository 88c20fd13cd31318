"""Survey configuration router."""
import logging
from typing import Annotated
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.survey_config_service import SurveyConfigService
from app.schemas.survey_config import SurveyConfigOut, SurveyConfigUpdate
from app.api.dependencies import AnyAdmin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/survey-config", tags=["Survey Config"])


def _config_body(config) -> dict:
    return SurveyConfigOut.model_validate(config).model_dump(by_alias=True, mode="json")


@router.get("")
def get_survey_config(db: Annotated[Session, Depends(get_db)]):
    """
    Current survey window (public). Created with defaults on first read.
    """
    service = SurveyConfigService(db)
    config, warning = service.get_current_config()
    body = {"success": True, "config": _config_body(config)}
    if warning:
        body["warning"] = warning
    return body


@router.api_route("", methods=["POST", "PUT"])
def update_survey_config(
    data: SurveyConfigUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyAdmin
):
    """
    Create or update the current survey window.
    """
    logger.info("Admin %s updating survey config", current_user.username)
    service = SurveyConfigService(db)
    config = service.update_config(data)
    return {
        "success": True,
        "message": "Survey configuration updated successfully",
        "config": _config_body(config),
    }


@router.delete("")
def reset_survey(
    db: Annotated[Session, Depends(get_db)],
    current_user: AnyAdmin
):
    """
    Start a new survey generation.

    Current responses are archived under a new ``archive-<timestamp>`` period
    and a fresh default window is created.
    """
    logger.warning("Admin %s resetting survey", current_user.username)
    service = SurveyConfigService(db)
    result = service.reset_survey()
    return {
        "success": True,
        "message": "Survey reset successfully",
        "config": _config_body(result["config"]),
        "archivedCount": result["archived_count"],
        "archiveTag": result["archive_tag"],
    }
