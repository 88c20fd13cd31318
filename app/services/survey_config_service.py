"""Survey configuration service."""
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import StorageUnavailable, ValidationError
from app.models.survey_config import SurveyConfig
from app.models.types import utcnow
from app.repositories.response_repository import ResponseRepository
from app.repositories.survey_config_repository import SurveyConfigRepository
from app.schemas.survey_config import SurveyConfigUpdate

logger = logging.getLogger(__name__)

ARCHIVE_TAG_FORMAT = "archive-%Y%m%d%H%M%S"


class SurveyConfigService:
    """Survey window administration."""

    def __init__(self, db: Session):
        self.db = db
        self.config_repo = SurveyConfigRepository(db)
        self.response_repo = ResponseRepository(db)
        self.period = settings.DEFAULT_SURVEY_PERIOD

    def _default_values(self, now: datetime) -> Dict[str, Any]:
        return {
            "survey_period": self.period,
            "is_active": True,
            "start_date": now,
            "end_date": now + timedelta(days=settings.DEFAULT_SURVEY_DURATION_DAYS),
            "title": settings.DEFAULT_SURVEY_TITLE,
            "description": settings.DEFAULT_SURVEY_DESCRIPTION,
            "expected_responses": settings.DEFAULT_EXPECTED_RESPONSES,
        }

    def find_current_config(self) -> Optional[SurveyConfig]:
        """Current config without creating one. Storage errors propagate."""
        return self.config_repo.get_current(self.period)

    def get_current_config(self) -> Tuple[SurveyConfig, Optional[str]]:
        """
        Current config, created with defaults on first read.

        On a storage error an unsaved default is returned together with a
        warning so the public form keeps working.
        """
        try:
            config = self.config_repo.get_current(self.period)
            if config is None:
                config = self.config_repo.create(**self._default_values(utcnow()))
                logger.info("Created default survey config %s", config.id)
            return config, None
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Survey config lookup failed, serving defaults")
            now = utcnow()
            config = SurveyConfig(**self._default_values(now), created_at=now)
            return config, "Database unavailable, showing default survey configuration"

    def update_config(self, data: SurveyConfigUpdate) -> SurveyConfig:
        """
        Create or update the current period's config.

        Raises:
            ValidationError: If the end date precedes the start date
            StorageUnavailable: If the database cannot be written
        """
        if settings.ENFORCE_CONFIG_DATE_ORDER and data.end_date < data.start_date:
            raise ValidationError(
                [{"path": "endDate", "expected": "a date on or after startDate", "received": data.end_date.isoformat()}],
                message="End date must not be before start date",
            )

        values = {
            "is_active": data.is_active,
            "start_date": data.start_date,
            "end_date": data.end_date,
            "title": data.title or settings.DEFAULT_SURVEY_TITLE,
            "description": data.description,
        }
        try:
            config = self.config_repo.get_current(self.period)
            if config is None:
                values["expected_responses"] = data.expected_responses or settings.DEFAULT_EXPECTED_RESPONSES
                config = self.config_repo.create(survey_period=self.period, **values)
            else:
                if data.expected_responses is not None:
                    values["expected_responses"] = data.expected_responses
                config = self.config_repo.update(config, **values)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to save survey config")
            raise StorageUnavailable("Failed to update survey configuration: database unavailable")
        return config

    def _archive_tag(self, now: datetime) -> str:
        base = now.strftime(ARCHIVE_TAG_FORMAT)
        tag, suffix = base, 2
        while self.response_repo.period_exists(tag):
            tag = f"{base}-{suffix}"
            suffix += 1
        return tag

    def reset_survey(self) -> Dict[str, Any]:
        """
        Start a fresh survey generation.

        Responses of the current period are re-tagged to an archive period
        (never deleted), the period's configs are removed and a new default
        config starting now is created, all in one transaction.

        Raises:
            StorageUnavailable: If the database cannot be written
        """
        now = utcnow()
        try:
            tag = self._archive_tag(now)
            archived = self.response_repo.retag_period(self.period, tag)
            self.config_repo.delete_period(self.period)
            config = self.config_repo.create(commit=False, **self._default_values(now))
            self.db.commit()
            self.db.refresh(config)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Survey reset failed")
            raise StorageUnavailable("Failed to reset survey: database unavailable")

        logger.info("Survey reset: %d response(s) archived as %s", archived, tag)
        return {"config": config, "archived_count": archived, "archive_tag": tag}
