"""
Survey window guard.

Decides whether the current survey configuration accepts submissions at a
given instant. ``evaluate_window`` is a pure function of the config record
and the clock.
"""
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from app.core.exceptions import SurveyUnavailable
from app.models.survey_config import SurveyConfig

logger = logging.getLogger(__name__)

# With no config on record (or the lookup failing) submissions are accepted.
FAIL_OPEN_ON_MISSING_CONFIG = True


class WindowStatus(str, Enum):
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    ENDED = "ended"
    INACTIVE = "inactive"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def evaluate_window(config: Optional[SurveyConfig], now: datetime) -> WindowStatus:
    """
    Classify ``now`` against ``config``.

    The active flag wins over the dates; both bounds are inclusive.
    """
    if config is None:
        return WindowStatus.ACTIVE if FAIL_OPEN_ON_MISSING_CONFIG else WindowStatus.INACTIVE
    if not config.is_active:
        return WindowStatus.INACTIVE
    now = _as_utc(now)
    if now < _as_utc(config.start_date):
        return WindowStatus.NOT_STARTED
    if now > _as_utc(config.end_date):
        return WindowStatus.ENDED
    return WindowStatus.ACTIVE


def ensure_accepting(config: Optional[SurveyConfig], now: datetime) -> None:
    """
    Raise unless the window is open.

    Raises:
        SurveyUnavailable: With reason ``inactive``, ``not_started`` or ``ended``
    """
    if config is None:
        logger.warning("No survey config on record, accepting submission")
    window = evaluate_window(config, now)
    if window is WindowStatus.ACTIVE:
        return
    logger.info("Submission rejected: survey %s", window.value)
    raise SurveyUnavailable(
        window.value,
        start_date=config.start_date if config is not None else None,
        end_date=config.end_date if config is not None else None,
    )
