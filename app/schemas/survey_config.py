"""Survey configuration schemas."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone


class SurveyConfigUpdate(BaseModel):
    """Admin update of the survey window."""
    is_active: bool
    start_date: datetime
    end_date: datetime
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    expected_responses: Optional[int] = Field(None, ge=1)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Naive timestamps are taken as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class SurveyConfigOut(BaseModel):
    """Survey window as exposed to the form and the dashboard."""
    id: Optional[int] = None
    survey_period: str
    is_active: bool
    start_date: datetime
    end_date: datetime
    title: str
    description: Optional[str] = None
    expected_responses: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
