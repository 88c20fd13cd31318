"""Department headcount schemas."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional

from app.schemas.questionnaire import DEPARTMENTS


class DepartmentCountIn(BaseModel):
    department: Literal[DEPARTMENTS]
    staff_count: int = Field(ge=0)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DepartmentCountsUpdate(BaseModel):
    """Replacement set of active headcounts."""
    departments: List[DepartmentCountIn] = Field(min_length=1)

    @field_validator("departments")
    @classmethod
    def unique_departments(cls, value: List[DepartmentCountIn]) -> List[DepartmentCountIn]:
        names = [item.department for item in value]
        if len(names) != len(set(names)):
            raise ValueError("Each department may appear only once")
        return value


class DepartmentStat(BaseModel):
    department: str
    staff_count: int
    response_count: int
    remaining_count: int
    response_rate: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DepartmentTotals(BaseModel):
    total_expected: int
    total_responses: int
    total_remaining: int
    overall_response_rate: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DepartmentStats(BaseModel):
    """Per-department response progress for one survey period."""
    departments: List[DepartmentStat]
    totals: DepartmentTotals
    warning: Optional[str] = None
