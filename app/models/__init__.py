"""Database models."""
from app.models.user import AdminUser, UserRole
from app.models.response import SurveyResponse
from app.models.survey_config import SurveyConfig
from app.models.department import DepartmentCount

__all__ = [
    "AdminUser",
    "UserRole",
    "SurveyResponse",
    "SurveyConfig",
    "DepartmentCount",
]
