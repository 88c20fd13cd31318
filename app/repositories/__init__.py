"""Repository layer for data access."""
from app.repositories.user_repository import UserRepository
from app.repositories.response_repository import ResponseRepository
from app.repositories.survey_config_repository import SurveyConfigRepository
from app.repositories.department_repository import DepartmentRepository

__all__ = [
    "UserRepository",
    "ResponseRepository",
    "SurveyConfigRepository",
    "DepartmentRepository",
]
