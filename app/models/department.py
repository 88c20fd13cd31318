"""Department headcount model."""
from sqlalchemy import Column, Integer, String, Boolean, CheckConstraint

from app.core.database import Base
from app.models.types import UTCDateTime, utcnow


class DepartmentCount(Base):
    """
    Expected headcount for a department, used for response rates.
    Replacing the counts deactivates the previous rows instead of deleting them.
    """

    __tablename__ = "department_counts"

    id = Column(Integer, primary_key=True, index=True)
    department = Column(String(100), nullable=False, index=True)
    staff_count = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("staff_count >= 0", name="check_staff_count_non_negative"),
    )

    def __repr__(self):
        return f"<DepartmentCount(department={self.department}, staff={self.staff_count}, active={self.is_active})>"
