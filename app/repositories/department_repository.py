"""Department headcount repository."""
from typing import Dict, List
from sqlalchemy.orm import Session

from app.models.department import DepartmentCount


class DepartmentRepository:
    """Data access for department headcounts."""

    def __init__(self, db: Session):
        self.db = db

    def get_active(self) -> List[DepartmentCount]:
        return (
            self.db.query(DepartmentCount)
            .filter(DepartmentCount.is_active == True)  # noqa: E712
            .order_by(DepartmentCount.department)
            .all()
        )

    def replace_active(self, counts: Dict[str, int]) -> List[DepartmentCount]:
        """Deactivate the current set and insert ``counts`` in one transaction."""
        try:
            self.db.query(DepartmentCount).filter(
                DepartmentCount.is_active == True  # noqa: E712
            ).update({DepartmentCount.is_active: False}, synchronize_session=False)
            for department, staff_count in counts.items():
                self.db.add(DepartmentCount(department=department, staff_count=staff_count, is_active=True))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return self.get_active()
