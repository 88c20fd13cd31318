"""Seed the database with the primary admin account and default department counts."""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.core.config import settings
from app.core.database import SessionLocal, engine, Base
from app.core.security import get_password_hash
from app.models.user import AdminUser, UserRole
from app.services.department_service import DepartmentService


def seed_admin(db):
    """Create the primary admin account unless it exists."""
    if db.query(AdminUser).filter(AdminUser.username == settings.ADMIN_USERNAME).first():
        print(f"Admin user '{settings.ADMIN_USERNAME}' already exists. Skipping.")
        return

    db.add(AdminUser(
        username=settings.ADMIN_USERNAME,
        email=settings.ADMIN_EMAIL,
        hashed_password=get_password_hash(settings.ADMIN_PASSWORD),
        full_name="System Administrator",
        role=UserRole.ADMIN,
    ))
    db.commit()
    print(f"✅ Created admin user '{settings.ADMIN_USERNAME}' (password from ADMIN_PASSWORD)")


def seed_departments(db):
    """Load the default headcounts unless active counts exist."""
    rows = DepartmentService(db).seed_defaults()
    if rows is None:
        print("Department counts already exist. Skipping.")
        return
    print(f"✅ Seeded {len(rows)} department counts")


def main():
    db = SessionLocal()
    try:
        seed_admin(db)
        seed_departments(db)
    except Exception as e:
        db.rollback()
        print(f"❌ Error seeding data: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    # Create tables if they don't exist
    Base.metadata.create_all(bind=engine)

    main()
