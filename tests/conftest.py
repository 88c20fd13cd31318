"""
Policy Awareness Survey - Test Configuration and Fixtures
"""
import os
from typing import Generator

import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Set testing environment
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['ENVIRONMENT'] = 'test'
os.environ['SECRET_KEY'] = 'test-secret-key-for-testing-only'

from app.main import app
from app.core.database import Base, get_db
from app.core.rate_limiter import submission_limiter
from app.core.security import get_password_hash, create_access_token
from app.models.user import AdminUser, UserRole

fake = Faker()

# In-memory database shared by every connection of the test engine
test_engine = create_engine(
    'sqlite://',
    connect_args={'check_same_thread': False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope='function')
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database for each test"""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create test client with database override"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Every test starts with an empty submission budget"""
    submission_limiter.reset()
    yield
    submission_limiter.reset()


def _make_user(db: Session, username: str, role: UserRole) -> AdminUser:
    user = AdminUser(
        username=username,
        email=fake.unique.email(),
        hashed_password=get_password_hash('testpassword123'),
        full_name=fake.name(),
        role=role,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _headers_for(user: AdminUser) -> dict:
    token = create_access_token({'sub': user.id, 'username': user.username, 'role': user.role.value})
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def admin_user(db_session: Session) -> AdminUser:
    """The primary admin account"""
    return _make_user(db_session, 'admin', UserRole.ADMIN)


@pytest.fixture
def viewer_user(db_session: Session) -> AdminUser:
    return _make_user(db_session, 'viewer', UserRole.VIEWER)


@pytest.fixture
def auth_headers(admin_user: AdminUser) -> dict:
    return _headers_for(admin_user)


@pytest.fixture
def viewer_headers(viewer_user: AdminUser) -> dict:
    return _headers_for(viewer_user)


def build_payload(**overrides) -> dict:
    """A complete, valid submission in the form's camelCase shape"""
    payload = {
        'department': 'Technical Team',
        'awareness': {
            'antiSocialBehavior': 4,
            'antiDiscrimination': 3,
            'sexualHarassment': 5,
            'safeguarding': 2,
            'hrPolicyManual': 4,
            'codeOfConduct': 5,
            'financeWellness': 1,
            'workLifeBalance': 3,
            'digitalWorkplace': 4,
            'softSkills': 3,
            'professionalism': 5,
        },
        'urgentTrainings': ['Code of Conduct', 'Safeguarding Policy'],
        'financeWellnessNeeds': ['Debt Management – responsible use of loans, credit, and avoiding financial stress'],
        'cultureWellnessNeeds': ['Recognizing burnout and early warning signs'],
        'digitalSkillsNeeds': ['Cybersecurity Awareness', 'Data Privacy & Compliance'],
        'professionalDevNeeds': ['Effective Communication'],
        'confidenceLevel': 'Confident',
        'facedUnsureSituation': False,
        'observedIssues': ['None of the above'],
        'knewReportingChannel': 'Yes',
        'trainingMethod': 'In-person training sessions',
        'refresherFrequency': '1 training /Monthly',
        'prioritizedPolicies': ['HR Policy Manual', 'Code of Conduct'],
        'prioritizationReason': fake.sentence(),
        'policyChallenges': ['Language barriers or technical jargon'],
        'complianceSuggestions': fake.sentence(),
        'generalComments': fake.sentence(),
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def valid_payload() -> dict:
    return build_payload()


@pytest.fixture
def make_payload():
    """Factory for valid submissions with per-test overrides"""
    return build_payload
