# tests/conftest.py
import os

# Keep the application's own engine off the on-disk database during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
import logging
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from petitbac.main import app
from petitbac.db.base import Base
from petitbac.api.deps import get_validation_service
from petitbac.services.cache_service import CacheService
from petitbac.services.categorization_engine import CategorizationEngine
from petitbac.services.validation_service import ValidationService
from petitbac.services.validators.fixed_list import FixedListValidator
from petitbac.services.validators.local_cache import LocalCacheValidator
from petitbac.services.validators.semantic_ai import SemanticAiValidator
from petitbac.services.validators.web_dictionary import WebDictionaryValidator

SQLALCHEMY_DATABASE_URL_TEST = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL_TEST,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create tables once for the entire test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(autouse=True)
def clean_validated_words():
    """Every test starts with an empty cache table."""
    yield
    with engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())

@pytest.fixture(scope="function")
def db_session():
    """Provides a database session bound to the shared in-memory test database."""
    session = TestingSessionLocal()
    yield session
    session.close()

@pytest.fixture
def cache_service() -> CacheService:
    return CacheService(session_factory=TestingSessionLocal)

@pytest.fixture
def offline_web_validator() -> WebDictionaryValidator:
    """A dictionary validator that is switched off, so nothing reaches the network."""
    return WebDictionaryValidator(enabled=False)

@pytest.fixture
def validation_service(cache_service, offline_web_validator) -> ValidationService:
    engine_ = CategorizationEngine([
        LocalCacheValidator(cache_service),
        FixedListValidator(),
        offline_web_validator,
        SemanticAiValidator(),
    ])
    return ValidationService(engine=engine_, cache_service=cache_service)

@pytest.fixture
def client(validation_service) -> TestClient:
    """Provides a TestClient whose pipeline runs against the test database."""
    app.dependency_overrides[get_validation_service] = lambda: validation_service
    yield TestClient(app)
    app.dependency_overrides.clear()

def pytest_configure(config):
    """
    Hook to configure logging levels before tests are run.
    This silences noisy third-party libraries.
    """
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
