"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from issue_tracker import models  # noqa: F401
from issue_tracker.config import Settings
from issue_tracker.database import Base, get_db
from issue_tracker.domain.issues import Issue, OpenIssue
from issue_tracker.infrastructure.issues.repositories import IssueRepository
from issue_tracker.main import create_app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection so every thread sees the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def test_settings() -> Settings:
    """Settings that keep the app away from any on-disk database."""
    return Settings(
        DATABASE_URL="sqlite://",
        CREATE_TABLES_ON_STARTUP=False,
        ENVIRONMENT="test",
    )


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create a fresh application for each test."""
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI, db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def issue_repository(db_session: Session) -> IssueRepository:
    """Create an event-sourced issue repository bound to the test session."""
    return IssueRepository(db_session)


@pytest.fixture
def opened_issue(issue_repository: IssueRepository) -> Issue:
    """Create and persist an opened issue."""
    issue = Issue()
    issue.execute(OpenIssue(issue.id, "Login button does nothing"))
    issue_repository.save(issue)
    return issue
