"""Pytest configuration and fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.database import Base, ConnectionManager
from app.main import create_app
from app.models.patient_model import Patient
from app.models.provider_model import Provider

SQLITE_ARGS = {"check_same_thread": False}

PATIENT_ROWS = [
    ("John", "Smith", date(1980, 1, 15)),
    ("Jane", "Doe", date(1975, 6, 30)),
    ("John", "Johnson", date(1990, 3, 12)),
    ("Johnny", "Walker", date(1985, 11, 2)),
    ("Maria", "Garcia", date(1968, 9, 21)),
]

PROVIDER_ROWS = [
    ("Alice", "Nguyen", "Pediatrics"),
    ("Robert", "Brown", "Oncology"),
    ("Emily", "Clark", "Pediatrics"),
    ("David", "Lee", "Dermatology"),
]


@pytest.fixture
def store_url(tmp_path):
    """File-backed SQLite store seeded with patients and providers."""
    url = f"sqlite:///{tmp_path / 'directory.db'}"
    engine = create_engine(url)
    Base.metadata.create_all(engine)

    session = sessionmaker(bind=engine)()
    try:
        for first_name, last_name, dob in PATIENT_ROWS:
            session.add(Patient(first_name=first_name, last_name=last_name, date_of_birth=dob))
        for first_name, last_name, specialty in PROVIDER_ROWS:
            session.add(Provider(first_name=first_name, last_name=last_name, provider_specialty=specialty))
        session.commit()
    finally:
        session.close()
        engine.dispose()

    return url


@pytest.fixture
def unreachable_url(tmp_path):
    # sqlite will not create the missing parent directory
    return f"sqlite:///{tmp_path / 'missing' / 'directory.db'}"


@pytest.fixture
def manager(store_url):
    manager = ConnectionManager(store_url, connect_attempts=1, connect_args=SQLITE_ARGS)
    manager.connect()
    try:
        yield manager
    finally:
        manager.dispose()


@pytest.fixture
def broken_manager(unreachable_url):
    manager = ConnectionManager(unreachable_url, connect_attempts=1, connect_args=SQLITE_ARGS)
    try:
        yield manager
    finally:
        manager.dispose()


@pytest.fixture
def client(store_url):
    manager = ConnectionManager(store_url, connect_attempts=1, connect_args=SQLITE_ARGS)
    with TestClient(create_app(manager)) as test_client:
        yield test_client


@pytest.fixture
def broken_client(broken_manager):
    with TestClient(create_app(broken_manager)) as test_client:
        yield test_client
