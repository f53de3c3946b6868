import os

# Must be set before the application is imported
os.environ["TESTING"] = "1"
os.environ["TEST_DATABASE_URL"] = "sqlite:///./test.db"
os.environ["RATE_LIMIT_REQUESTS"] = "1000"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from hms.main import app
from hms.core.database import get_db, get_redis, Base

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

SEED_DOCTOR_ID = "6501234567891011121314a1"
SEED_DOCTOR_EMAIL = "sarah.johnson@example.com"
SEED_DOCTOR_PASSWORD = "doctor123"
PASSWORD = "Password123"

@pytest.fixture(scope="function")
def test_db():
    # Create tables
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    get_redis().flushall()

@pytest.fixture
def client(test_db):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

def register(client, email, role="patient", name="Test User", password=PASSWORD, **extra):
    payload = {"email": email, "password": password, "name": name, "role": role, **extra}
    response = client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]

def login(client, email, password=PASSWORD):
    response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["data"]

def auth_headers(tokens):
    return {"Authorization": f"Bearer {tokens['accessToken']}"}

@pytest.fixture
def patient(client):
    user = register(client, "patient@example.com", name="Pat Patient")
    return {"user": user, "headers": auth_headers(login(client, "patient@example.com"))}

@pytest.fixture
def other_patient(client):
    user = register(client, "other@example.com", name="Olive Other")
    return {"user": user, "headers": auth_headers(login(client, "other@example.com"))}

@pytest.fixture
def doctor(client):
    user = register(
        client, "doctor@example.com", role="doctor", name="Dr. Dana Reg",
        specialization="Dermatology", licenseNumber="MCI-123456",
    )
    return {"user": user, "headers": auth_headers(login(client, "doctor@example.com"))}

@pytest.fixture
def seed_doctor(client):
    tokens = login(client, SEED_DOCTOR_EMAIL, SEED_DOCTOR_PASSWORD)
    return {"user": tokens["user"], "headers": auth_headers(tokens)}
