import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.database import Base, get_db
from app.main import app

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


def register(client, email):
    res = client.post("/api/auth/register", json={"email": email, "password": "testpass123"})
    data = res.json()
    return data["user"], {"Authorization": f"Bearer {data['access_token']}"}


@pytest.fixture
def owner(client):
    return register(client, "test@example.com")


@pytest.fixture
def auth_headers(owner):
    return owner[1]


@pytest.fixture
def second_user(client):
    return register(client, "user2@example.com")


@pytest.fixture
def third_user(client):
    return register(client, "user3@example.com")


@pytest.fixture
def group_id(client, auth_headers):
    res = client.post("/api/groups", json={"name": "Test Group"}, headers=auth_headers)
    return res.json()["id"]


@pytest.fixture
def make_user(client):
    return lambda email: register(client, email)
