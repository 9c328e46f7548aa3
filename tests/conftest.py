# tests/conftest.py
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret-for-hs256-at-least-32-bytes")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import shop_api.data.models  # noqa: F401
from shop_api.data.database import Base, build_engine, get_db
from shop_api.data.models.product import ProductModel
from shop_api.data.models.user import UserModel
from shop_api.main import app
from shop_api.services.security import hash_password


@pytest.fixture
def engine():
    """Swiezy in-memory SQLite na kazdy test, jedno polaczenie dla wszystkich sesji."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user(db_session):
    user = UserModel(username="alice", password=hash_password("password1"), role="CLIENT")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def other_user(db_session):
    user = UserModel(username="bob", password=hash_password("password2"), role="CLIENT")
    db_session.add(user)
    db_session.commit()
    return user


def make_product(db_session, name: str, price: str, category: str = "Misc", **extra) -> ProductModel:
    product = ProductModel(name=name, price=Decimal(price), category=category, **extra)
    db_session.add(product)
    db_session.commit()
    return product


@pytest.fixture
def product(db_session):
    return make_product(db_session, "Widget", "10.00", "Gadgets", description="A small widget")


@pytest.fixture
def cheap_product(db_session):
    return make_product(db_session, "Sticker", "2.50", "Stationery")


@pytest.fixture
def free_product(db_session):
    return make_product(db_session, "Flyer", "0.00", "Stationery")


def register_and_login(client: TestClient, username: str, password: str) -> str:
    response = client.post("/auth/register", json={"username": username, "password": password})
    assert response.status_code == 201
    response = client.post("/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return response.json()["access_token"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client_token(client):
    return register_and_login(client, "alice", "password1")


@pytest.fixture
def other_token(client):
    return register_and_login(client, "bob", "password2")


@pytest.fixture
def admin_token(client):
    token = register_and_login(client, "admin", "adminpass1")
    response = client.post("/auth/change-role", json={"role": "ADMIN"}, headers=auth_header(token))
    assert response.status_code == 200
    # nowa rola jest w tokenie dopiero po ponownym logowaniu
    response = client.post("/auth/login", json={"username": "admin", "password": "adminpass1"})
    return response.json()["access_token"]
