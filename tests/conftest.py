"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from auth import security
from bookings import repository as bookings_repository
from categories import repository as categories_repository
from core import db
from fakes import FakeStore
from products import repository as products_repository
from users import repository as users_repository

PATCHED = {
    users_repository: (
        "create_user",
        "get_user_by_email",
        "get_public_user_by_email",
        "list_users",
        "update_user",
        "set_user_status",
    ),
    categories_repository: ("list_categories",),
    products_repository: (
        "insert_product",
        "list_products",
        "count_products",
        "get_product",
        "toggle_sold",
    ),
    bookings_repository: ("insert_booking", "list_bookings", "toggle_confirmed"),
}


@pytest.fixture
def store(monkeypatch):
    """In-memory store wired in place of every repository function."""
    fake = FakeStore()
    for module, names in PATCHED.items():
        for name in names:
            monkeypatch.setattr(module, name, getattr(fake, name))
    return fake


@pytest.fixture
def client(store):
    from main import app

    # The lifespan (real pool) is not entered: no `with TestClient(...)`.
    app.dependency_overrides[db.get_db] = lambda: object()
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(email="a@x.com"):
        return {"Authorization": f"Bearer {security.build_access_token(email=email)}"}

    return _headers


@pytest.fixture
def admin_headers(store, auth_headers):
    store.add("users", {"email": "admin@x.com", "name": "Admin", "status": "Admin"})
    return auth_headers("admin@x.com")
