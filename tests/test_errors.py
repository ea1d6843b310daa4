"""Tests for error mapping at the HTTP boundary and document helpers."""

from datetime import datetime, timezone

import pytest

from core import documents
from core.errors import Conflict, Forbidden, InvalidArgument, NotFound, Unauthorized
from products import repository as products_repository


@pytest.mark.parametrize(
    "error,status_code",
    [(Unauthorized, 401), (Forbidden, 403), (NotFound, 404), (Conflict, 400), (InvalidArgument, 400)],
)
def test_error_status_codes(error, status_code):
    exc = error()
    assert exc.status_code == status_code
    assert exc.detail


@pytest.mark.parametrize("raw", ["", "abc", "-1", "0", "1.5", str(2**63), "²", "١٢"])
def test_parse_id_rejects_malformed(raw):
    with pytest.raises(InvalidArgument):
        documents.parse_id(raw)


def test_parse_id_accepts_positive_integers():
    assert documents.parse_id(" 42 ") == 42


def test_to_document_exposes_string_id():
    assert documents.to_document({"id": 3, "doc": {"name": "TV"}}) == {"name": "TV", "_id": "3"}


def test_posted_time_is_rfc1123():
    stamp = documents.posted_time(datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc))
    assert stamp == "Mon, 19 Oct 2026 10:00:00 GMT"


def test_unexpected_error_becomes_500(client, store, monkeypatch):
    async def broken(database, product_id):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(products_repository, "get_product", broken)
    response = client.get("/products/1")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error."}


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json() == {"message": "marketplace api"}


@pytest.mark.parametrize("path", ["/products/%C2%B2", "/products/%D9%A1%D9%A2"])
def test_non_ascii_digit_id_is_bad_request(client, store, path):
    response = client.get(path)
    assert response.status_code == 400
    assert "Invalid product id" in response.json()["detail"]


def test_non_ascii_digit_id_on_protected_routes_is_bad_request(client, store, auth_headers):
    headers = auth_headers()
    assert client.put("/products/status/%C2%B2", headers=headers).status_code == 400
    assert client.put("/bookings/status/%C2%B2", headers=headers).status_code == 400
    assert client.put("/users/%C2%B2", json={"name": "X"}, headers=headers).status_code == 400
