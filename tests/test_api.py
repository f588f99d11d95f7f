"""
End-to-end tests through FastAPI's TestClient: cookies, guard, error bodies.
"""
from __future__ import annotations

import uuid

from backoffice.services.token_service import ACCESS_COOKIE_NAME, REFRESH_COOKIE_NAME

PASSWORD = "Senha@123"


def _set_cookie_headers(resp) -> list[str]:
    return resp.headers.get_list("set-cookie")


def test_welcome_redirects_to_docs(client):
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code in (302, 307)
    assert resp.headers["location"] == "/docs"
    assert client.get("/health").json() == {"ok": True}


def test_sign_up_and_sign_in_set_http_only_cookies(client):
    resp = client.post("/authentication/sign-up", json={"name": "Ana", "email": "ana@example.com", "password": PASSWORD})
    assert resp.status_code == 201

    dup = client.post("/authentication/sign-up", json={"name": "Ana", "email": "ana@example.com", "password": PASSWORD})
    assert dup.status_code == 409
    assert dup.json()["cause"] == "EMAIL_IN_USE"

    resp = client.post("/authentication/sign-in", json={"email": "ana@example.com", "password": PASSWORD})
    assert resp.status_code == 200
    cookies = _set_cookie_headers(resp)
    access = next(c for c in cookies if c.startswith(f"{ACCESS_COOKIE_NAME}="))
    refresh = next(c for c in cookies if c.startswith(f"{REFRESH_COOKIE_NAME}="))
    assert "httponly" in access.lower() and "max-age=86400" in access.lower()
    assert "httponly" in refresh.lower() and "max-age=604800" in refresh.lower()
    assert "samesite=lax" in access.lower()

    me = client.get("/authentication/me")
    assert me.status_code == 200
    assert me.json()["email"] == "ana@example.com"
    assert "password" not in me.json()


def test_sign_in_failures_share_one_shape(client):
    client.post("/authentication/sign-up", json={"name": "Ana", "email": "ana@example.com", "password": PASSWORD})
    wrong = client.post("/authentication/sign-in", json={"email": "ana@example.com", "password": "Outra@999"})
    unknown = client.post("/authentication/sign-in", json={"email": "x@example.com", "password": PASSWORD})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"message": "Credenciais inválidas", "code": 401, "cause": "INVALID_CREDENTIALS"}
    assert not _set_cookie_headers(wrong)


def test_invalid_payloads_return_invalid_parameters(client):
    resp = client.post("/authentication/sign-up", json={"name": "Ana", "email": "ana@example.com", "password": "fraca"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == 400
    assert body["cause"] == "INVALID_PARAMETERS"
    assert "password" in body["message"]

    resp = client.post("/authentication/sign-in", json={"email": "not-an-email", "password": "x"})
    assert resp.status_code == 400


def test_catalog_requires_access_cookie(client):
    resp = client.get("/categories/paginated")
    assert resp.status_code == 401
    assert resp.json()["cause"] == "AUTHENTICATION_REQUIRED"

    client.cookies.set(ACCESS_COOKIE_NAME, "forged.token.value")
    assert client.get("/products/paginated").status_code == 401


def test_refresh_token_cannot_be_used_as_access_token(auth_client):
    refresh_token = auth_client.cookies.get(REFRESH_COOKIE_NAME)
    auth_client.cookies.delete(ACCESS_COOKIE_NAME)
    auth_client.cookies.set(ACCESS_COOKIE_NAME, refresh_token)
    resp = auth_client.get("/categories/paginated")
    assert resp.status_code == 403
    assert resp.json()["cause"] == "ACCESS_DENIED"


def test_refresh_issues_new_access_cookie_and_sign_out_clears(auth_client):
    auth_client.cookies.delete(ACCESS_COOKIE_NAME)
    assert auth_client.get("/categories/paginated").status_code == 401

    resp = auth_client.post("/authentication/refresh")
    assert resp.status_code == 200
    assert any(c.startswith(f"{ACCESS_COOKIE_NAME}=") for c in _set_cookie_headers(resp))
    assert auth_client.get("/categories/paginated").status_code == 200

    resp = auth_client.post("/authentication/sign-out")
    assert resp.status_code == 200
    assert auth_client.get("/categories/paginated").status_code == 401
    assert auth_client.post("/authentication/refresh").status_code == 401


def test_category_crud_flow(auth_client):
    resp = auth_client.post("/categories", json={"name": "Ração Seca", "description": "Para cães"})
    assert resp.status_code == 201
    category = resp.json()
    assert category["slug"] == "racao-seca"
    assert category["status"] == "ACTIVE"
    assert category["trashed"] is False
    assert category["trashedAt"] is None
    assert {"createdAt", "updatedAt"} <= set(category)

    dup = auth_client.post("/categories", json={"name": "racao seca"})
    assert dup.status_code == 409
    assert dup.json() == {"message": "Esta categoria já está em uso.", "code": 409, "cause": "CATEGORY_IN_USE"}

    shown = auth_client.get(f"/categories/{category['id']}")
    assert shown.status_code == 200
    assert shown.json()["name"] == "Ração Seca"

    auth_client.post("/categories", json={"name": "Petiscos"})
    clash = auth_client.put(f"/categories/{category['id']}", json={"name": "Petiscos"})
    assert clash.status_code == 409

    updated = auth_client.put(f"/categories/{category['id']}", json={"name": "Ração Úmida", "status": "INACTIVE"})
    assert updated.status_code == 200
    assert updated.json()["slug"] == "racao-umida"
    assert updated.json()["status"] == "INACTIVE"
    assert updated.json()["description"] is None

    deleted = auth_client.delete(f"/categories/{category['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Categoria deletada com sucesso"}

    for method in ("get", "delete"):
        resp = getattr(auth_client, method)(f"/categories/{category['id']}")
        assert resp.status_code == 404
        assert resp.json()["cause"] == "CATEGORY_NOT_FOUND"

    reused = auth_client.post("/categories", json={"name": "Ração Úmida"})
    assert reused.status_code == 201


def test_invalid_uuid_is_invalid_parameters(auth_client):
    resp = auth_client.get("/products/not-a-uuid")
    assert resp.status_code == 400
    assert resp.json()["cause"] == "INVALID_PARAMETERS"

    resp = auth_client.get(f"/products/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json()["cause"] == "PRODUCT_NOT_FOUND"


def test_product_paginated_endpoint(auth_client):
    for i in range(7):
        resp = auth_client.post(
            "/products",
            json={"name": f"Coleira {i}", "price": 2990 + i, "stock": i, "sku": f"COL-{i}"},
        )
        assert resp.status_code == 201

    resp = auth_client.get("/products/paginated", params={"page": 2, "perPage": 5})
    assert resp.status_code == 200
    body = resp.json()
    assert [p["sku"] for p in body["data"]] == ["COL-5", "COL-6"]
    assert body["meta"] == {"total": 7, "perPage": 5, "currentPage": 2, "lastPage": 2, "firstPage": 1}

    resp = auth_client.get("/products/paginated", params={"search": "col-3"})
    assert [p["name"] for p in resp.json()["data"]] == ["Coleira 3"]

    assert auth_client.get("/products/paginated", params={"perPage": 101}).status_code == 400
    assert auth_client.get("/products/paginated", params={"page": 0}).status_code == 400


def test_out_of_range_integers_are_invalid_parameters(auth_client):
    for params in ({"page": 10**18}, {"page": 2**31}):
        resp = auth_client.get("/categories/paginated", params=params)
        assert resp.status_code == 400
        assert resp.json()["cause"] == "INVALID_PARAMETERS"

    base = {"name": "Aquário", "price": 4990, "stock": 1, "sku": "AQU-1"}
    for overrides in ({"price": 10**20}, {"price": 2**31}, {"stock": 2**31}):
        resp = auth_client.post("/products", json={**base, **overrides})
        assert resp.status_code == 400
        assert resp.headers["content-type"].startswith("application/json")
        assert resp.json()["cause"] == "INVALID_PARAMETERS"

    resp = auth_client.post("/products", json={**base, "price": 2**31 - 1, "stock": 2**31 - 1})
    assert resp.status_code == 201
    assert resp.json()["price"] == 2**31 - 1


def test_timestamps_are_serialized_as_utc(auth_client):
    created = auth_client.post("/categories", json={"name": "Aves"}).json()
    for key in ("createdAt", "updatedAt"):
        assert created[key].endswith(("Z", "+00:00")), created[key]

    shown = auth_client.get(f"/categories/{created['id']}").json()
    assert shown["createdAt"] == created["createdAt"]
