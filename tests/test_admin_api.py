"""
API tests for admin-gated routes: categories, users and site settings.
"""
import pytest

from tests.conftest import create_category, create_post, login


ADMIN_ROUTES = [
    ("post", "/api/categories", {"name": "Blocked"}),
    ("put", "/api/categories/any-id", {"name": "Blocked"}),
    ("delete", "/api/categories/any-id", None),
    ("get", "/api/admin/users", None),
    ("put", "/api/admin/users/alice/admin", {"isAdmin": True}),
    ("put", "/api/settings/about_us", {"value": "hacked"}),
]


@pytest.mark.parametrize("method,url,body", ADMIN_ROUTES)
def test_non_admin_gets_403(user_client, method, url, body):
    kwargs = {"json": body} if body is not None else {}
    resp = getattr(user_client, method)(url, **kwargs)
    assert resp.status_code == 403
    assert resp.json() == {"detail": "Admin access required"}


@pytest.mark.parametrize("method,url,body", ADMIN_ROUTES)
def test_anonymous_gets_401(client, method, url, body):
    kwargs = {"json": body} if body is not None else {}
    assert getattr(client, method)(url, **kwargs).status_code == 401


def test_denied_request_has_no_side_effects(user_client, admin_client):
    user_client.post("/api/categories", json={"name": "Sneaky"})
    user_client.put("/api/settings/about_us", json={"value": "hacked"})

    names = [c["name"] for c in admin_client.get("/api/categories").json()]
    assert "Sneaky" not in names
    assert admin_client.get("/api/settings/about_us").json() == {"value": None}


def test_category_crud(admin_client):
    tech = create_category(admin_client, name="Tech", color="blue", description="Gadgets")
    assert tech["color"] == "blue"
    assert tech["isDefault"] is False

    resp = admin_client.post("/api/categories", json={"name": "Tech"})
    assert resp.status_code == 409

    resp = admin_client.put(f"/api/categories/{tech['id']}", json={"color": "green"})
    assert resp.status_code == 200
    assert resp.json()["color"] == "green"
    assert resp.json()["name"] == "Tech"

    assert admin_client.put("/api/categories/missing", json={"color": "red"}).status_code == 404

    resp = admin_client.delete(f"/api/categories/{tech['id']}")
    assert resp.status_code == 200
    names = [c["name"] for c in admin_client.get("/api/categories").json()]
    assert names == ["Other"]


def test_categories_are_sorted_by_name(admin_client):
    for name in ("Zoology", "Art", "Music"):
        create_category(admin_client, name=name)
    names = [c["name"] for c in admin_client.get("/api/categories").json()]
    assert names == ["Art", "Music", "Other", "Zoology"]


def test_category_in_use_or_default_cannot_be_deleted(admin_client, user_client):
    tech = create_category(admin_client, name="Tech")
    create_post(user_client, category_id=tech["id"])
    assert admin_client.delete(f"/api/categories/{tech['id']}").status_code == 409

    default = [c for c in admin_client.get("/api/categories").json() if c["isDefault"]][0]
    assert admin_client.delete(f"/api/categories/{default['id']}").status_code == 409


def test_admin_manages_users(admin_client, user_client):
    users = admin_client.get("/api/admin/users").json()
    assert {u["id"] for u in users} == {"root", "alice"}
    assert next(u for u in users if u["id"] == "root")["isAdmin"] is True

    resp = admin_client.put("/api/admin/users/alice/admin", json={"isAdmin": True})
    assert resp.status_code == 200

    # alice's next request sees the new flag without signing in again
    assert user_client.get("/api/admin/users").status_code == 200

    assert admin_client.put("/api/admin/users/ghost/admin", json={"isAdmin": True}).status_code == 404


def test_revoked_admin_loses_access_immediately(admin_client, client_factory):
    second = client_factory()
    login(second, "second-admin")
    admin_client.put("/api/admin/users/second-admin/admin", json={"isAdmin": True})
    assert second.get("/api/admin/users").status_code == 200

    admin_client.put("/api/admin/users/second-admin/admin", json={"isAdmin": False})
    assert second.get("/api/admin/users").status_code == 403


def test_settings_round_trip(admin_client, client):
    assert client.get("/api/settings/about_us").json() == {"value": None}

    assert admin_client.put("/api/settings/about_us", json={"value": "We share things."}).status_code == 200
    assert client.get("/api/settings/about_us").json() == {"value": "We share things."}

    admin_client.put("/api/settings/about_us", json={"value": "Updated"})
    assert client.get("/api/settings/about_us").json() == {"value": "Updated"}


def test_default_category_cannot_be_renamed(admin_client, user_client):
    default = [c for c in admin_client.get("/api/categories").json() if c["isDefault"]][0]

    resp = admin_client.put(f"/api/categories/{default['id']}", json={"name": "Misc"})
    assert resp.status_code == 409

    resp = admin_client.put(f"/api/categories/{default['id']}", json={"name": "Other", "color": "teal"})
    assert resp.status_code == 200
    assert resp.json()["color"] == "teal"

    assert admin_client.post("/api/categories", json={"name": "Other"}).status_code == 409
    post = create_post(user_client)
    assert post["categoryId"] == default["id"]
