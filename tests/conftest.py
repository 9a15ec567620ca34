"""
Common fixtures for the API tests.

The application is pointed at a throw-away SQLite database and upload
directory before it is imported. Tables are rebuilt for every test.
"""
import os
import shutil
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="contenthub-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")
os.environ["ENVIRONMENT"] = "test"
os.environ["DEV_LOGIN_ENABLED"] = "true"
os.environ["ADMIN_EMAILS"] = '["admin@example.com"]'

import pytest
from fastapi.testclient import TestClient

from contenthub.core.config import settings
from contenthub.core.mail import MailError
from contenthub.crud.crud_category import ensure_default_category
from contenthub.db.base import Base
from contenthub.db.session import SessionLocal, engine
from contenthub.main import app


class FakeMailer:
    """Records messages instead of talking to an SMTP server."""

    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    def send(self, recipient, subject, html_content, reply_to=None):
        if self.fail:
            raise MailError("SMTP unavailable")
        self.sent.append({
            "recipient": recipient,
            "subject": subject,
            "html": html_content,
            "reply_to": reply_to,
        })

    def close(self):
        pass


def pytest_sessionfinish(session, exitstatus):
    engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_db():
    """Fresh schema with the default category for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_category(db)
    finally:
        db.close()
    yield
    engine.dispose()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def client(mailer):
    """Client that runs the application's startup and shutdown."""
    with TestClient(app) as test_client:
        app.state.mailer = mailer
        yield test_client


@pytest.fixture
def client_factory(client):
    """Extra clients with their own cookie jar, i.e. their own session."""
    def make():
        return TestClient(app)
    return make


def login(client, user_id, email=None, first_name="Test", last_name="User"):
    resp = client.post(
        "/api/auth/login",
        json={
            "id": user_id,
            "email": email or f"{user_id}@example.com",
            "firstName": first_name,
            "lastName": last_name,
        },
    )
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.fixture
def user_client(client):
    """`client` signed in as a regular user "alice"."""
    login(client, "alice", first_name="Alice")
    return client


@pytest.fixture
def admin_client(client_factory):
    admin = client_factory()
    login(admin, "root", email="admin@example.com", first_name="Ada")
    return admin


def create_category(admin, name="Tech", color="blue", description=None):
    resp = admin.post(
        "/api/categories",
        json={"name": name, "color": color, "description": description},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()


def create_post(client, title="Hi", category_id=None, published=True, files=None, **fields):
    data = {
        "title": title,
        "shortDescription": fields.pop("short_description", "A short description"),
        "content": fields.pop("content", "Body of the post"),
        "published": "true" if published else "false",
        "type": fields.pop("type", "post"),
    }
    if category_id is not None:
        data["categoryId"] = category_id
    resp = client.post("/api/posts", data=data, files=files)
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.fixture(autouse=True)
def restore_settings():
    saved = {
        "MAX_UPLOAD_SIZE": settings.MAX_UPLOAD_SIZE,
        "DEV_LOGIN_ENABLED": settings.DEV_LOGIN_ENABLED,
        "ADMIN_EMAILS": list(settings.ADMIN_EMAILS),
    }
    yield
    for key, value in saved.items():
        setattr(settings, key, value)
