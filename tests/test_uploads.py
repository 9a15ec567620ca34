"""
API tests for cover images, post files and articles with images.
"""
import os

from contenthub import crud
from contenthub.core.config import settings
from contenthub.utils.uploads import generate_filename
from tests.conftest import create_post, login


def stored_path(url_or_name):
    return os.path.join(settings.UPLOAD_DIR, os.path.basename(url_or_name))


def test_generated_filenames_keep_only_sane_extensions():
    assert generate_filename("photo.JPG").endswith(".jpg")
    assert "." not in generate_filename("../../etc/passwd")
    assert generate_filename("archive.tar.gz").endswith(".gz")
    assert "." not in generate_filename("weird.<script>")
    assert generate_filename("a.png") != generate_filename("a.png")


def test_post_with_cover_image(user_client):
    post = create_post(
        user_client,
        files={"coverImage": ("cover.png", b"png-bytes", "image/png")},
    )
    assert post["coverImage"].startswith("/uploads/")
    assert os.path.exists(stored_path(post["coverImage"]))

    served = user_client.get(post["coverImage"])
    assert served.status_code == 200
    assert served.content == b"png-bytes"

    user_client.delete(f"/api/posts/{post['id']}")
    assert not os.path.exists(stored_path(post["coverImage"]))


def test_disallowed_mime_type_is_rejected(user_client):
    resp = user_client.post(
        "/api/posts",
        data={"title": "x", "shortDescription": "y", "content": "z"},
        files={"coverImage": ("run.sh", b"#!/bin/sh", "application/x-sh")},
    )
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid file type"}
    assert user_client.get("/api/posts/my-posts").json() == []


def test_oversized_upload_is_rejected_and_removed(user_client):
    settings.MAX_UPLOAD_SIZE = 10
    before = set(os.listdir(settings.UPLOAD_DIR))
    post = create_post(user_client)

    resp = user_client.post(
        f"/api/posts/{post['id']}/files",
        files={"files": ("big.txt", b"x" * 100, "text/plain")},
    )
    assert resp.status_code == 413
    assert set(os.listdir(settings.UPLOAD_DIR)) == before


def test_attach_files_to_post(user_client, client_factory):
    post = create_post(user_client)
    files = [
        ("files", ("a.txt", b"first", "text/plain")),
        ("files", ("b.pdf", b"%PDF-1.4", "application/pdf")),
    ]
    resp = user_client.post(f"/api/posts/{post['id']}/files", files=files)
    assert resp.status_code == 200
    saved = resp.json()
    assert [f["originalName"] for f in saved] == ["a.txt", "b.pdf"]
    assert saved[0]["mimeType"] == "text/plain"
    assert saved[0]["size"] == 5

    detail = user_client.get(f"/api/posts/{post['id']}").json()
    assert len(detail["files"]) == 2

    stranger = client_factory()
    login(stranger, "mallory")
    resp = stranger.post(
        f"/api/posts/{post['id']}/files",
        files={"files": ("c.txt", b"nope", "text/plain")},
    )
    assert resp.status_code == 403
    assert stranger.delete(f"/api/files/{saved[0]['id']}").status_code == 403

    assert user_client.delete(f"/api/files/{saved[0]['id']}").status_code == 200
    assert not os.path.exists(stored_path(saved[0]["filename"]))
    assert len(user_client.get(f"/api/posts/{post['id']}").json()["files"]) == 1


def test_article_with_images(user_client):
    resp = user_client.post(
        "/api/articles",
        data={
            "title": "Long read",
            "shortDescription": "An article",
            "content": "Lots of text",
            "published": "true",
        },
        files=[
            ("images", ("one.png", b"1", "image/png")),
            ("images", ("two.jpg", b"2", "image/jpeg")),
        ],
    )
    assert resp.status_code == 200
    article = resp.json()
    assert article["type"] == "article"
    assert article["coverImage"] is None

    detail = user_client.get(f"/api/posts/{article['id']}").json()
    assert sorted(f["originalName"] for f in detail["files"]) == ["one.png", "two.jpg"]
    assert detail["category"]["name"] == "Other"


def test_article_without_images(user_client):
    resp = user_client.post(
        "/api/articles",
        data={"title": "Plain", "shortDescription": "s", "content": "c"},
    )
    assert resp.status_code == 200
    assert resp.json()["type"] == "article"


def test_failed_attach_removes_stored_files(user_client, monkeypatch):
    post = create_post(user_client)
    before = set(os.listdir(settings.UPLOAD_DIR))

    def fail(*args, **kwargs):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(crud, "add_post_files", fail)
    resp = user_client.post(
        f"/api/posts/{post['id']}/files",
        files=[
            ("files", ("a.txt", b"first", "text/plain")),
            ("files", ("b.txt", b"second", "text/plain")),
        ],
    )
    monkeypatch.undo()

    assert resp.status_code == 500
    assert set(os.listdir(settings.UPLOAD_DIR)) == before
    assert user_client.get(f"/api/posts/{post['id']}").json()["files"] == []
