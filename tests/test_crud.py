"""
Persistence tests for categories, site settings and post files.
"""
from contenthub import crud, schemas
from contenthub.core.config import settings
from contenthub.crud import crud_category, crud_site_setting
from contenthub.db.session import SessionLocal
from contenthub.models import Category, PostFile, SiteSetting
from contenthub.utils.uploads import StoredFile


def stale_then_real(real):
    """Lookup that misses once, as if another writer had not committed yet."""
    calls = []

    def lookup(db, key):
        calls.append(key)
        if len(calls) == 1:
            return None
        return real(db, key)

    return lookup


def test_default_category_is_seeded_when_missing(db):
    db.query(Category).delete()
    db.commit()

    category = crud.ensure_default_category(db)
    assert category.name == settings.DEFAULT_CATEGORY_NAME
    assert category.is_default is True

    assert crud.ensure_default_category(db).id == category.id
    assert db.query(Category).count() == 1


def test_existing_other_category_becomes_default(db):
    db.query(Category).delete()
    db.commit()
    plain = crud.create_category(db, schemas.CategoryCreate(name=settings.DEFAULT_CATEGORY_NAME))
    assert plain.is_default is False

    category = crud.ensure_default_category(db)
    assert category.id == plain.id
    assert category.is_default is True


def test_concurrent_default_seed_reuses_existing_row(db, monkeypatch):
    existing_id = crud.get_default_category(db).id
    db.commit()

    monkeypatch.setattr(crud_category, "get_default_category", lambda session: None)
    monkeypatch.setattr(
        crud_category,
        "get_category_by_name",
        stale_then_real(crud_category.get_category_by_name),
    )
    category = crud_category.ensure_default_category(db)

    assert category.id == existing_id
    assert db.query(Category).count() == 1


def test_concurrent_setting_insert_keeps_latest_value(db, monkeypatch):
    other = SessionLocal()
    try:
        crud.set_setting(other, "site_name", "First")
    finally:
        other.close()

    monkeypatch.setattr(
        crud_site_setting,
        "_get_setting_row",
        stale_then_real(crud_site_setting._get_setting_row),
    )
    assert crud.set_setting(db, "site_name", "Second").value == "Second"
    monkeypatch.undo()

    assert crud.get_setting(db, "site_name") == "Second"
    assert db.query(SiteSetting).filter(SiteSetting.key == "site_name").count() == 1


def test_set_setting_bumps_updated_at(db):
    first = crud.set_setting(db, "tagline", "Hello").updated_at
    second = crud.set_setting(db, "tagline", "Hello").updated_at
    assert second > first


def test_post_files_are_attached_in_order(db):
    crud.upsert_user(db, schemas.UserUpsert(id="author", email="author@example.com"))
    post = crud.create_post(
        db,
        schemas.PostCreate(title="Files", short_description="Short", content="Body"),
        author_id="author",
    )

    single = crud.add_post_file(db, post.id, "x.txt", "notes.txt", "text/plain", 3)
    batch = crud.add_post_files(db, post.id, [
        StoredFile(filename="y.pdf", original_name="paper.pdf", mime_type="application/pdf", size=10),
        StoredFile(filename="z.png", original_name="chart.png", mime_type="image/png", size=20),
    ])

    assert [f.original_name for f in batch] == ["paper.pdf", "chart.png"]
    files = crud.get_post_files(db, post.id)
    assert files[0].id == single.id
    assert {f.id for f in files[1:]} == {f.id for f in batch}
    assert db.query(PostFile).filter(PostFile.post_id == post.id).count() == 3
