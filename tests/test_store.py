"""
Resource store tests: the CRUD contract shared by all four collections.
Run with: pytest tests/test_store.py -v
"""

import os
from unittest.mock import patch

import pytest

from folio.core.exceptions import NotFoundError, TransportError, ValidationError
from folio.core.schema import BLOG, PROJECT
from folio.core.store import ResourceStore, get_store


SAMPLE_FIELDS = {
    "projects": {
        "title": "Mining Dashboard",
        "description": "desc",
        "image": "",
        "link": "https://x",
        "technologies": ["React"],
    },
    "blogs": {
        "title": "Old",
        "content": "Body text",
        "image": "https://img.example.com/cover.png",
        "author": "Admin",
        "date": 1700000000000,
    },
    "services": {
        "title": "Web Development",
        "description": "Build modern websites.",
        "icon": "fa-code",
    },
    "heroImages": {
        "title": "Welcome",
        "subtitle": "Hello there",
        "image": "data:image/png;base64,AAAA",
    },
}


# ---------------------------------------------------------------------------
# create / get_by_id
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("collection", sorted(SAMPLE_FIELDS))
def test_create_then_get_returns_fields_plus_id(stores, collection):
    """create(fields) followed by get_by_id(id) yields fields plus the assigned id."""
    store = stores[collection]
    fields = SAMPLE_FIELDS[collection]

    created = store.create(fields)

    assert "id" in created
    assert store.get_by_id(created["id"]) == dict(fields, id=created["id"])


def test_project_scenario_listed_once(stores):
    """Creating the Mining Dashboard project makes list() contain exactly it."""
    store = stores["projects"]
    created = store.create(SAMPLE_FIELDS["projects"])

    records = store.list()

    assert len(records) == 1
    assert records[0] == dict(SAMPLE_FIELDS["projects"], id=created["id"])


def test_ids_are_unique_and_list_is_in_creation_order(stores):
    store = stores["services"]
    first = store.create({"title": "A", "description": "a"})
    second = store.create({"title": "A", "description": "duplicate titles are fine"})

    assert first["id"] != second["id"]
    assert [r["id"] for r in store.list()] == [first["id"], second["id"]]


def test_get_by_id_missing_is_none(stores):
    """Unknown and malformed ids are 'not found', not errors."""
    store = stores["blogs"]
    assert store.get_by_id(999) is None
    assert store.get_by_id("not-an-id") is None
    assert store.get_by_id(None) is None


def test_list_empty_collection(stores):
    assert stores["heroImages"].list() == []


# ---------------------------------------------------------------------------
# Defaults and validation
# ---------------------------------------------------------------------------

def test_optional_defaults_applied(stores):
    """Project image, service icon and all hero fields default to empty text."""
    project = stores["projects"].create({
        "title": "T", "description": "D", "link": "#", "technologies": [],
    })
    service = stores["services"].create({"title": "T", "description": "D"})
    hero = stores["heroImages"].create({})

    assert project["image"] == ""
    assert service["icon"] == ""
    assert {k: hero[k] for k in ("title", "subtitle", "image")} == {
        "title": "", "subtitle": "", "image": "",
    }


def test_blog_image_is_omitted_when_absent(stores):
    blog = stores["blogs"].create({
        "title": "T", "content": "C", "author": "A", "date": 1,
    })
    assert "image" not in stores["blogs"].get_by_id(blog["id"])


@pytest.mark.parametrize("fields, bad_field", [
    ({"description": "d", "link": "#", "technologies": []}, "title"),
    ({"title": "t", "description": "d", "link": "#", "technologies": "React"}, "technologies"),
    ({"title": "t", "description": "d", "link": "#", "technologies": ["React", 3]}, "technologies"),
    ({"title": 5, "description": "d", "link": "#", "technologies": []}, "title"),
    ({"title": "t", "description": "d", "link": "#", "technologies": [], "stars": 4}, "stars"),
    ({"id": 7, "title": "t", "description": "d", "link": "#", "technologies": []}, "id"),
])
def test_create_project_validation(stores, fields, bad_field):
    with pytest.raises(ValidationError) as exc:
        stores["projects"].create(fields)
    assert exc.value.field == bad_field
    assert stores["projects"].list() == []


def test_blog_date_must_be_a_number(stores):
    base = {"title": "t", "content": "c", "author": "a"}
    with pytest.raises(ValidationError):
        stores["blogs"].create(dict(base, date="yesterday"))
    with pytest.raises(ValidationError):
        stores["blogs"].create(dict(base, date=True))
    assert stores["blogs"].create(dict(base, date=1.5))["date"] == 1.5


def test_blog_date_must_be_finite(stores):
    """NaN and Infinity parse from JSON but can't be served back as JSON."""
    base = {"title": "t", "content": "c", "author": "a"}
    for bad in (float("nan"), float("inf"), float("-inf")):
        with pytest.raises(ValidationError) as exc:
            stores["blogs"].create(dict(base, date=bad))
        assert exc.value.field == "date"

    blog = stores["blogs"].create(dict(base, date=1))
    with pytest.raises(ValidationError):
        stores["blogs"].update(blog["id"], {"date": float("nan")})
    assert stores["blogs"].get_by_id(blog["id"])["date"] == 1


def test_large_embedded_image_is_accepted(stores):
    """Embedded images make text fields arbitrarily large."""
    image = "data:image/png;base64," + "A" * (2 * 1024 * 1024)
    hero = stores["heroImages"].create({"image": image})
    assert stores["heroImages"].get_by_id(hero["id"])["image"] == image


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------

def test_update_changes_only_given_fields(stores):
    """Blog B1 titled 'Old' keeps everything but its title after update(B1, {title: 'New'})."""
    store = stores["blogs"]
    b1 = store.create(SAMPLE_FIELDS["blogs"])

    updated = store.update(b1["id"], {"title": "New"})

    expected = dict(SAMPLE_FIELDS["blogs"], id=b1["id"], title="New")
    assert updated == expected
    assert store.get_by_id(b1["id"]) == expected


def test_update_with_string_id(stores):
    project = stores["projects"].create(SAMPLE_FIELDS["projects"])
    updated = stores["projects"].update(str(project["id"]), {"technologies": ["React", "Flask"]})
    assert updated["id"] == project["id"]
    assert updated["technologies"] == ["React", "Flask"]


def test_update_empty_patch_is_noop(stores):
    service = stores["services"].create(SAMPLE_FIELDS["services"])
    assert stores["services"].update(service["id"], {}) == service


def test_update_missing_id_raises_not_found(stores):
    with pytest.raises(NotFoundError):
        stores["projects"].update(12345, {"title": "x"})
    with pytest.raises(NotFoundError):
        stores["projects"].update("abc", {"title": "x"})


def test_update_rejects_bad_fields(stores):
    project = stores["projects"].create(SAMPLE_FIELDS["projects"])
    with pytest.raises(ValidationError):
        stores["projects"].update(project["id"], {"title": None})
    with pytest.raises(ValidationError):
        stores["projects"].update(project["id"], {"id": 99})
    with pytest.raises(ValidationError):
        stores["projects"].update(project["id"], {"colour": "red"})
    assert stores["projects"].get_by_id(project["id"]) == project


def test_update_clearing_optional_fields(stores):
    blog = stores["blogs"].create(SAMPLE_FIELDS["blogs"])
    hero = stores["heroImages"].create(SAMPLE_FIELDS["heroImages"])

    assert "image" not in stores["blogs"].update(blog["id"], {"image": None})
    assert stores["heroImages"].update(hero["id"], {"image": None})["image"] == ""


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------

def test_delete_returns_confirmation_and_removes(stores):
    store = stores["projects"]
    project = store.create(SAMPLE_FIELDS["projects"])

    result = store.delete(project["id"])

    assert result == {"success": True, "deleted_id": project["id"]}
    assert store.get_by_id(project["id"]) is None


def test_delete_missing_raises_not_found(stores):
    with pytest.raises(NotFoundError):
        stores["services"].delete(42)


def test_delete_one_of_two_hero_images(stores):
    """With two hero images, deleting one leaves exactly the other."""
    store = stores["heroImages"]
    keep = store.create({"title": "Keep"})
    drop = store.create({"title": "Drop"})

    store.delete(drop["id"])

    assert store.list() == [keep]


# ---------------------------------------------------------------------------
# Transport failures
# ---------------------------------------------------------------------------

def test_unreachable_store_raises_transport_error(tmp_db_dir):
    """A store pointing at a directory (not a database file) fails as transport."""
    store = ResourceStore(tmp_db_dir, PROJECT)
    with pytest.raises(TransportError):
        store.list()


def test_missing_table_raises_transport_error(tmp_db_dir):
    store = ResourceStore(os.path.join(tmp_db_dir, "empty.db"), BLOG)
    with pytest.raises(TransportError):
        store.list()


# ---------------------------------------------------------------------------
# get_store
# ---------------------------------------------------------------------------

def test_get_store_creates_tables_once_per_database(tmp_db_dir):
    path = os.path.join(tmp_db_dir, "once.db")
    with patch("folio.core.store.Database.init_store_tables") as init_tables:
        get_store("projects", db_path=path)
        get_store("blogs", db_path=path)
    init_tables.assert_called_once_with(path)


def test_get_store_on_fresh_database_is_usable(tmp_db_dir):
    store = get_store("services", db_path=os.path.join(tmp_db_dir, "fresh.db"))
    assert store.list() == []
