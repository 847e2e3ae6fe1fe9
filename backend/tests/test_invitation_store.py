"""Tests for InvitationStore — slug-keyed CRUD and search."""
import time

import pytest

from invite_app.exceptions import DuplicateSlugError
from invite_app.stores.invitation_store import InvitationStore


def _fields(name="Anna", slug="ab12c", **extra):
    return {"name": name, "pronoun": "she", "message": "See you there", "slug": slug, **extra}


class TestInvitationCreate:

    def test_create_and_get_by_slug(self, db):
        store = InvitationStore(db)
        created = store.create(_fields(invite_to_party=False))

        fetched = store.get_by_slug("ab12c")
        assert fetched is not None
        assert fetched.id == created.id
        assert fetched.name == "Anna"
        assert fetched.pronoun == "she"
        assert fetched.message == "See you there"
        assert fetched.invite_to_party is False
        assert fetched.created_at is not None
        assert fetched.created_at == fetched.updated_at

    def test_invite_to_party_defaults_true(self, db):
        store = InvitationStore(db)
        created = store.create({"name": "Bob", "pronoun": "he", "message": "hi", "slug": "bob01"})
        assert created.invite_to_party is True

    def test_get_by_id(self, db):
        store = InvitationStore(db)
        created = store.create(_fields())
        assert store.get_by_id(created.id).slug == "ab12c"
        assert store.get_by_id(created.id + 100) is None

    def test_get_by_slug_missing(self, db):
        assert InvitationStore(db).get_by_slug("nope0") is None

    def test_duplicate_slug_rejected_first_untouched(self, db):
        store = InvitationStore(db)
        first = store.create(_fields(name="First"))

        with pytest.raises(DuplicateSlugError) as exc_info:
            store.create(_fields(name="Second"))
        assert exc_info.value.slug == "ab12c"

        assert len(store.get_all()) == 1
        kept = store.get_by_slug("ab12c")
        assert kept.id == first.id
        assert kept.name == "First"

    def test_session_usable_after_duplicate(self, db):
        store = InvitationStore(db)
        store.create(_fields())
        with pytest.raises(DuplicateSlugError):
            store.create(_fields())
        other = store.create(_fields(name="Other", slug="zz999"))
        assert other.id is not None


class TestInvitationQueries:

    def test_get_all_newest_first(self, db):
        store = InvitationStore(db)
        for i, name in enumerate(["Oldest", "Middle", "Newest"]):
            store.create(_fields(name=name, slug=f"s{i}aaa"))
        assert [inv.name for inv in store.get_all()] == ["Newest", "Middle", "Oldest"]

    def test_search_matches_name_or_slug(self, db):
        store = InvitationStore(db)
        store.create(_fields(name="Anna", slug="ab12c"))
        store.create(_fields(name="Bob", slug="ann99"))
        store.create(_fields(name="Ann", slug="xyz12"))
        store.create(_fields(name="Carol", slug="zz999"))

        results = store.search("ann")
        assert {inv.slug for inv in results} == {"ab12c", "ann99", "xyz12"}
        # newest first
        assert [inv.slug for inv in results] == ["xyz12", "ann99", "ab12c"]

    def test_search_non_ascii_name(self, db):
        store = InvitationStore(db)
        store.create(_fields(name="小美", slug="mei01"))
        store.create(_fields(name="大明", slug="ming1"))
        assert [inv.slug for inv in store.search("美")] == ["mei01"]

    def test_search_treats_wildcards_literally(self, db):
        store = InvitationStore(db)
        store.create(_fields(name="100% Ann", slug="pct01"))
        store.create(_fields(name="Plain", slug="plain"))
        assert [inv.slug for inv in store.search("%")] == ["pct01"]
        assert store.search("_") == []

    def test_search_no_match(self, db):
        store = InvitationStore(db)
        store.create(_fields())
        assert store.search("qqq") == []


class TestInvitationUpdate:

    def test_update_overwrites_fields(self, db):
        store = InvitationStore(db)
        created = store.create(_fields())
        created_at = created.created_at
        time.sleep(0.01)

        ok = store.update(created.id, {
            "name": "Anna B.", "pronoun": "they", "message": "New message",
            "slug": "anna2", "invite_to_party": False,
        })
        assert ok is True

        assert store.get_by_slug("ab12c") is None
        updated = store.get_by_slug("anna2")
        assert updated.id == created.id
        assert updated.name == "Anna B."
        assert updated.pronoun == "they"
        assert updated.invite_to_party is False
        assert updated.created_at == created_at
        assert updated.updated_at > created_at

    def test_update_missing_returns_false(self, db):
        store = InvitationStore(db)
        assert store.update(999, _fields()) is False

    def test_update_to_taken_slug(self, db):
        store = InvitationStore(db)
        store.create(_fields(name="Anna", slug="ab12c"))
        bob = store.create(_fields(name="Bob", slug="bob01"))

        with pytest.raises(DuplicateSlugError):
            store.update(bob.id, _fields(name="Bob", slug="ab12c"))
        assert store.get_by_id(bob.id).slug == "bob01"

    def test_update_keeping_own_slug(self, db):
        store = InvitationStore(db)
        created = store.create(_fields())
        assert store.update(created.id, _fields(message="changed")) is True
        assert store.get_by_slug("ab12c").message == "changed"


class TestInvitationDelete:

    def test_delete(self, db):
        store = InvitationStore(db)
        created = store.create(_fields())
        invitation_id = created.id
        assert store.delete(invitation_id) is True
        assert store.get_by_id(invitation_id) is None
        assert store.get_all() == []

    def test_delete_missing_returns_false(self, db):
        assert InvitationStore(db).delete(12345) is False
