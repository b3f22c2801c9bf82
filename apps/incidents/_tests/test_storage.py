"""Tests for incident storage backends and the store registry."""

from unittest.mock import patch

import pytest
from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase, override_settings

from apps.incidents.exceptions import StorageError
from apps.incidents.models import StoredValue
from apps.incidents.storage import (
    DatabaseStore,
    InMemoryStore,
    get_store,
    list_stores,
    reset_stores,
)


class TestInMemoryStore(SimpleTestCase):
    def test_missing_key_returns_none(self):
        assert InMemoryStore().get("incidents") is None

    def test_put_then_get(self):
        store = InMemoryStore()
        store.put("incidents", [{"id": "INC-1"}])

        assert store.get("incidents") == [{"id": "INC-1"}]

    def test_values_are_copied(self):
        store = InMemoryStore()
        value = [{"id": "INC-1"}]
        store.put("incidents", value)

        value.append({"id": "INC-2"})
        fetched = store.get("incidents")
        fetched[0]["id"] = "changed"

        assert store.get("incidents") == [{"id": "INC-1"}]

    def test_initial_data_and_clear(self):
        store = InMemoryStore(initial={"incidents": []})
        assert store.get("incidents") == []

        store.clear()
        assert store.get("incidents") is None

    def test_atomic_is_reentrant(self):
        store = InMemoryStore()
        with store.atomic():
            with store.atomic():
                store.put("k", 1)
        assert store.get("k") == 1


class TestDatabaseStore(TestCase):
    def test_missing_key_returns_none(self):
        assert DatabaseStore().get("incidents") is None

    def test_put_creates_then_replaces_row(self):
        store = DatabaseStore()
        store.put("incidents", [{"id": "INC-1"}])
        store.put("incidents", [{"id": "INC-1"}, {"id": "INC-2"}])

        assert StoredValue.objects.count() == 1
        row = StoredValue.objects.get(key="incidents")
        assert row.item_count == 2
        assert store.get("incidents") == [{"id": "INC-1"}, {"id": "INC-2"}]

    def test_get_inside_atomic(self):
        store = DatabaseStore()
        store.put("incidents", [])
        with store.atomic():
            assert store.get("incidents") == []

    def test_read_failure_becomes_storage_error(self):
        store = DatabaseStore()
        with patch("django.db.models.query.QuerySet.first", side_effect=DatabaseError("boom")):
            with pytest.raises(StorageError):
                store.get("incidents")

    def test_write_failure_becomes_storage_error(self):
        store = DatabaseStore()
        with patch(
            "django.db.models.query.QuerySet.update_or_create",
            side_effect=DatabaseError("boom"),
        ):
            with pytest.raises(StorageError):
                store.put("incidents", [])


class TestStoreRegistry(SimpleTestCase):
    def setUp(self):
        reset_stores()

    def tearDown(self):
        reset_stores()

    def test_list_stores(self):
        assert list_stores() == ["database", "memory"]

    def test_get_store_by_name(self):
        assert isinstance(get_store("memory"), InMemoryStore)
        assert isinstance(get_store("database"), DatabaseStore)

    def test_get_store_returns_shared_instance(self):
        assert get_store("memory") is get_store("memory")

    @override_settings(INCIDENTS_STORE="memory")
    def test_get_store_uses_setting(self):
        assert isinstance(get_store(), InMemoryStore)

    def test_unknown_store(self):
        with pytest.raises(KeyError, match="Unknown store"):
            get_store("redis")
