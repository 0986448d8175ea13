# File: tests/test_store.py
import sqlite3

import pytest

from favscout.errors import StorageError
from favscout.models import FaviconRecord
from favscout.store import ResultStore


def test_ensure_schema_is_idempotent(tmp_path):
    path = tmp_path / "favicons.db"
    with ResultStore.open(path) as s:
        s.ensure_schema()
        s.insert_if_absent("http://a.com/favicon.ico", "m", "s")
        s.ensure_schema()
        assert s.count() == 1
    with ResultStore.open(path) as s:
        s.ensure_schema()
        assert s.count() == 1


def test_schema_columns(store):
    conn = sqlite3.connect(str(store.path))
    try:
        cols = [row[1] for row in conn.execute("PRAGMA table_info(favicons)")]
    finally:
        conn.close()
    assert cols == ["id", "link", "md5", "sha256"]


def test_duplicate_link_keeps_first_record(store):
    assert store.insert_if_absent("http://a.com/favicon.ico", "md5-1", "sha-1") is True
    assert store.insert_if_absent("http://a.com/favicon.ico", "md5-2", "sha-2") is False
    assert store.count() == 1
    assert store.get("http://a.com/favicon.ico") == FaviconRecord(
        "http://a.com/favicon.ico", "md5-1", "sha-1"
    )


def test_records_in_insert_order(store):
    for link in ("http://b.com/favicon.ico", "http://a.com/favicon.ico", "http://b.com/favicon.ico"):
        store.insert_if_absent(link, "m", "s")
    assert [r.link for r in store.records()] == [
        "http://b.com/favicon.ico",
        "http://a.com/favicon.ico",
    ]


def test_get_missing_link(store):
    assert store.get("http://nowhere/favicon.ico") is None


def test_records_persist_across_runs(tmp_path):
    path = tmp_path / "favicons.db"
    with ResultStore.open(path) as s:
        s.ensure_schema()
        s.insert_if_absent("http://a.com/favicon.ico", "m", "s")
    with ResultStore.open(path) as s:
        assert s.get("http://a.com/favicon.ico") is not None


def test_open_in_missing_directory(tmp_path):
    with pytest.raises(StorageError):
        ResultStore.open(tmp_path / "missing" / "favicons.db")


def test_insert_on_closed_store_raises_storage_error(tmp_path):
    s = ResultStore.open(tmp_path / "favicons.db")
    s.ensure_schema()
    s.close()
    with pytest.raises(StorageError) as info:
        s.insert_if_absent("http://a.com/favicon.ico", "m", "s")
    assert info.value.link == "http://a.com/favicon.ico"
