"""
Tests for NamespaceStore CRUD and path semantics
"""
from unittest.mock import patch

import pytest

from domain_models import FileFormat
from errors import ConflictError, NotFoundError, PathValidationError


class TestCreateDirectory:
    """Test create_directory"""

    def test_creates_missing_ancestors(self, store, upload_dir):
        entry = store.create_directory("a/b/c")

        assert entry.is_dir
        assert entry.path == "a/b/c"
        assert (upload_dir / "a" / "b" / "c").is_dir()

    def test_existing_directory_is_noop(self, store):
        store.create_directory("a")
        assert store.create_directory("a").is_dir

    def test_conflict_with_file_at_path(self, store):
        store.create_or_update_file("a", "content")
        with pytest.raises(ConflictError):
            store.create_directory("a")

    def test_conflict_with_file_at_ancestor(self, store):
        store.create_or_update_file("a", "content")
        with pytest.raises(ConflictError):
            store.create_directory("a/b")

    def test_root_rejected(self, store):
        with pytest.raises(PathValidationError):
            store.create_directory("/")


class TestCreateOrUpdateFile:
    """Test create_or_update_file"""

    def test_create_new_file_has_no_versions(self, store, upload_dir):
        entry = store.create_or_update_file("docs/readme.md", "hello")

        assert entry.size == 5
        assert entry.format == FileFormat.PLAIN_TEXT
        assert entry.version_count == 0
        assert (upload_dir / "docs" / "readme.md").read_text() == "hello"

    def test_update_snapshots_previous_content(self, store, ledger):
        store.create_or_update_file("a.txt", "v1")
        entry = store.create_or_update_file("a.txt", "v2")

        assert entry.version_count == 1
        assert store.read_file("a.txt") == b"v2"
        assert ledger.read_version("a.txt", 1) == b"v1"
        assert ledger.get_versions("a.txt")[0].comment == "Auto-saved before update"

    def test_bytes_content(self, store):
        store.create_or_update_file("data.pdf", b"%PDF-1.4 binary")
        assert store.read_file("data.pdf") == b"%PDF-1.4 binary"

    def test_conflict_with_directory_at_path(self, store):
        store.create_directory("a")
        with pytest.raises(ConflictError):
            store.create_or_update_file("a", "content")

    def test_conflict_with_file_at_ancestor(self, store):
        store.create_or_update_file("a", "content")
        with pytest.raises(ConflictError):
            store.create_or_update_file("a/b.txt", "content")

    def test_traversal_rejected(self, store):
        with pytest.raises(PathValidationError):
            store.create_or_update_file("../escape.txt", "x")

    def test_temp_suffix_name_rejected(self, store):
        with pytest.raises(PathValidationError):
            store.create_or_update_file("draft.tmp-write", "hello")
        assert store.list("") == []

    def test_no_temp_file_left_behind(self, store, upload_dir):
        store.create_or_update_file("a.txt", "v1")
        store.create_or_update_file("a.txt", "v2")
        assert sorted(p.name for p in upload_dir.iterdir()) == [".versions", "a.txt"]


class TestDelete:
    """Test delete"""

    def test_delete_file_removes_history(self, store, ledger):
        store.create_or_update_file("a.txt", "v1")
        store.create_or_update_file("a.txt", "v2")

        store.delete("a.txt")

        assert not store.exists("a.txt")
        assert ledger.get_versions("a.txt") == []

    def test_delete_directory_recursive(self, store, ledger):
        store.create_or_update_file("dir/sub/b.txt", "v1")
        store.create_or_update_file("dir/sub/b.txt", "v2")

        store.delete("dir")

        assert not store.exists("dir")
        assert ledger.get_versions("dir/sub/b.txt") == []

    def test_failed_removal_keeps_history(self, store, ledger):
        store.create_or_update_file("dir/b.txt", "v1")
        store.create_or_update_file("dir/b.txt", "v2")

        with patch("namespace.store.shutil.rmtree", side_effect=OSError("device busy")):
            with pytest.raises(OSError):
                store.delete("dir")

        assert store.exists("dir/b.txt")
        assert [v.version for v in ledger.get_versions("dir/b.txt")] == [1]

    def test_recreated_file_starts_fresh_history(self, store):
        store.create_or_update_file("a.txt", "v1")
        store.create_or_update_file("a.txt", "v2")
        store.delete("a.txt")

        entry = store.create_or_update_file("a.txt", "new")

        assert entry.version_count == 0

    def test_delete_missing_path(self, store):
        with pytest.raises(NotFoundError):
            store.delete("missing.txt")


class TestList:
    """Test list"""

    def test_directories_first_then_name(self, store):
        store.create_or_update_file("b.txt", "b")
        store.create_or_update_file("a.txt", "a")
        store.create_directory("zdir")
        store.create_directory("adir")

        names = [e.name for e in store.list("")]

        assert names == ["adir", "zdir", "a.txt", "b.txt"]

    def test_versions_area_hidden(self, store):
        store.create_or_update_file("a.txt", "v1")
        store.create_or_update_file("a.txt", "v2")

        assert [e.name for e in store.list()] == ["a.txt"]

    def test_file_entry_fields(self, store):
        store.create_or_update_file("docs/report.xlsx", b"x")
        store.create_or_update_file("docs/report.xlsx", b"xy")

        [entry] = store.list("docs")

        assert entry.path == "docs/report.xlsx"
        assert entry.format == FileFormat.XLSX
        assert entry.size == 2
        assert entry.version_count == 1
        assert entry.modified_at is not None

    def test_unrecognised_format_is_none(self, store):
        store.create_or_update_file("image.png", b"\x89PNG")
        assert store.list()[0].format is None

    def test_list_missing_directory(self, store):
        with pytest.raises(NotFoundError):
            store.list("missing")

    def test_list_file_is_not_found(self, store):
        store.create_or_update_file("a.txt", "x")
        with pytest.raises(NotFoundError):
            store.list("a.txt")


class TestWalkFiles:
    """Test walk_files"""

    def test_depth_first_name_order(self, store):
        store.create_or_update_file("b.txt", "b")
        store.create_or_update_file("a/z.txt", "z")
        store.create_or_update_file("a/c/d.txt", "d")

        assert [e.path for e in store.walk_files()] == ["a/c/d.txt", "a/z.txt", "b.txt"]

    def test_empty_namespace(self, store):
        assert store.walk_files() == []

    def test_stat_file_on_directory(self, store):
        store.create_directory("a")
        with pytest.raises(NotFoundError):
            store.stat_file("a")
