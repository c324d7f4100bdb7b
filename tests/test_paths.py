"""Tests for locate_file, create_path and get_ext."""

import os
from pathlib import Path

import pytest

from editorfile.core.paths import locate_file, create_path, get_ext

UNIQUE_NAME = "editorfile-test-needle-7f3c1a.cfg"


@pytest.fixture
def project(tmp_path):
    """tmp/site/css/app/editor.css with the needle at two levels."""
    editor_dir = tmp_path / "site" / "css" / "app"
    editor_dir.mkdir(parents=True)
    editor_file = editor_dir / "editor.css"
    editor_file.write_text("a {}")
    (tmp_path / "site" / UNIQUE_NAME).write_text("near")
    (tmp_path / UNIQUE_NAME).write_text("far")
    return tmp_path, editor_file


class TestLocateFile:
    """Test ancestor search."""

    def test_nearest_ancestor_wins(self, project):
        root, editor_file = project
        assert locate_file(editor_file, UNIQUE_NAME) == str(root / "site" / UNIQUE_NAME)

    def test_editor_directory_is_first_candidate(self, project):
        root, editor_file = project
        (editor_file.parent / UNIQUE_NAME).write_text("closest")
        assert locate_file(str(editor_file), UNIQUE_NAME) == str(editor_file.parent / UNIQUE_NAME)

    def test_start_value_is_never_tested(self, project):
        """Test a directory start point only searches its parents."""
        root, editor_file = project
        start = editor_file.parent
        (start / UNIQUE_NAME).write_text("inside start")
        assert locate_file(str(start), UNIQUE_NAME) == str(root / "site" / UNIQUE_NAME)

    def test_trailing_slash_start_is_never_tested(self, project):
        """Test "dir/" steps to the parent of dir, like "dir" does."""
        root, editor_file = project
        start = editor_file.parent
        (start / UNIQUE_NAME).write_text("inside start")
        assert locate_file(str(start) + "/", UNIQUE_NAME) == str(root / "site" / UNIQUE_NAME)
        assert locate_file(str(start) + "//", UNIQUE_NAME) == str(root / "site" / UNIQUE_NAME)

    def test_leading_slashes_stripped(self, project):
        root, editor_file = project
        (root / "site" / "img").mkdir()
        (root / "site" / "img" / "logo.png").write_bytes(b"\x89PNG")
        assert locate_file(editor_file, "//img/logo.png") == str(root / "site" / "img" / "logo.png")

    def test_dotdot_candidate_is_normalized(self, project):
        root, editor_file = project
        found = locate_file(editor_file, f"../{UNIQUE_NAME}")
        assert found == str(root / "site" / UNIQUE_NAME)

    def test_not_found(self, project):
        _, editor_file = project
        assert locate_file(editor_file, "no-such-file-b81e2d.txt") == ""

    def test_empty_editor_file(self):
        assert locate_file("", UNIQUE_NAME) == ""

    @pytest.mark.parametrize("url", ["http://cdn.example.com/a.css", "HTTPS://cdn.example.com/a.css"])
    def test_url_returned_without_filesystem_access(self, url, monkeypatch):
        def boom(*args, **kwargs):
            raise AssertionError("filesystem touched")

        monkeypatch.setattr(os.path, "exists", boom)
        assert locate_file("/var/www/index.html", url) == url


class TestCreatePath:
    """Test parent-relative resolution."""

    def test_file_parent_uses_its_directory(self, tmp_path):
        parent = tmp_path / "index.html"
        parent.write_text("<html>")
        assert create_path(parent, "x.txt") == str(tmp_path / "x.txt")

    def test_directory_parent_used_as_is(self, tmp_path):
        sub = tmp_path / "sub"
        sub.mkdir()
        assert create_path(str(sub), "x.txt") == str(sub / "x.txt")

    def test_segments_collapsed(self, tmp_path):
        sub = tmp_path / "a" / "b"
        sub.mkdir(parents=True)
        assert create_path(sub, "./../c/../d.txt") == str(tmp_path / "a" / "d.txt")

    def test_absolute_name_wins(self, tmp_path):
        assert create_path(tmp_path, "/etc/hosts") == os.path.abspath("/etc/hosts")

    def test_callback_receives_path(self, tmp_path):
        seen = []
        result = create_path(tmp_path, "x.txt", lambda p: seen.append(p) or "done")
        assert seen == [str(tmp_path / "x.txt")]
        assert result == "done"

    def test_missing_parent_raises_before_callback(self, tmp_path):
        seen = []
        with pytest.raises(FileNotFoundError):
            create_path(tmp_path / "missing", "x.txt", seen.append)
        assert seen == []


class TestGetExt:
    """Test extension extraction."""

    @pytest.mark.parametrize("path, expected", [
        ("a/b.C.TXT", "txt"),
        ("noext", ""),
        (None, ""),
        ("", ""),
        ("archive.tar.gz", "gz"),
        ("style.min-v2", "min-v2"),
        ("trailing.", ""),
        ("dir.d/file", ""),
        (Path("/tmp/Photo.JPEG"), "jpeg"),
    ])
    def test_get_ext(self, path, expected):
        assert get_ext(path) == expected
