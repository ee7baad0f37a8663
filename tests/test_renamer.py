"""Tests for renamer module."""

import os

import pytest

from git_repo_name.errors import DirectoryRenameError, TargetExistsError
from git_repo_name.renamer import is_inside, rename_directory


class TestRenameDirectory:
    def test_renames_from_outside(self, workspace):
        (workspace / "old").mkdir()
        (workspace / "old" / "file.txt").write_text("x")

        result = rename_directory(workspace / "old", workspace / "new", currently_inside=False)

        assert result is None
        assert not (workspace / "old").exists()
        assert (workspace / "new" / "file.txt").read_text() == "x"

    def test_renames_current_directory(self, workspace, monkeypatch):
        (workspace / "old").mkdir()
        monkeypatch.chdir(workspace / "old")

        result = rename_directory(workspace / "old", workspace / "new", currently_inside=True)

        assert result == workspace / "new"
        assert os.getcwd() == str(workspace / "new")
        assert not (workspace / "old").exists()

    def test_keeps_nested_location(self, workspace, monkeypatch):
        nested = workspace / "old" / "nested" / "deeper"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        result = rename_directory(workspace / "old", workspace / "new", currently_inside=True)

        assert result == workspace / "new" / "nested" / "deeper"
        assert os.getcwd() == str(result)

    def test_target_exists(self, workspace):
        (workspace / "old").mkdir()
        (workspace / "new").mkdir()
        with pytest.raises(TargetExistsError, match="already exists"):
            rename_directory(workspace / "old", workspace / "new", currently_inside=False)
        assert (workspace / "old").exists()

    def test_target_exists_leaves_cwd_alone(self, workspace, monkeypatch):
        (workspace / "old").mkdir()
        (workspace / "new").mkdir()
        monkeypatch.chdir(workspace / "old")
        with pytest.raises(TargetExistsError):
            rename_directory(workspace / "old", workspace / "new", currently_inside=True)
        assert os.getcwd() == str(workspace / "old")

    def test_missing_source(self, workspace):
        with pytest.raises(DirectoryRenameError, match="does not exist"):
            rename_directory(workspace / "missing", workspace / "new", currently_inside=False)


class TestIsInside:
    def test_same_path(self, workspace):
        assert is_inside(workspace, workspace)

    def test_descendant(self, workspace):
        assert is_inside(workspace / "a" / "b", workspace)

    def test_sibling_with_common_prefix(self, workspace):
        assert not is_inside(workspace / "repo-other", workspace / "repo")
