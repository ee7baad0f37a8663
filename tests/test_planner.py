"""Tests for planner module."""

import pytest

from git_repo_name.errors import InvalidSourceError, UnsupportedRemoteError
from git_repo_name.models import Direction, RemoteKind, RemoteReference, Source
from git_repo_name.planner import check_supported, parse_source, plan


def _reference(kind: RemoteKind) -> RemoteReference:
    return RemoteReference(repository_name="remote-name", kind=kind, raw_url="x")


class TestPlan:
    def test_equal_names_is_noop(self):
        action = plan("repo", "repo", Source.REMOTE)
        assert action.direction == Direction.NOOP

    def test_noop_regardless_of_source(self):
        assert plan("repo", "repo", Source.LOCAL).direction == Direction.NOOP

    def test_remote_source_renames_local(self):
        action = plan("new-repo", "old-repo", Source.REMOTE)
        assert action.direction == Direction.RENAME_LOCAL
        assert action.from_name == "old-repo"
        assert action.to_name == "new-repo"

    def test_local_source_renames_remote(self):
        action = plan("old-repo", "new-repo", Source.LOCAL)
        assert action.direction == Direction.RENAME_REMOTE
        assert action.from_name == "old-repo"
        assert action.to_name == "new-repo"

    def test_comparison_is_case_sensitive(self):
        action = plan("Repo", "repo", Source.REMOTE)
        assert action.direction == Direction.RENAME_LOCAL

    @pytest.mark.parametrize("source", [Source.REMOTE, Source.LOCAL])
    def test_dry_run_does_not_change_direction(self, source):
        wet = plan("a", "b", source, dry_run=False)
        dry = plan("a", "b", source, dry_run=True)
        assert dry.direction == wet.direction
        assert dry.dry_run is True
        assert wet.dry_run is False


class TestParseSource:
    def test_valid_values(self):
        assert parse_source("remote") == Source.REMOTE
        assert parse_source("local") == Source.LOCAL

    def test_invalid_value(self):
        with pytest.raises(InvalidSourceError) as excinfo:
            parse_source("invalid")
        assert str(excinfo.value) == (
            "invalid value for --source: 'invalid'. Valid values are 'remote' or 'local'"
        )
        assert excinfo.value.exit_code == 2


class TestCheckSupported:
    def test_remote_rename_on_github_allowed(self):
        action = plan("a", "b", Source.LOCAL)
        check_supported(action, _reference(RemoteKind.GITHUB))

    @pytest.mark.parametrize("kind", [RemoteKind.FILE, RemoteKind.OTHER])
    def test_remote_rename_elsewhere_rejected(self, kind):
        action = plan("a", "b", Source.LOCAL)
        with pytest.raises(UnsupportedRemoteError, match="not supported for this remote kind"):
            check_supported(action, _reference(kind))

    def test_local_rename_always_allowed(self):
        action = plan("a", "b", Source.REMOTE)
        check_supported(action, _reference(RemoteKind.FILE))
