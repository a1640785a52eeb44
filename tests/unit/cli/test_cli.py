"""Tests for the semtag CLI using fakes.

Layer 4 (Business Logic Tests): commands run against a DriverContext whose git
gateway is in-memory.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from semtag.cli import cli
from semtag.gateway.git.fake import create_fake_git
from semtag.gateway.git.tag_ops.types import TagPushRejected
from tests.fakes.context import build_test_context

HEAD_SHA = "1" * 40


def test_check_prints_current_version(tmp_path: Path) -> None:
    git = create_fake_git(remote_tags={"v1.0.0": HEAD_SHA, "v1.3.0": HEAD_SHA})
    ctx = build_test_context(git=git, work_dir=tmp_path)

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"version": "1.3.0", "found": True}


def test_check_reports_empty_repository(tmp_path: Path) -> None:
    ctx = build_test_context(git=create_fake_git(empty_repo=True), work_dir=tmp_path)

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"version": "0.0.0", "found": False}


def test_check_reports_bad_tag_as_error(tmp_path: Path) -> None:
    git = create_fake_git(local_tags={"vbroken": HEAD_SHA})
    ctx = build_test_context(git=git, work_dir=tmp_path)

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: " in result.stderr
    assert "vbroken" in result.stderr


def test_current_prints_tag_name(tmp_path: Path) -> None:
    git = create_fake_git(remote_tags={"rel-2.1.0": HEAD_SHA})
    ctx = build_test_context(git=git, work_dir=tmp_path, prefix="rel-")

    result = CliRunner().invoke(cli, ["current"], obj=ctx)

    assert result.exit_code == 0
    assert result.stdout.strip() == "rel-2.1.0"


def test_current_exits_nonzero_without_tags(tmp_path: Path) -> None:
    ctx = build_test_context(git=create_fake_git(empty_repo=True), work_dir=tmp_path)

    result = CliRunner().invoke(cli, ["current"], obj=ctx)

    assert result.exit_code == 1
    assert result.stdout == ""


def test_put_publishes_version(tmp_path: Path) -> None:
    git = create_fake_git(remote_refs={"main": HEAD_SHA})
    ctx = build_test_context(git=git, work_dir=tmp_path, branch="main")

    result = CliRunner().invoke(cli, ["put", "1.4.0"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"version": "1.4.0", "tag": "v1.4.0", "published": True}
    assert git.remote_tags == {"v1.4.0": HEAD_SHA}


def test_put_with_repo_uses_resource_commit(tmp_path: Path) -> None:
    resource = tmp_path / "source"
    resource_sha = "9" * 40
    git = create_fake_git(remote_refs={"HEAD": HEAD_SHA}, head_commits={resource: resource_sha})
    ctx = build_test_context(git=git, work_dir=tmp_path)

    result = CliRunner().invoke(cli, ["put", "0.2.0", "--repo", str(resource)], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.remote_tags == {"v0.2.0": resource_sha}


def test_put_reports_lost_race(tmp_path: Path) -> None:
    rejection = TagPushRejected(reason="[rejected]", output="")
    git = create_fake_git(remote_refs={"HEAD": HEAD_SHA}, push_rejection=rejection)
    ctx = build_test_context(git=git, work_dir=tmp_path)

    result = CliRunner().invoke(cli, ["put", "1.0.0"], obj=ctx)

    assert result.exit_code == 0
    assert json.loads(result.stdout)["published"] is False
    assert "Push rejected" in result.stderr


def test_put_rejects_invalid_version(tmp_path: Path) -> None:
    ctx = build_test_context(work_dir=tmp_path)

    result = CliRunner().invoke(cli, ["put", "1.0"], obj=ctx)

    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_missing_configuration_is_reported() -> None:
    result = CliRunner().invoke(cli, ["check"])

    assert result.exit_code == 1
    assert "Expected either repository (path) or URI" in result.stderr
