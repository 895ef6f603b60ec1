"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from vmasync import cli
from vmasync.cli import _build_parser
from vmasync.extract import ExtractionError
from vmasync.models import SyncOutcome, VersionInfo


def test_cli_defaults_revision_to_master() -> None:
    args = _build_parser().parse_args([])
    assert args.revision == "master"
    assert args.verbose is False
    assert args.generate is True
    assert args.root == "."


def test_cli_accepts_revision_and_flags() -> None:
    args = _build_parser().parse_args(["v3.1.0", "--verbose", "--no-generate", "--root", "sub"])
    assert args.revision == "v3.1.0"
    assert args.verbose is True
    assert args.generate is False
    assert args.root == "sub"


class StubOrchestrator:
    """Stands in for the pipeline; returns or raises a preset result."""

    result: object = None
    calls: list[tuple[str, bool]] = []

    def __init__(self, root: Path) -> None:
        self.root = root

    def run_update(self, revision: str, *, generate: bool = True) -> SyncOutcome:
        StubOrchestrator.calls.append((revision, generate))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result  # type: ignore[return-value]


def _outcome(exit_code: int | None) -> SyncOutcome:
    return SyncOutcome(
        revision="master",
        commit="abc123",
        version=VersionInfo("3.2.0", (1, 3)),
        header_path=Path("include/vk_mem_alloc.h"),
        readme_path=Path("README.md"),
        exit_code=exit_code,
    )


@pytest.fixture
def stub_orchestrator(monkeypatch):
    StubOrchestrator.calls = []
    monkeypatch.setattr(cli, "Orchestrator", StubOrchestrator)
    return StubOrchestrator


def test_main_returns_generator_exit_code(stub_orchestrator) -> None:
    stub_orchestrator.result = _outcome(2)
    assert cli.main(["abc"]) == 2
    assert stub_orchestrator.calls == [("abc", True)]


def test_main_returns_zero_when_generation_skipped(stub_orchestrator) -> None:
    stub_orchestrator.result = _outcome(None)
    assert cli.main(["--no-generate"]) == 0
    assert stub_orchestrator.calls == [("master", False)]


def test_main_exits_non_zero_on_pipeline_error(stub_orchestrator, capsys) -> None:
    stub_orchestrator.result = ExtractionError("Cannot extract commit hash")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 1
    assert "Cannot extract commit hash" in capsys.readouterr().err


def test_main_reports_missing_root_without_touching_parent(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--root", str(tmp_path / "typo"), "--no-generate"])

    assert excinfo.value.code == 1
    assert "is not a directory" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_accepts_dash_revision_after_separator() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--", "-odd-branch"])
    assert args.revision == "-odd-branch"
    assert "'--'" in parser.format_help()
