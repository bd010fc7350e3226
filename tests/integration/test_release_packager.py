"""Integration tests for FsReleasePackager against a real source tree."""

import zipfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pldf.application.use_cases import BuildRelease, BuildWorkspace
from pldf.cli.main import app
from pldf.domain.errors import PackagingError
from pldf.domain.value_objects import Agent, ReleaseVersion, ScriptVariant
from pldf.infrastructure.packaging import FsReleasePackager

COMMAND = """---
description: Get a hint
scripts:
  sh: scripts/bash/get-hint.sh -Json
  ps: scripts/powershell/get-hint.ps1 -Json
---
Run {SCRIPT} {ARGS} for __AGENT__.
"""


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    root = tmp_path / "pldf"
    files = {
        "templates/commands/pldf.hint.md": COMMAND,
        "templates/design-template.md": "# Design\n",
        "templates/patterns/bloc.md": "# BLoC\n",
        "scripts/bash/get-hint.sh": "#!/bin/bash\n",
        "scripts/powershell/get-hint.ps1": "param()\n",
        "scripts/README.md": "shared\n",
        "hints/hints.json": '{"stages": {}}',
        "memory/progress.json": "{}",
        "memory/notes.md": "notes\n",
    }
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def archive_names(path: Path) -> set[str]:
    with zipfile.ZipFile(path) as zf:
        return {name.rstrip("/") for name in zf.namelist()}


class TestBuildVariant:
    @pytest.mark.asyncio
    async def test_builds_archive_with_expected_layout(self, source_tree: Path) -> None:
        packager = FsReleasePackager(source_tree)
        version = ReleaseVersion.parse("v1.0.0")

        archives = await BuildRelease(packager).execute(
            version, [Agent.CURSOR], [ScriptVariant.SH]
        )

        assert archives == [source_tree / ".genreleases" / "pldf-template-cursor-agent-sh-v1.0.0.zip"]
        names = archive_names(archives[0])
        assert ".cursor/commands/pldf.hint.md" in names
        assert ".pldf/hints/hints.json" in names
        assert ".pldf/memory/notes.md" in names
        assert ".pldf/scripts/bash/get-hint.sh" in names
        assert ".pldf/scripts/README.md" in names
        assert ".pldf/templates/design-template.md" in names
        assert ".pldf/templates/patterns/bloc.md" in names
        assert ".pldf/scripts/powershell/get-hint.ps1" not in names
        assert not any(n.startswith(".pldf/templates/commands") for n in names)

    @pytest.mark.asyncio
    async def test_renders_commands_for_agent(self, source_tree: Path) -> None:
        packager = FsReleasePackager(source_tree)

        await BuildRelease(packager).execute(
            ReleaseVersion.parse("v1.0.0"), [Agent.KILOCODE], [ScriptVariant.PS]
        )

        rendered = (
            source_tree
            / ".genreleases"
            / "pldf-kilocode-package-ps"
            / ".kilocode"
            / "rules"
            / "pldf.hint.md"
        ).read_text(encoding="utf-8")
        assert "Run .pldf/scripts/powershell/get-hint.ps1 -Json $ARGUMENTS for kilocode." in rendered
        assert "scripts:" not in rendered

    @pytest.mark.asyncio
    async def test_clears_previous_output(self, source_tree: Path) -> None:
        stale = source_tree / ".genreleases" / "old.zip"
        stale.parent.mkdir(parents=True)
        stale.write_text("stale")

        await BuildRelease(FsReleasePackager(source_tree)).execute(
            ReleaseVersion.parse("v1.0.0"), [Agent.ROO], [ScriptVariant.SH]
        )

        assert not stale.exists()


class TestBuildWorkspace:
    @pytest.mark.asyncio
    async def test_builds_local_layout(self, source_tree: Path) -> None:
        build_dir = await BuildWorkspace(FsReleasePackager(source_tree)).execute()

        assert (build_dir / ".cursor" / "commands" / "pldf.hint.md").read_text() == COMMAND
        assert (build_dir / ".pldf" / "templates" / "patterns" / "bloc.md").exists()
        assert not (build_dir / ".pldf" / "templates" / "commands").exists()
        assert (build_dir / ".pldf" / "scripts" / "powershell" / "get-hint.ps1").exists()
        assert (build_dir / ".pldf" / "hints" / "hints.json").exists()
        assert (build_dir / ".pldf" / "memory" / "progress.json").exists()
        assert not (build_dir / ".pldf" / "memory" / "notes.md").exists()

    @pytest.mark.asyncio
    async def test_replaces_previous_build(self, source_tree: Path) -> None:
        stale = source_tree / "build" / "stale.txt"
        stale.parent.mkdir()
        stale.write_text("old")

        await BuildWorkspace(FsReleasePackager(source_tree)).execute()

        assert not stale.exists()

    @pytest.mark.asyncio
    async def test_requires_commands_dir(self, tmp_path: Path) -> None:
        with pytest.raises(PackagingError, match="Commands directory not found"):
            await BuildWorkspace(FsReleasePackager(tmp_path)).execute()


class TestReleaseCommand:
    def test_rejects_bad_version(self, source_tree: Path) -> None:
        result = CliRunner().invoke(app, ["release", "1.0", "--root", str(source_tree)])

        assert result.exit_code == 1
        assert "v0.0.0" in result.output

    def test_rejects_unknown_agent(self, source_tree: Path) -> None:
        result = CliRunner().invoke(
            app, ["release", "v1.0.0", "--agents", "copilot", "--root", str(source_tree)]
        )

        assert result.exit_code == 1
        assert "copilot" in result.output

    def test_builds_selected_archives(self, source_tree: Path) -> None:
        result = CliRunner().invoke(
            app,
            ["release", "v2.0.0", "--root", str(source_tree)],
            env={"AGENTS": "opencode", "SCRIPTS": "sh,ps"},
        )

        assert result.exit_code == 0
        releases = source_tree / ".genreleases"
        assert (releases / "pldf-template-opencode-sh-v2.0.0.zip").exists()
        assert (releases / "pldf-template-opencode-ps-v2.0.0.zip").exists()
        assert not (releases / "pldf-template-roo-sh-v2.0.0.zip").exists()


class TestBuildCommand:
    def test_missing_commands_exits_1(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(app, ["build", "--root", str(tmp_path)])
        assert result.exit_code == 1

    def test_builds(self, source_tree: Path) -> None:
        result = CliRunner().invoke(app, ["build", "--root", str(source_tree)])

        assert result.exit_code == 0
        assert (source_tree / "build" / ".cursor" / "commands").is_dir()
