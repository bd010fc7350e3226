import asyncio
import shutil
from pathlib import Path

from loguru import logger

from pldf.domain.errors import PackagingError
from pldf.domain.ports.release_packager_port import ReleasePackagerPort
from pldf.domain.services.command_template import render_command
from pldf.domain.value_objects.release import Agent, ReleaseVersion, ScriptVariant
from pldf.infrastructure.persistence.atomic_io import atomic_write

RELEASES_DIR = ".genreleases"
BUILD_DIR = "build"
PLDF_DIR = ".pldf"


class FsReleasePackager(ReleasePackagerPort):
    """Builds release packages from a PLDF source tree on the local filesystem.

    Expected source layout (every part optional except templates/commands for
    the local build):

        memory/  hints/  scripts/{bash,powershell}/  templates/commands/*.md
    """

    def __init__(
        self,
        root: Path,
        output_dir: Path | None = None,
        build_dir: Path | None = None,
    ):
        self.root = root
        self.output_dir = output_dir or root / RELEASES_DIR
        self.build_dir = build_dir or root / BUILD_DIR
        self.commands_dir = root / "templates" / "commands"

    async def reset_output(self) -> None:
        await asyncio.to_thread(self._reset_output)

    async def build_variant(
        self,
        agent: Agent,
        variant: ScriptVariant,
        version: ReleaseVersion,
    ) -> Path:
        base_dir = self.output_dir / f"pldf-{agent.value}-package-{variant.value}"
        logger.info(f"Building {agent.value} ({variant.value}) package...")

        await asyncio.to_thread(self._copy_base, base_dir / PLDF_DIR, variant)
        await self._generate_commands(agent, variant, base_dir / agent.commands_dir)

        archive_base = self.output_dir / f"pldf-template-{agent.value}-{variant.value}-{version}"
        archive = await asyncio.to_thread(
            shutil.make_archive, str(archive_base), "zip", root_dir=str(base_dir)
        )
        logger.info(f"Created {archive}")
        return Path(archive)

    async def build_workspace(self) -> Path:
        if not self.commands_dir.is_dir():
            raise PackagingError(f"Commands directory not found: {self.commands_dir}")
        await asyncio.to_thread(self._build_workspace)
        return self.build_dir

    def _reset_output(self) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        for child in self.output_dir.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()

    def _copy_base(self, pldf_dir: Path, variant: ScriptVariant) -> None:
        pldf_dir.mkdir(parents=True, exist_ok=True)

        for name in ("memory", "hints"):
            src = self.root / name
            if src.is_dir():
                shutil.copytree(src, pldf_dir / name, dirs_exist_ok=True)
                logger.debug(f"Copied {name} -> {PLDF_DIR}")

        scripts = self.root / "scripts"
        if scripts.is_dir():
            (pldf_dir / "scripts").mkdir(exist_ok=True)
            variant_dir = scripts / variant.scripts_subdir
            if variant_dir.is_dir():
                shutil.copytree(
                    variant_dir, pldf_dir / "scripts" / variant.scripts_subdir, dirs_exist_ok=True
                )
            # Loose files are shared by both variants
            for f in scripts.iterdir():
                if f.is_file():
                    shutil.copy2(f, pldf_dir / "scripts" / f.name)

        templates = self.root / "templates"
        if templates.is_dir():
            (pldf_dir / "templates").mkdir(exist_ok=True)
            for f in templates.rglob("*"):
                if not f.is_file() or f.is_relative_to(self.commands_dir):
                    continue
                target = pldf_dir / f.relative_to(self.root)
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(f, target)

    async def _generate_commands(
        self, agent: Agent, variant: ScriptVariant, output_dir: Path
    ) -> None:
        output_dir.mkdir(parents=True, exist_ok=True)
        if not self.commands_dir.is_dir():
            return

        for template in sorted(self.commands_dir.glob("*.md")):
            if not template.is_file():
                continue
            content = template.read_text(encoding="utf-8")
            body = render_command(content, agent, variant)
            await atomic_write(output_dir / template.name, body)

    def _build_workspace(self) -> None:
        if self.build_dir.exists():
            logger.info("Removing previous build directory...")
            shutil.rmtree(self.build_dir)

        cursor_dir = self.build_dir / ".cursor"
        pldf_dir = self.build_dir / PLDF_DIR
        cursor_dir.mkdir(parents=True)
        pldf_dir.mkdir(parents=True)

        shutil.copytree(self.commands_dir, cursor_dir / "commands")

        templates = self.root / "templates"
        (pldf_dir / "templates").mkdir()
        for item in templates.iterdir():
            if item.name == "commands":
                continue
            if item.is_dir():
                shutil.copytree(item, pldf_dir / "templates" / item.name)
            else:
                shutil.copy2(item, pldf_dir / "templates" / item.name)

        for name in ("scripts", "hints"):
            src = self.root / name
            if src.is_dir():
                shutil.copytree(src, pldf_dir / name)

        progress = self.root / "memory" / "progress.json"
        if progress.is_file():
            (pldf_dir / "memory").mkdir()
            shutil.copy2(progress, pldf_dir / "memory" / "progress.json")

        logger.info(f"Build complete: {self.build_dir}")
