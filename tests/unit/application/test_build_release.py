"""Tests for BuildRelease and BuildWorkspace use cases."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from pldf.application.use_cases import BuildRelease, BuildWorkspace
from pldf.domain.value_objects import Agent, ReleaseVersion, ScriptVariant


@pytest.fixture
def mock_packager() -> AsyncMock:
    packager = AsyncMock()
    packager.build_variant.side_effect = lambda agent, variant, version: Path(
        f"pldf-template-{agent.value}-{variant.value}-{version}.zip"
    )
    return packager


class TestBuildRelease:
    @pytest.mark.asyncio
    async def test_builds_every_pair(self, mock_packager: AsyncMock) -> None:
        version = ReleaseVersion.parse("v0.1.0")

        archives = await BuildRelease(mock_packager).execute(
            version, [Agent.CURSOR, Agent.ROO], [ScriptVariant.SH, ScriptVariant.PS]
        )

        mock_packager.reset_output.assert_awaited_once()
        assert [a.name for a in archives] == [
            "pldf-template-cursor-agent-sh-v0.1.0.zip",
            "pldf-template-cursor-agent-ps-v0.1.0.zip",
            "pldf-template-roo-sh-v0.1.0.zip",
            "pldf-template-roo-ps-v0.1.0.zip",
        ]


class TestBuildWorkspace:
    @pytest.mark.asyncio
    async def test_delegates_to_packager(self, mock_packager: AsyncMock) -> None:
        mock_packager.build_workspace.return_value = Path("build")

        result = await BuildWorkspace(mock_packager).execute()

        assert result == Path("build")
