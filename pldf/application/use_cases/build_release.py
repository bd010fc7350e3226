from pathlib import Path

from loguru import logger

from pldf.domain.ports.release_packager_port import ReleasePackagerPort
from pldf.domain.value_objects.release import Agent, ReleaseVersion, ScriptVariant


class BuildRelease:
    def __init__(self, packager: ReleasePackagerPort):
        self.packager = packager

    async def execute(
        self,
        version: ReleaseVersion,
        agents: list[Agent],
        scripts: list[ScriptVariant],
    ) -> list[Path]:
        """Build one archive per (agent, script variant) pair."""
        logger.info(
            f"Building release packages for {version}: "
            f"agents={[a.value for a in agents]} scripts={[s.value for s in scripts]}"
        )
        await self.packager.reset_output()

        archives: list[Path] = []
        for agent in agents:
            for variant in scripts:
                archive = await self.packager.build_variant(agent, variant, version)
                archives.append(archive)
        return archives
