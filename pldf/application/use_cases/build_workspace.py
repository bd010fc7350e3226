from pathlib import Path

from pldf.domain.ports.release_packager_port import ReleasePackagerPort


class BuildWorkspace:
    def __init__(self, packager: ReleasePackagerPort):
        self.packager = packager

    async def execute(self) -> Path:
        """Assemble build/.cursor and build/.pldf from the source tree."""
        return await self.packager.build_workspace()
