from abc import ABC, abstractmethod
from pathlib import Path

from pldf.domain.value_objects.release import Agent, ReleaseVersion, ScriptVariant


class ReleasePackagerPort(ABC):
    """Port for assembling release packages from a PLDF source tree."""

    @abstractmethod
    async def reset_output(self) -> None:
        """Remove artifacts left by a previous release run."""

    @abstractmethod
    async def build_variant(
        self,
        agent: Agent,
        variant: ScriptVariant,
        version: ReleaseVersion,
    ) -> Path:
        """Build one package and return the archive path."""

    @abstractmethod
    async def build_workspace(self) -> Path:
        """Assemble the local build/ layout and return its path."""
