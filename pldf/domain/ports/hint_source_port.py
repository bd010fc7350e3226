from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pldf.domain.entities.hint import HintStore, ResourceStore


class HintSourcePort(ABC):
    """Port for loading the hint and resource stores."""

    @abstractmethod
    def load_hint_store(self) -> "HintStore":
        """Load the hint store. Raises StoreUnavailableError if it cannot be read."""

    @abstractmethod
    def load_resource_store(self) -> "ResourceStore":
        """Load the resource store, or an empty one if no source exists."""
