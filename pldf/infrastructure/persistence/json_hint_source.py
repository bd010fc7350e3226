import json
from pathlib import Path
from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from pldf.domain.entities.hint import HintStore, ResourceStore
from pldf.domain.errors import StoreUnavailableError
from pldf.domain.ports.hint_source_port import HintSourcePort

M = TypeVar("M", bound=BaseModel)

HINTS_FILE = "hints.json"
RESOURCES_FILE = "resources.json"


class JsonHintSource(HintSourcePort):
    """Loads hints.json and resources.json from a hints directory."""

    def __init__(self, hints_dir: Path):
        self.hints_dir = hints_dir
        self.hints_path = hints_dir / HINTS_FILE
        self.resources_path = hints_dir / RESOURCES_FILE

    def load_hint_store(self) -> HintStore:
        if not self.hints_path.is_file():
            raise StoreUnavailableError(str(self.hints_path), "file not found")
        return self._load(self.hints_path, HintStore)

    def load_resource_store(self) -> ResourceStore:
        if not self.resources_path.is_file():
            logger.debug(f"No resources file at {self.resources_path}, using empty store")
            return ResourceStore.empty()
        return self._load(self.resources_path, ResourceStore)

    def _load(self, path: Path, model: type[M]) -> M:
        data = self._read_json(path)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise StoreUnavailableError(
                str(path), f"malformed structure ({e.error_count()} errors)"
            ) from e

    def _read_json(self, path: Path) -> dict[str, Any]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StoreUnavailableError(str(path), f"cannot read file: {e}") from e
        except UnicodeDecodeError as e:
            raise StoreUnavailableError(str(path), f"invalid UTF-8: {e.reason}") from e
        except json.JSONDecodeError as e:
            raise StoreUnavailableError(str(path), f"invalid JSON: {e.msg}") from e

        if not isinstance(data, dict):
            raise StoreUnavailableError(str(path), "top-level value must be an object")
        logger.debug(f"Loaded {path}")
        return data
