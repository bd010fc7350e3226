from pydantic import BaseModel, ConfigDict, Field, field_validator

from pldf.domain.value_objects.hint_type import HintType
from pldf.domain.value_objects.stage import Stage

GENERAL_FALLBACK_KEY = "stuck"


class HintEntry(BaseModel):
    """Advisory record attached to a stage error key (or the general bucket)."""

    model_config = ConfigDict(frozen=True)

    message: str | None = None
    hint: str
    resources: list[str] = Field(default_factory=list)

    @field_validator("resources", mode="before")
    @classmethod
    def null_resources_as_empty(cls, v: object) -> object:
        return [] if v is None else v


class StageHints(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    validation_hints: dict[str, HintEntry] = Field(
        default_factory=dict, alias="validationHints"
    )

    @field_validator("validation_hints", mode="before")
    @classmethod
    def null_hints_as_empty(cls, v: object) -> object:
        return {} if v is None else v


class HintStore(BaseModel):
    """Per-stage validation hints plus the general fallback bucket.

    Dict order is the declaration order of the source document and is
    significant for category matching and the first-available fallback.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    stages: dict[str, StageHints] = Field(default_factory=dict)
    general_hints: dict[str, HintEntry] = Field(default_factory=dict, alias="generalHints")

    @field_validator("stages", "general_hints", mode="before")
    @classmethod
    def null_mapping_as_empty(cls, v: object) -> object:
        return {} if v is None else v

    def stage_entries(self, stage: Stage | str) -> list[tuple[str, HintEntry]]:
        """Validation hints of a stage in declared order (empty if the stage is absent)."""
        key = stage.value if isinstance(stage, Stage) else stage
        stage_hints = self.stages.get(key)
        if stage_hints is None:
            return []
        return list(stage_hints.validation_hints.items())

    def general_hint(self, key: str = GENERAL_FALLBACK_KEY) -> HintEntry | None:
        return self.general_hints.get(key)


class ResourceRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    url: str


class ResourceStore(BaseModel):
    model_config = ConfigDict(frozen=True)

    resources: dict[str, ResourceRecord] = Field(default_factory=dict)

    @field_validator("resources", mode="before")
    @classmethod
    def null_resources_as_empty(cls, v: object) -> object:
        return {} if v is None else v

    @classmethod
    def empty(cls) -> "ResourceStore":
        return cls()

    def get(self, resource_id: str) -> ResourceRecord | None:
        return self.resources.get(resource_id)


class ResolvedHint(BaseModel):
    """Outcome of a successful lookup: the chosen entry with its resources resolved."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    stage: Stage
    category: str = ""
    hint_type: HintType = Field(alias="hintType")
    message: str = ""
    hint: str
    resources: list[ResourceRecord] = Field(default_factory=list)
