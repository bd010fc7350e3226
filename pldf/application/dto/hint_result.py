from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pldf.domain.entities.hint import ResolvedHint, ResourceRecord


class HintPayload(BaseModel):
    message: str = ""
    hint: str
    resources: list[ResourceRecord] = Field(default_factory=list)


class HintResult(BaseModel):
    """Structured record emitted by ``pldf hint get --json``."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    stage: str | None = None
    category: str | None = None
    hint_type: str | None = Field(default=None, alias="hintType")
    hint: HintPayload | None = None
    error: str | None = None

    @classmethod
    def from_resolved(cls, resolved: ResolvedHint) -> "HintResult":
        return cls(
            success=True,
            stage=resolved.stage.value,
            category=resolved.category,
            hint_type=resolved.hint_type.value,
            hint=HintPayload(
                message=resolved.message,
                hint=resolved.hint,
                resources=list(resolved.resources),
            ),
        )

    @classmethod
    def from_error(cls, error: Exception | str) -> "HintResult":
        return cls(success=False, error=str(error))

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: failures carry only ``success`` and ``error``."""
        if self.success:
            return self.model_dump(by_alias=True, exclude={"error"})
        return {"success": False, "error": self.error}
