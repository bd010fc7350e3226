from enum import Enum

from pldf.domain.errors import InvalidStageError


class Stage(str, Enum):
    """Phase of the PLDF educational workflow a hint belongs to."""

    CONCEPT = "concept"
    DESIGN = "design"
    TECH = "tech"
    ARCHITECTURE = "architecture"
    PLAN = "plan"
    IMPLEMENT = "implement"
    REVIEW = "review"


def parse_stage(value: str | Stage) -> Stage:
    """Convert a raw stage name to a Stage, rejecting anything outside the fixed set."""
    if isinstance(value, Stage):
        return value
    try:
        return Stage(value)
    except ValueError:
        raise InvalidStageError(str(value)) from None
