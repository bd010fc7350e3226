from pldf.domain.value_objects.hint_type import HintType
from pldf.domain.value_objects.release import (
    Agent,
    ReleaseVersion,
    ScriptVariant,
    parse_selection,
)
from pldf.domain.value_objects.stage import Stage, parse_stage

__all__ = [
    # Hints
    "HintType",
    "Stage",
    "parse_stage",
    # Release packaging
    "Agent",
    "ReleaseVersion",
    "ScriptVariant",
    "parse_selection",
]
