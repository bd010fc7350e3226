"""Release packaging value objects: target agents, script variants, versions."""

import re
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel

_VERSION_RE = re.compile(r"^v\d+\.\d+\.\d+$")


class Agent(str, Enum):
    """AI assistant a release package is built for."""

    CURSOR = "cursor-agent"
    OPENCODE = "opencode"
    KILOCODE = "kilocode"
    ROO = "roo"
    SOURCECRAFT = "sourcecraft"

    @property
    def commands_dir(self) -> str:
        """Directory (relative to the package root) that receives rendered commands."""
        return AGENT_COMMAND_DIRS[self]


AGENT_COMMAND_DIRS: dict[Agent, str] = {
    Agent.CURSOR: ".cursor/commands",
    Agent.OPENCODE: ".opencode/command",
    Agent.KILOCODE: ".kilocode/rules",
    Agent.ROO: ".roo/rules",
    Agent.SOURCECRAFT: ".codeassistant/commands",
}


class ScriptVariant(str, Enum):
    SH = "sh"
    PS = "ps"

    @property
    def scripts_subdir(self) -> str:
        return "bash" if self == ScriptVariant.SH else "powershell"


class ReleaseVersion(BaseModel, frozen=True):
    value: str

    @classmethod
    def parse(cls, text: str) -> "ReleaseVersion":
        if not _VERSION_RE.match(text):
            raise ValueError(f"Version must look like v0.0.0, got '{text}'")
        return cls(value=text)

    def __str__(self) -> str:
        return self.value


E = TypeVar("E", Agent, ScriptVariant)


def parse_selection(raw: str | None, enum_cls: type[E]) -> list[E]:
    """Parse a comma/space separated subset of an enum.

    Empty input selects every member. Duplicates are dropped, keeping the
    first occurrence. Unknown names raise ValueError listing allowed values.
    """
    if not raw or not raw.strip():
        return list(enum_cls)

    items: list[str] = []
    for item in raw.replace(",", " ").split():
        if item not in items:
            items.append(item)

    allowed = [m.value for m in enum_cls]
    unknown = [item for item in items if item not in allowed]
    if unknown:
        kind = "agent" if enum_cls is Agent else "script"
        raise ValueError(
            f"Unknown {kind} {', '.join(repr(u) for u in unknown)} (allowed: {' '.join(allowed)})"
        )
    return [enum_cls(item) for item in items]
