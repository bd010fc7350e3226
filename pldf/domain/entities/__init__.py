from pldf.domain.entities.hint import (
    GENERAL_FALLBACK_KEY,
    HintEntry,
    HintStore,
    ResolvedHint,
    ResourceRecord,
    ResourceStore,
    StageHints,
)

__all__ = [
    "GENERAL_FALLBACK_KEY",
    "HintEntry",
    "HintStore",
    "ResolvedHint",
    "ResourceRecord",
    "ResourceStore",
    "StageHints",
]
