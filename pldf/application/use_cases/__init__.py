from pldf.application.use_cases.build_release import BuildRelease
from pldf.application.use_cases.build_workspace import BuildWorkspace
from pldf.application.use_cases.get_hint import GetHint
from pldf.application.use_cases.list_hints import HintSummary, ListHints

__all__ = [
    "BuildRelease",
    "BuildWorkspace",
    "GetHint",
    "HintSummary",
    "ListHints",
]
