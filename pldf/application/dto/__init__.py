from pldf.application.dto.hint_query import HintQuery
from pldf.application.dto.hint_result import HintPayload, HintResult

__all__ = [
    "HintPayload",
    "HintQuery",
    "HintResult",
]
