from pldf.domain.services.command_template import render_command
from pldf.domain.services.hint_resolver import HintResolver

__all__ = [
    "HintResolver",
    "render_command",
]
