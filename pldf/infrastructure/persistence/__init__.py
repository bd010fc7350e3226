from pldf.infrastructure.persistence.atomic_io import atomic_write
from pldf.infrastructure.persistence.json_hint_source import JsonHintSource
from pldf.infrastructure.persistence.paths import get_default_hints_dir

__all__ = [
    "JsonHintSource",
    "atomic_write",
    "get_default_hints_dir",
]
