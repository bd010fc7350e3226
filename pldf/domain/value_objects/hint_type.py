from enum import Enum


class HintType(str, Enum):
    VALIDATION = "validation"
    GENERAL = "general"
