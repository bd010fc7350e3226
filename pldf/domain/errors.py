"""Errors raised while looking up hints.

All three kinds are terminal: the lookup is deterministic, so retrying with
the same input always gives the same outcome.
"""


class HintLookupError(Exception):
    """Base class for hint lookup failures."""


class InvalidStageError(HintLookupError):
    def __init__(self, stage: str):
        self.stage = stage
        super().__init__(f"Invalid stage: {stage}")


class StoreUnavailableError(HintLookupError):
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Hint store unavailable ({source}): {reason}")


class HintNotFoundError(HintLookupError):
    def __init__(self, stage: str):
        self.stage = stage
        super().__init__(f"No hint found for stage '{stage}'")


class PackagingError(Exception):
    """Source tree is missing something a build or release needs."""
