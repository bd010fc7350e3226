"""CLI theme configuration - all colors in one place.

Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for the pldf CLI."""

    # -------------------------------------------------------------------------
    # Status colors
    # -------------------------------------------------------------------------
    SUCCESS_BOLD = "bold green"
    ERROR = "red"
    ERROR_BOLD = "bold red"

    # -------------------------------------------------------------------------
    # Text styles
    # -------------------------------------------------------------------------
    DIM = "grey62"

    # -------------------------------------------------------------------------
    # Hint display
    # -------------------------------------------------------------------------
    HINT_HEADER = "cyan"
    HINT_MESSAGE = "yellow"
    HINT_TEXT = "green"
    HINT_RESOURCES = "cyan"
    HINT_GENERAL = "magenta"

    # -------------------------------------------------------------------------
    # Table columns
    # -------------------------------------------------------------------------
    TABLE_ID = "cyan"
    TABLE_SECONDARY = "grey62"


# Default theme instance - import this in other modules
theme = Theme()
