"""CLI theme configuration - all colors in one place.

Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for ralph CLI."""

    # -------------------------------------------------------------------------
    # Status colors (for success/error/warning indicators)
    # -------------------------------------------------------------------------
    SUCCESS = "green"
    SUCCESS_BOLD = "bold green"
    ERROR = "red"
    ERROR_BOLD = "bold red"
    WARNING = "yellow"
    INFO = "cyan"

    # -------------------------------------------------------------------------
    # Text styles
    # -------------------------------------------------------------------------
    DIM = "grey62"

    # -------------------------------------------------------------------------
    # Check and loop status
    # -------------------------------------------------------------------------
    STATUS_PASSED = "bold green"
    STATUS_FAILED = "bold red"
    STATUS_SKIPPED = "yellow"
    STATUS_IDLE = "grey62"
    STATUS_COMPLETE = "bold green"


# Default theme instance - import this in other modules
theme = Theme()
