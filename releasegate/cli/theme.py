"""CLI theme configuration - all colors in one place.

Colors use Rich style syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for releasegate CLI."""

    # -------------------------------------------------------------------------
    # Status colors
    # -------------------------------------------------------------------------
    SUCCESS = "green"
    ERROR = "red"


# Default theme instance - import this in other modules
theme = Theme()
