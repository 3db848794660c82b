"""Color scheme definitions for output formatting."""


class ColorScheme:
    """Color definitions for console output."""

    # Header colors
    HEADER = "bold cyan"
    SUBHEADER = "cyan"

    # Field colors
    LABEL = "bold"
    LINK = "blue underline"
    MISSING = "dim"
    ERROR = "red"

    # Table colors
    TABLE_HEADER = "bold magenta"
    NAME = "cyan"
    COUNT = "green"

    # Quota colors
    QUOTA_OK = "green"
    QUOTA_LOW = "yellow"
    QUOTA_EXHAUSTED = "red bold"
