"""Console output formatting."""

from .color_scheme import ColorScheme
from .console_formatter import ConsoleFormatter

__all__ = ["ColorScheme", "ConsoleFormatter"]
