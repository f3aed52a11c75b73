"""UI components for amiitool."""

from .display import DisplayManager
from .formatters import TagInfoFormatter

__all__ = [
    "DisplayManager",
    "TagInfoFormatter",
]
