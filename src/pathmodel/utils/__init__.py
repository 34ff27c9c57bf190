"""Utility modules for pathmodel."""

from .path_utils import PathUtils
from .console_base import ConsoleBase, StatusType, THEMES

__all__ = ["PathUtils", "ConsoleBase", "StatusType", "THEMES"]
