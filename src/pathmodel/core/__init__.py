"""Core components for pathmodel."""

from .constants import (
    PATH_SEPARATOR,
    FILE_EXTENSION_SEPARATOR,
    DIRECTORY_CURRENT,
    DIRECTORY_PARENT,
)
from .models import StructuredPath, parse
from .normalizer import normalize, normalize_folders
from .resolver import resolve, resolve_normalized

__all__ = [
    "PATH_SEPARATOR",
    "FILE_EXTENSION_SEPARATOR",
    "DIRECTORY_CURRENT",
    "DIRECTORY_PARENT",
    "StructuredPath",
    "parse",
    "normalize",
    "normalize_folders",
    "resolve",
    "resolve_normalized",
]
