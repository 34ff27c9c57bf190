"""
Folder normalization.

Collapses redundant "." markers, resolves ".." against the preceding
segment and folds repeated empty segments. Unresolvable ".." at the start
of a relative path are dropped.
"""

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, List, Sequence

from .constants import DIRECTORY_CURRENT, DIRECTORY_PARENT

if TYPE_CHECKING:
    from .models import StructuredPath

logger = logging.getLogger(__name__)


def normalize_folders(folders: Sequence[str]) -> List[str]:
    """
    Rewrite a folder sequence into its canonical form.

    Args:
        folders: Folder segments as produced by the parser or resolver.

    Returns:
        New list of folder segments.
    """
    normalized: List[str] = []

    for index, part in enumerate(folders):
        if part == "":
            if not normalized or normalized[-1].strip():
                normalized.append(part)
        elif part == DIRECTORY_CURRENT:
            if index == 0:
                normalized.append(part)
        elif part == DIRECTORY_PARENT:
            if len(normalized) > 1 or (len(normalized) == 1 and normalized[0] != DIRECTORY_CURRENT):
                normalized.pop()
        else:
            normalized.append(part)

    return normalized


def build_normalized(path: "StructuredPath") -> "StructuredPath":
    """
    Build the normalized form of a path.

    Already normalized paths are returned as-is. Prefer ``normalize``,
    which goes through the per-instance cache.
    """
    if path.is_normalized:
        return path

    folder = normalize_folders(path.folder)
    logger.debug(f"Normalized folder {list(path.folder)} -> {folder}")
    return replace(path, folder=tuple(folder), is_normalized=True)


def normalize(path: "StructuredPath") -> "StructuredPath":
    """Return the normalized form of a path, cached on the instance."""
    return path.normalized
