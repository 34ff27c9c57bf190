"""
Path text parsing.

Turns a path string into its structural parts: device, folder segments,
file and the absolute flag. Parsing is total; every string maps to some
set of parts.
"""

import logging
import re
from typing import List, Tuple

from .constants import DEVICE_PATTERN, PATH_SEPARATOR, SPECIAL_DIRECTORIES
from ..utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

_DEVICE_RE = re.compile(DEVICE_PATTERN)

# (device, folder, file, is_absolute)
PathParts = Tuple[str, List[str], str, bool]


def is_device(token: str) -> bool:
    """Check if a token is a drive-letter device such as "C:"."""
    return _DEVICE_RE.fullmatch(token) is not None


def split_path(text: str, separator: str = PATH_SEPARATOR) -> PathParts:
    """
    Split path text into device, folder, file and absolute flag.

    Args:
        text: Path text to parse.
        separator: Separator token the text uses.

    Returns:
        Tuple of (device, folder, file, is_absolute).
    """
    if not text:
        return "", [], "", False

    device = ""
    file = ""
    parts = PathUtils.split(text, separator)

    # A leading device or a leading separator makes the path absolute
    first = parts[0]
    if is_device(first):
        device = first
    is_absolute = bool(device) or first == ""
    if is_absolute:
        parts.pop(0)

    if parts:
        last = parts[-1]
        if last and last not in SPECIAL_DIRECTORIES:
            file = last
        # Trailing "." and ".." stay in the folder for the normalizer
        if file or last == "":
            parts.pop()

    logger.debug(f"Parsed {text!r}: device={device!r} folder={parts} file={file!r} absolute={is_absolute}")
    return device, parts, file, is_absolute
