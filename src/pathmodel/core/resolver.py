"""Resolution of one path against another."""

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Union

from .normalizer import normalize

if TYPE_CHECKING:
    from .models import StructuredPath

logger = logging.getLogger(__name__)


def resolve(base: "StructuredPath", other: Union["StructuredPath", str]) -> "StructuredPath":
    """
    Resolve ``other`` within the context of ``base``.

    An absolute ``other``, or one using a different separator, replaces the
    base entirely. A relative ``other`` is appended to the base folders and
    supplies the file. String input is parsed with the base separator.

    Args:
        base: Path providing the context.
        other: Path (or path text) to resolve.

    Returns:
        The resolved path.
    """
    if isinstance(other, str):
        other = type(base).parse(other, base.separator)

    if other.is_absolute or other.separator != base.separator:
        logger.debug(f"Resolve of {other.complete!r} overrides base {base.complete!r}")
        return other

    return replace(
        base,
        folder=base.folder + other.folder,
        file=other.file,
        is_normalized=False,
    )


def resolve_normalized(base: "StructuredPath", other: Union["StructuredPath", str]) -> "StructuredPath":
    """Resolve ``other`` against ``base`` and normalize the result."""
    return normalize(resolve(base, other))
