"""
Core data models for pathmodel.

This module contains the structured path value object used throughout the
library.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Tuple, Union

from .constants import PATH_SEPARATOR
from .normalizer import build_normalized
from .parser import split_path
from .resolver import resolve, resolve_normalized
from ..utils.path_utils import PathUtils


@dataclass(frozen=True, eq=False)
class StructuredPath:
    """
    Immutable structured representation of a path.

    Use ``StructuredPath.parse`` (or ``pathmodel.parse``) to build one from
    text. Derived views are computed on first access and cached. Equality
    and hashing use ``complete`` only, so the separator does not take part.
    """

    device: str = ""
    folder: Tuple[str, ...] = ()
    file: str = ""
    is_absolute: bool = False
    separator: str = PATH_SEPARATOR
    is_normalized: bool = False

    def __post_init__(self):
        if not isinstance(self.folder, tuple):
            object.__setattr__(self, 'folder', tuple(self.folder))

    @classmethod
    def parse(cls, text: str, separator: str = PATH_SEPARATOR) -> 'StructuredPath':
        """
        Create a path from text.

        Args:
            text: Path text, e.g. "/usr/lib/libc.so" or "C:\\temp\\x".
            separator: Separator used by the text. Defaults to "/".

        Returns:
            The parsed path. Parsing never fails.
        """
        device, folder, file, is_absolute = split_path(text, separator)
        return cls(
            device=device,
            folder=tuple(folder),
            file=file,
            is_absolute=is_absolute,
            separator=separator,
        )

    @cached_property
    def file_name(self) -> str:
        """The file name without its extension."""
        return PathUtils.split_extension(self.file)[0]

    @cached_property
    def file_extension(self) -> str:
        """The file extension, without the leading dot."""
        return PathUtils.split_extension(self.file)[1]

    @cached_property
    def directory(self) -> str:
        """The directory part, without device and file."""
        prefix = self.separator if self.is_absolute else ""
        suffix = self.separator if self.folder else ""
        return prefix + PathUtils.join(self.folder, self.separator) + suffix

    @cached_property
    def complete(self) -> str:
        """Device, directory and file composed into one string."""
        return self.device + self.directory + self.file

    @cached_property
    def normalized(self) -> 'StructuredPath':
        """The normalized path."""
        return build_normalized(self)

    def resolve(self, other: Union['StructuredPath', str]) -> 'StructuredPath':
        """Resolve another path (or path text) within this path."""
        return resolve(self, other)

    def resolve_normalized(self, other: Union['StructuredPath', str]) -> 'StructuredPath':
        """Resolve another path within this path and normalize the result."""
        return resolve_normalized(self, other)

    def to_dict(self) -> Dict[str, Any]:
        """Fields and derived views as plain values."""
        return {
            'device': self.device,
            'folder': list(self.folder),
            'file': self.file,
            'is_absolute': self.is_absolute,
            'separator': self.separator,
            'is_normalized': self.is_normalized,
            'file_name': self.file_name,
            'file_extension': self.file_extension,
            'directory': self.directory,
            'complete': self.complete,
        }

    @cached_property
    def _hash(self) -> int:
        return hash(self.complete)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuredPath):
            return NotImplemented
        return hash(other) == hash(self) and other.complete == self.complete

    def __str__(self) -> str:
        return self.complete


parse = StructuredPath.parse
