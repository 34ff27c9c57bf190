"""Pure path parsing, normalization and resolution."""

__version__ = "0.1.0"

from .core import (
    PATH_SEPARATOR,
    FILE_EXTENSION_SEPARATOR,
    DIRECTORY_CURRENT,
    DIRECTORY_PARENT,
    StructuredPath,
    parse,
    normalize,
    resolve,
    resolve_normalized,
)

__all__ = [
    "__version__",
    "PATH_SEPARATOR",
    "FILE_EXTENSION_SEPARATOR",
    "DIRECTORY_CURRENT",
    "DIRECTORY_PARENT",
    "StructuredPath",
    "parse",
    "normalize",
    "resolve",
    "resolve_normalized",
]
