"""Low-level string helpers for splitting and joining path text."""

from typing import List, Sequence, Tuple

from ..core.constants import FILE_EXTENSION_SEPARATOR, PATH_SEPARATOR


class PathUtils:
    """Separator-aware string utilities used by the parser and decomposer."""

    @staticmethod
    def split(path: str, separator: str = PATH_SEPARATOR) -> List[str]:
        """
        Split a path string into raw tokens.

        Empty tokens produced by leading, trailing or doubled separators
        are kept. An empty separator never splits.

        Args:
            path: Path text to split
            separator: Separator token

        Returns:
            List of raw tokens (at least one element)
        """
        if not separator:
            return [path]
        return path.split(separator)

    @staticmethod
    def join(components: Sequence[str], separator: str = PATH_SEPARATOR) -> str:
        """
        Join path components with the given separator.

        Args:
            components: Ordered path components
            separator: Separator token

        Returns:
            Joined path text
        """
        return separator.join(components)

    @staticmethod
    def split_extension(file: str) -> Tuple[str, str]:
        """
        Split a file component at its last extension separator.

        Args:
            file: File component, e.g. "archive.tar.gz"

        Returns:
            Tuple of (name, extension); extension is empty when there is none
        """
        name, sep, extension = file.rpartition(FILE_EXTENSION_SEPARATOR)
        if not sep:
            return file, ""
        return name, extension
