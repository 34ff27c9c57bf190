"""Separator and special-token constants shared by the path model."""

PATH_SEPARATOR = "/"
FILE_EXTENSION_SEPARATOR = "."
DIRECTORY_CURRENT = "."
DIRECTORY_PARENT = ".."

# Tokens that never qualify as a file component
SPECIAL_DIRECTORIES = frozenset({DIRECTORY_CURRENT, DIRECTORY_PARENT})

# Drive-letter prefix such as "C:"
DEVICE_PATTERN = r"[A-Za-z]:"
