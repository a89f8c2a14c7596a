"""Tree views for structured data and directories.

This package renders nested mappings, sequences and scalars as an indented
tree, and renders directories as a decorated tree annotated with sizes,
permissions, version-control status and file-type icons.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("any2tree")
except PackageNotFoundError:
    __version__ = "unknown"
