"""File identifier for uniquely identifying directories by device and inode."""

import os
from typing import NamedTuple, Optional

from any2tree.types import PathType


class FileIdentifier(NamedTuple):
    """Device and inode pair that uniquely identifies a directory.

    Used to recognize a directory reached a second time through a followed
    symlink, which would otherwise make the walk loop forever.

    Note:
        On Windows, inode numbers are synthesized by Python's os.stat and are
        still suitable for this purpose.
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_path(cls, path: PathType) -> Optional["FileIdentifier"]:
        """Identify the file a path points to, following symlinks.

        Returns:
            The identifier, or None if the path cannot be stat'ed.
        """
        try:
            stat_info = os.stat(path)
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)
