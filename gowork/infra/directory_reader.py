"""
Directory reading infrastructure for gowork.

All hierarchy reads go through DirectoryReader, making them:
- Easy to mock for testing
- Consistent in filtering (directories only, no hidden entries)
- Isolated from the matching logic
"""

import logging
import os
from typing import List

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


def is_proper_directory(entry: os.DirEntry) -> bool:
    """
    Check whether a directory entry is an eligible hierarchy node.

    The entry must be a directory (symlinks to directories count) and must
    not be hidden.
    """
    if not entry.is_dir():
        logger.debug(f"Not a directory: {entry.name}, skipping...")
        return False

    if entry.name.startswith(HIDDEN_PREFIX):
        logger.debug(f"Invisible file: {entry.name}, skipping...")
        return False

    return True


class DirectoryReader:
    """
    Lists the eligible child directories of a path.

    Example:
        reader = DirectoryReader()
        for name in reader.list_dirs("/home/me/go/src"):
            print(name)
    """

    def list_dirs(self, path: str) -> List[str]:
        """
        Read ``path`` once and return the names of proper directories.

        Names come back sorted. OSError (missing path, permission denied)
        propagates unchanged.
        """
        with os.scandir(path) as entries:
            names = [entry.name for entry in entries if is_proper_directory(entry)]
        names.sort()
        return names
