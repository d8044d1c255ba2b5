"""
Infrastructure layer for gowork.

Contains abstractions for external systems:
- DirectoryReader: Filtered directory listings

These provide clean interfaces that can be mocked for testing.
"""

from .directory_reader import DirectoryReader, is_proper_directory

__all__ = [
    'DirectoryReader',
    'is_proper_directory',
]
