"""
Domain layer for gowork.

Contains pure domain objects with no I/O or side effects:
- Distributor: A hosting root (github.com)
- Author: A name scoped under one distributor
- Project: A name scoped under one author
- ProjectMatch: A search hit and the level it matched at

These objects are immutable and provide serialization methods for
JSONL output.
"""

from .namespace import (
    Distributor,
    Author,
    Project,
    MatchKind,
    ProjectMatch,
    Entity,
    parse_identifier,
)

__all__ = [
    'Distributor',
    'Author',
    'Project',
    'MatchKind',
    'ProjectMatch',
    'Entity',
    'parse_identifier',
]
