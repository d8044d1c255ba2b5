"""
Service layer for gowork.

Contains the logic that orchestrates domain objects and infrastructure:
- HierarchyService: Enumeration and exact author lookup
- LocatorService: Streaming search over the whole hierarchy
- WorkonService: Resolves a term to the single path to work on

Services are the primary API for commands to use.
"""

from .hierarchy_service import HierarchyService
from .locator_service import LocatorService, SearchStream, best_match
from .workon_service import WorkonService, Resolution

__all__ = [
    'HierarchyService',
    'LocatorService',
    'SearchStream',
    'best_match',
    'WorkonService',
    'Resolution',
]
