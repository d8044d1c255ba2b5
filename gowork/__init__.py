"""
gowork - Locate projects in a distributor/author/project workspace.

Projects live three levels below ``<root>/src``:

    <root>/src/github.com/alice/tool
    <root>/src/bitbucket.org/bob/lib/v2

Quick Start:
    from gowork import HierarchyService, LocatorService

    hierarchy = HierarchyService("/home/me/go")

    # Enumerate
    for distro in hierarchy.distributors():
        print(distro)

    # Exact author lookup
    author = hierarchy.find_author("alice")

    # Streaming search
    locator = LocatorService(hierarchy)
    with locator.search("tool") as stream:
        for match in stream:
            print(match.project, match.kind.label)

Domain Objects:
    Distributor, Author, Project - Namespace entities
    MatchKind - DISTRO < AUTHOR < PROJECT
    ProjectMatch - A search hit

Services:
    HierarchyService - Enumeration and exact lookup
    LocatorService - Streaming search
    WorkonService - Term to single path resolution
"""

__version__ = "0.3.0"

from .domain import (
    Distributor,
    Author,
    Project,
    MatchKind,
    ProjectMatch,
    parse_identifier,
)

from .exceptions import (
    GoworkError,
    MalformedIdentifierError,
    AuthorNotFoundError,
    ProjectNotFoundError,
    AmbiguousMatchError,
)

from .paths import (
    source_path,
    distributor_path,
    author_path,
    project_path,
)

from .services import (
    HierarchyService,
    LocatorService,
    SearchStream,
    WorkonService,
    best_match,
)

from .config import load_config, resolve_root

__all__ = [
    "__version__",
    # Domain objects
    "Distributor",
    "Author",
    "Project",
    "MatchKind",
    "ProjectMatch",
    "parse_identifier",
    # Errors
    "GoworkError",
    "MalformedIdentifierError",
    "AuthorNotFoundError",
    "ProjectNotFoundError",
    "AmbiguousMatchError",
    # Paths
    "source_path",
    "distributor_path",
    "author_path",
    "project_path",
    # Services
    "HierarchyService",
    "LocatorService",
    "SearchStream",
    "WorkonService",
    "best_match",
    # Configuration
    "load_config",
    "resolve_root",
]
