"""
Hierarchy service for gowork.

Enumerates the distributor/author/project levels of a workspace and
resolves authors by exact name. Each enumeration is a single directory read.
"""

import logging
import os
from typing import List, Optional

from ..domain import Author, Distributor, Project
from ..exceptions import AuthorNotFoundError
from ..infra import DirectoryReader
from .. import paths

logger = logging.getLogger(__name__)


class HierarchyService:
    """
    Service for listing and looking up namespace entities.

    Example:
        service = HierarchyService("/home/me/go")
        for distro in service.distributors():
            for author in service.authors(distro):
                print(author)
    """

    def __init__(self, root: str, reader: Optional[DirectoryReader] = None):
        """
        Initialize HierarchyService.

        Args:
            root: Workspace root; distributors live in ``root/src``
            reader: Directory reader (creates default if None)
        """
        self.root = os.fspath(root)
        self.reader = reader or DirectoryReader()

    def distributors(self) -> List[Distributor]:
        """Return all distributors in the workspace."""
        return [Distributor(name) for name in self.reader.list_dirs(paths.source_path(self.root))]

    def authors(self, distributor: Distributor) -> List[Author]:
        """Return all authors hosting code on ``distributor``."""
        names = self.reader.list_dirs(paths.distributor_path(self.root, distributor))
        return [Author(distributor, name) for name in names]

    def projects(self, author: Author) -> List[Project]:
        """Return all projects of ``author``."""
        names = self.reader.list_dirs(paths.author_path(self.root, author))
        return [Project(author, name) for name in names]

    def find_author_in(self, name: str, distributor: Distributor) -> Author:
        """
        Find an author by case-insensitive exact name within one distributor.

        Raises:
            AuthorNotFoundError: No author of that name exists there
            OSError: The distributor directory cannot be read
        """
        wanted = name.casefold()
        for author in self.authors(distributor):
            if author.name.casefold() == wanted:
                return author
        raise AuthorNotFoundError()

    def find_author(self, name: str) -> Author:
        """
        Find an author in any distributor.

        Distributors are tried in enumeration order and the first hit is
        returned. If the same author exists on several distributors, which
        one wins depends on that order only; use find_author_in when the
        distributor is known.

        Raises:
            AuthorNotFoundError: No distributor has an author of that name
            OSError: The source directory itself cannot be read
        """
        for distributor in self.distributors():
            try:
                return self.find_author_in(name, distributor)
            except AuthorNotFoundError:
                continue
            except OSError as e:
                logger.debug(f"Skipping {distributor}: {e}")
                continue
        raise AuthorNotFoundError()

    def exists(self, path: str) -> bool:
        """Check whether a resolved entity path is present on disk."""
        return os.path.isdir(path)
