"""
Locator service for gowork.

Walks every distributor, author and project of a workspace and evaluates a
search term against each level. Matches are produced by a background thread
and streamed to the caller as they are discovered.

Example:
    locator = LocatorService(HierarchyService("/home/me/go"))
    with locator.search("tool") as stream:
        for match in stream:
            print(match.project, match.kind.label)
"""

import logging
import queue
import threading
from typing import Iterator, List, Optional

from ..domain import MatchKind, Project, ProjectMatch
from .hierarchy_service import HierarchyService

logger = logging.getLogger(__name__)


def best_match(distro_hit: bool, author_hit: bool, project_hit: bool) -> MatchKind:
    """Return the most specific level that matched."""
    if project_hit:
        return MatchKind.PROJECT
    if author_hit:
        return MatchKind.AUTHOR
    if distro_hit:
        return MatchKind.DISTRO
    raise ValueError("best_match requires at least one level to match")


def term_matches(term: str, name: str, substring: bool = True) -> bool:
    """
    Case-insensitive match of a search term against one level's name.

    In substring mode the empty term matches everything; in exact mode it
    matches nothing.
    """
    term = term.casefold()
    name = name.casefold()
    if substring:
        return term in name
    return bool(term) and term == name


def classify(project: Project, term: str, substring: bool = True) -> Optional[ProjectMatch]:
    """Evaluate ``term`` against every level of ``project``."""
    distro_hit = term_matches(term, project.distributor.name, substring)
    author_hit = term_matches(term, project.author.name, substring)
    project_hit = term_matches(term, project.name, substring)

    if not (distro_hit or author_hit or project_hit):
        return None
    return ProjectMatch(project, best_match(distro_hit, author_hit, project_hit))


class _Done:
    """Terminal marker for natural completion."""


class _Failed:
    """Terminal marker carrying the error that stopped the producer."""

    def __init__(self, error: BaseException):
        self.error = error


class SearchStream:
    """
    Iterator over the matches of one search.

    Matches are yielded in traversal order. If the producer fails, every
    match found before the failure is still yielded and then the error is
    raised; nothing is yielded after it. The stream is single-use.
    """

    def __init__(self, hierarchy: HierarchyService, term: str, substring: bool = True):
        self.term = term
        self.substring = substring
        self._hierarchy = hierarchy
        # Unbounded, so the producer never waits on a consumer that walked away
        self._queue: "queue.Queue" = queue.Queue()
        self._stopped = threading.Event()
        self._finished = False
        self._thread = threading.Thread(
            target=self._produce,
            name=f"gowork-search-{term!r}",
            daemon=True,
        )
        self._thread.start()

    def _produce(self) -> None:
        try:
            for distributor in self._hierarchy.distributors():
                for author in self._hierarchy.authors(distributor):
                    if self._stopped.is_set():
                        return
                    for project in self._hierarchy.projects(author):
                        match = classify(project, self.term, self.substring)
                        if match is not None:
                            self._queue.put(match)
        except OSError as e:
            logger.debug(f"Search for {self.term!r} aborted: {e}")
            self._queue.put(_Failed(e))
        except Exception as e:
            logger.exception(f"Search for {self.term!r} failed unexpectedly")
            self._queue.put(_Failed(e))
        else:
            self._queue.put(_Done())

    def __iter__(self) -> Iterator[ProjectMatch]:
        return self

    def __next__(self) -> ProjectMatch:
        if self._finished:
            raise StopIteration

        item = self._queue.get()
        if isinstance(item, _Done):
            self._finished = True
            raise StopIteration
        if isinstance(item, _Failed):
            self._finished = True
            raise item.error
        return item

    def close(self, timeout: Optional[float] = None) -> None:
        """Stop reading and wait for the producer to exit."""
        self._stopped.set()
        self._finished = True
        self._thread.join(timeout)

    def __enter__(self) -> 'SearchStream':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class LocatorService:
    """
    Service for resolving search terms to projects.

    Example:
        locator = LocatorService(HierarchyService(root))
        matches = locator.search_all("alice", substring=False)
    """

    def __init__(self, hierarchy: HierarchyService):
        self.hierarchy = hierarchy

    def search(self, term: str, substring: bool = True) -> SearchStream:
        """
        Start a search and return a stream of ProjectMatch.

        Args:
            term: Search term, compared case-insensitively
            substring: Match substrings (True) or whole names only (False)
        """
        logger.debug(f"Searching {self.hierarchy.root} for {term!r} (substring={substring})")
        return SearchStream(self.hierarchy, term, substring)

    def search_all(self, term: str, substring: bool = True) -> List[ProjectMatch]:
        """Collect every match of a search, raising the first error if any."""
        with self.search(term, substring) as stream:
            return list(stream)
