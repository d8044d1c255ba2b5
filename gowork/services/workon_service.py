"""
Workon service for gowork.

Turns whatever the user typed after ``gowork workon`` into exactly one
directory: a canonical identifier that exists on disk, or else the most
specific unique result of a search.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from ..domain import (
    Author,
    Distributor,
    Entity,
    MatchKind,
    Project,
    ProjectMatch,
    parse_identifier,
)
from ..domain.namespace import SEPARATOR
from ..exceptions import AmbiguousMatchError, MalformedIdentifierError, ProjectNotFoundError
from ..infra.directory_reader import HIDDEN_PREFIX
from .. import paths
from .locator_service import LocatorService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """The entity a term resolved to and its absolute path."""
    entity: Entity
    path: str
    kind: MatchKind
    direct: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = self.entity.to_dict()
        data['path'] = self.path
        data['match'] = self.kind.label
        data['direct'] = self.direct
        return data


_KIND_OF = {
    Project: MatchKind.PROJECT,
    Author: MatchKind.AUTHOR,
    Distributor: MatchKind.DISTRO,
}


def _unique(items: List[Entity]) -> List[Entity]:
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


class WorkonService:
    """
    Resolves a term to the single directory to work on.

    Example:
        service = WorkonService(LocatorService(HierarchyService(root)))
        print(service.resolve("tool").path)
    """

    def __init__(self, locator: LocatorService):
        self.locator = locator
        self.hierarchy = locator.hierarchy

    def resolve(self, term: str, exact: bool = False) -> Resolution:
        """
        Resolve ``term``.

        Exact matches are tried first; substring matches only when nothing
        matched exactly and ``exact`` is False.

        Raises:
            ProjectNotFoundError: Nothing matched
            AmbiguousMatchError: Several locations tie at the best level
            OSError: The workspace could not be read
        """
        if SEPARATOR in term.strip(SEPARATOR):
            direct = self._resolve_identifier(term)
            if direct is not None:
                return direct

        matches = self.locator.search_all(term, substring=False)
        if not matches and not exact:
            logger.debug(f"No exact match for {term!r}, trying substring search")
            matches = self.locator.search_all(term, substring=True)

        if not matches:
            raise ProjectNotFoundError()

        return self.pick(term, matches)

    def _resolve_identifier(self, term: str):
        segments = term.strip(SEPARATOR).split(SEPARATOR)
        if any(not s or s in ('.', '..') or s.startswith(HIDDEN_PREFIX) for s in segments):
            logger.debug(f"{term!r} is not a visible workspace location")
            return None

        try:
            entity = parse_identifier(term)
        except MalformedIdentifierError:
            return None

        path = paths.entity_path(self.hierarchy.root, entity)
        if not self.hierarchy.exists(path):
            return None
        return Resolution(entity, path, _KIND_OF[type(entity)], direct=True)

    def pick(self, term: str, matches: List[ProjectMatch]) -> Resolution:
        """Choose the most specific unique location among ``matches``."""
        top = max(match.kind for match in matches)
        best = [match.project for match in matches if match.kind == top]

        if top == MatchKind.PROJECT:
            candidates: List[Entity] = _unique(best)
        elif top == MatchKind.AUTHOR:
            candidates = _unique([project.author for project in best])
        else:
            candidates = _unique([project.distributor for project in best])

        if len(candidates) > 1:
            raise AmbiguousMatchError(term, candidates)

        entity = candidates[0]
        return Resolution(entity, paths.entity_path(self.hierarchy.root, entity), top)
