"""
Namespace domain objects for gowork.

A workspace is laid out as distributor/author/project below ``<root>/src``:

    github.com/alice/tool
    bitbucket.org/bob/lib/v2

Distributor, Author and Project are immutable value objects. Their canonical
string form is the slash-joined identifier; parsing uses a bounded split so
that only the first N-1 separators are structural and a project name may
contain further slashes.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Tuple, Union

from ..exceptions import MalformedIdentifierError

SEPARATOR = "/"


@dataclass(frozen=True)
class Distributor:
    """A hosting root such as github.com or bitbucket.org."""
    name: str

    def canonical(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'distributor', 'id': self.canonical(), 'name': self.name}

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Author:
    """
    Someone who hosts code on a distributor.

    An author with projects on several distributors is represented by one
    Author per distributor (github.com/alice and bitbucket.org/alice).
    """
    distributor: Distributor
    name: str

    @classmethod
    def parse(cls, text: str) -> 'Author':
        """Parse ``distro/name``, splitting on the first separator."""
        parts = text.split(SEPARATOR, 1)
        if len(parts) != 2:
            raise MalformedIdentifierError(text, "author")
        return cls(Distributor(parts[0]), parts[1])

    def split(self) -> Tuple[Distributor, str]:
        return self.distributor, self.name

    def canonical(self) -> str:
        return f"{self.distributor.canonical()}{SEPARATOR}{self.name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'author',
            'id': self.canonical(),
            'distributor': self.distributor.name,
            'name': self.name,
        }

    def __str__(self) -> str:
        return self.canonical()


@dataclass(frozen=True)
class Project:
    """A project owned by an author. The name may contain slashes."""
    author: Author
    name: str

    @property
    def distributor(self) -> Distributor:
        return self.author.distributor

    @classmethod
    def parse(cls, text: str) -> 'Project':
        """Parse ``distro/author/name...`` with a three-way bounded split."""
        parts = text.split(SEPARATOR, 2)
        if len(parts) != 3:
            raise MalformedIdentifierError(text, "project")
        distro, author, name = parts
        return cls(Author(Distributor(distro), author), name)

    def split(self) -> Tuple[Distributor, Author, str]:
        return self.distributor, self.author, self.name

    def canonical(self) -> str:
        return f"{self.author.canonical()}{SEPARATOR}{self.name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'project',
            'id': self.canonical(),
            'distributor': self.distributor.name,
            'author': self.author.name,
            'name': self.name,
        }

    def __str__(self) -> str:
        return self.canonical()


Entity = Union[Distributor, Author, Project]


def parse_identifier(text: str) -> Entity:
    """
    Parse a canonical identifier into the most specific entity it names.

    ``github.com`` is a Distributor, ``github.com/alice`` an Author and
    anything with two or more separators a Project.
    """
    text = text.strip(SEPARATOR)
    if not text:
        raise MalformedIdentifierError(text, "identifier")

    separators = text.count(SEPARATOR)
    if separators == 0:
        return Distributor(text)
    if separators == 1:
        return Author.parse(text)
    return Project.parse(text)


class MatchKind(IntEnum):
    """Hierarchy level a search term matched, ordered by specificity."""
    DISTRO = 1
    AUTHOR = 2
    PROJECT = 3

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class ProjectMatch:
    """A project found by the locator and the level the term matched."""
    project: Project
    kind: MatchKind

    def to_dict(self) -> Dict[str, Any]:
        data = self.project.to_dict()
        data['match'] = self.kind.label
        return data
