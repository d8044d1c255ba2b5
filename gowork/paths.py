"""
Absolute path construction for namespace entities.

Every function takes the workspace root explicitly; nothing here reads the
environment or touches the filesystem.
"""

import os
from typing import Union

from .domain import Author, Distributor, Entity, Project

PathLike = Union[str, "os.PathLike[str]"]

SOURCE_DIR = "src"


def source_path(root: PathLike) -> str:
    """Directory holding all distributors: ``root/src``."""
    return os.path.join(os.fspath(root), SOURCE_DIR)


def distributor_path(root: PathLike, distributor: Distributor) -> str:
    return os.path.join(source_path(root), distributor.name)


def author_path(root: PathLike, author: Author) -> str:
    return os.path.join(distributor_path(root, author.distributor), author.name)


def project_path(root: PathLike, project: Project) -> str:
    # Slashes inside the project name are kept, so a/b nests two levels deep
    return os.path.join(author_path(root, project.author), project.name)


def entity_path(root: PathLike, entity: Entity) -> str:
    """Absolute path of any namespace entity."""
    if isinstance(entity, Project):
        return project_path(root, entity)
    if isinstance(entity, Author):
        return author_path(root, entity)
    if isinstance(entity, Distributor):
        return distributor_path(root, entity)
    raise TypeError(f"Not a namespace entity: {entity!r}")
