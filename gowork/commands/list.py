"""
Handles the listing commands: 'distros', 'authors' and 'projects'.

Each command reads one level of the workspace hierarchy and prints it as
JSONL (default), another --format, or a --table.
"""

import click

from .. import paths
from ..cli_utils import standard_command, add_common_options, get_hierarchy
from ..domain import Author, Distributor
from ..domain.namespace import SEPARATOR
from ..render import render_entities_table


def _entity_rows(root, entities):
    rows = []
    for entity in entities:
        item = entity.to_dict()
        item['path'] = paths.entity_path(root, entity)
        rows.append(item)
    return rows


def _output(rows, table, title):
    if table:
        render_entities_table(rows, title=title)
        return None
    return rows


@click.command(name='distros')
@add_common_options('quiet', 'format', 'fields', 'table')
@standard_command()
def distros_handler(table, progress, **kwargs):
    """List all distributors in the workspace.

    Examples:

    \b
        gowork distros
        gowork distros --table
    """
    hierarchy = get_hierarchy()
    progress(f"Reading {paths.source_path(hierarchy.root)}")
    rows = _entity_rows(hierarchy.root, hierarchy.distributors())
    return _output(rows, table, "Distributors")


@click.command(name='authors')
@click.argument('distributor')
@add_common_options('quiet', 'format', 'fields', 'table')
@standard_command()
def authors_handler(distributor, table, progress, **kwargs):
    """List the authors hosting code on DISTRIBUTOR.

    Examples:

    \b
        gowork authors github.com
    """
    hierarchy = get_hierarchy()
    rows = _entity_rows(hierarchy.root, hierarchy.authors(Distributor(distributor)))
    return _output(rows, table, f"Authors on {distributor}")


@click.command(name='projects')
@click.argument('author')
@add_common_options('quiet', 'format', 'fields', 'table')
@standard_command()
def projects_handler(author, table, progress, **kwargs):
    """List the projects of AUTHOR.

    AUTHOR is either DISTRO/NAME or a bare NAME, which is looked up in
    every distributor (the first distributor that has it wins).

    Examples:

    \b
        gowork projects github.com/alice
        gowork projects alice
    """
    hierarchy = get_hierarchy()
    if SEPARATOR in author:
        resolved = Author.parse(author)
    else:
        resolved = hierarchy.find_author(author)
        progress(f"Found {resolved}")

    rows = _entity_rows(hierarchy.root, hierarchy.projects(resolved))
    return _output(rows, table, f"Projects of {resolved}")
