"""
Handles the 'search' and 'find-author' commands.

'search' streams every project whose distributor, author or name matches a
term; 'find-author' resolves a single author by exact name.
"""

import click

from .. import paths
from ..cli_utils import standard_command, add_common_options, get_config, get_hierarchy
from ..domain import Distributor, MatchKind
from ..exit_codes import NotFoundError
from ..render import render_matches_table
from ..services import LocatorService

KIND_CHOICES = [kind.label for kind in MatchKind]


@click.command(name='search')
@click.argument('term', default='', required=False)
@click.option('--exact/--substring', default=None,
              help='Match whole names only, or substrings (default from config: substring)')
@click.option('-k', '--kind', 'kinds', multiple=True, type=click.Choice(KIND_CHOICES),
              help='Only show matches of this kind (repeatable)')
@add_common_options('quiet', 'format', 'fields', 'table')
@standard_command(streaming=True)
def search_handler(term, exact, kinds, table, progress, **kwargs):
    """Search all projects for TERM.

    TERM is compared case-insensitively against the distributor, author
    and project name of every project. Each hit is labelled with the most
    specific level that matched (project > author > distro). An empty TERM
    lists every project.

    Examples:

    \b
        gowork search tool               # substring match at any level
        gowork search alice --exact      # projects of authors named alice
        gowork search git -k project     # only project-name hits
        gowork search --table
    """
    if exact is None:
        substring = bool(get_config().get('search', {}).get('substring', True))
    else:
        substring = not exact

    hierarchy = get_hierarchy()
    locator = LocatorService(hierarchy)
    progress(f"Searching {hierarchy.root} for {term!r}")

    if table:
        matches = [m for m in locator.search_all(term, substring)
                   if not kinds or m.kind.label in kinds]
        render_matches_table(matches, hierarchy.root)
        return None

    def generate():
        found = 0
        with locator.search(term, substring) as stream:
            for match in stream:
                if kinds and match.kind.label not in kinds:
                    continue
                found += 1
                item = match.to_dict()
                item['path'] = paths.project_path(hierarchy.root, match.project)
                yield item

        progress(f"Found {found} projects")
        if not found:
            raise NotFoundError(f"No project matches {term!r}")

    return generate()


@click.command(name='find-author')
@click.argument('name')
@click.option('--in', 'distributor', default=None, help='Only look in this distributor')
@add_common_options('quiet', 'format')
@standard_command()
def find_author_handler(name, distributor, progress, **kwargs):
    """Find the author NAME (case-insensitive exact match).

    Without --in, every distributor is tried in order and the first one
    that has the author wins.

    Examples:

    \b
        gowork find-author alice
        gowork find-author alice --in bitbucket.org
    """
    hierarchy = get_hierarchy()
    if distributor:
        author = hierarchy.find_author_in(name, Distributor(distributor))
    else:
        author = hierarchy.find_author(name)

    item = author.to_dict()
    item['path'] = paths.author_path(hierarchy.root, author)
    return item
