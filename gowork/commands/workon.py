"""
Handles the 'workon', 'root' and 'shell-init' commands.

A process cannot change its parent shell's directory, so 'workon' only
prints the resolved path. 'shell-init' prints a shell function that runs
'gowork workon' and cds into the result.
"""

import click

from .. import paths
from ..cli_utils import standard_command, add_common_options, get_hierarchy
from ..services import LocatorService, WorkonService

SHELL_FUNCTION = '''{name}() {{
    local dir
    dir="$(command gowork workon "$@")" || return $?
    cd "$dir" || return $?
}}
'''


@click.command(name='workon')
@click.argument('term')
@click.option('--exact', is_flag=True, help='Never fall back to substring matching')
@click.option('--json', 'as_json', is_flag=True, help='Print the resolution as JSON instead of a bare path')
@add_common_options('quiet')
@standard_command()
def workon_handler(term, exact, as_json, progress, **kwargs):
    """Print the directory of the project matching TERM.

    TERM may be a full identifier (github.com/alice/tool), an author,
    a distributor, or part of a project name. The most specific unique
    match wins; ties are reported as ambiguous.

    Examples:

    \b
        cd "$(gowork workon tool)"
        gowork workon github.com/alice
        eval "$(gowork shell-init)"; workon tool
    """
    hierarchy = get_hierarchy()
    resolution = WorkonService(LocatorService(hierarchy)).resolve(term, exact=exact)
    progress(f"{term!r} -> {resolution.entity} ({resolution.kind.label})")

    if as_json:
        return resolution.to_dict()
    return resolution.path


@click.command(name='root')
@add_common_options('quiet', 'format')
@standard_command()
def root_handler(progress, **kwargs):
    """Show the workspace root and its source directory."""
    hierarchy = get_hierarchy()
    src = paths.source_path(hierarchy.root)
    return {
        'root': hierarchy.root,
        'src': src,
        'exists': hierarchy.exists(src),
    }


@click.command(name='shell-init')
@click.option('--name', default='workon', show_default=True, help='Name of the shell function')
def shell_init_handler(name):
    """Print a shell function that cds into 'gowork workon' results.

    \b
        eval "$(gowork shell-init)"
    """
    click.echo(SHELL_FUNCTION.format(name=name), nl=False)
