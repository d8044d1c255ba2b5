#!/usr/bin/env python3

import click

from gowork import __version__
from gowork.config import load_config, setup_logging
from gowork.commands.list import distros_handler, authors_handler, projects_handler
from gowork.commands.search import search_handler, find_author_handler
from gowork.commands.workon import workon_handler, root_handler, shell_init_handler
from gowork.commands.config import config_cmd


@click.group()
@click.version_option(version=__version__, prog_name="gowork")
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='Configuration file (default: $GOWORK_CONFIG or ~/.gowork/config.*)')
@click.option('--root', default=None,
              help='Workspace root (overrides the config file and $GOPATH)')
@click.option('-v', '--verbose', is_flag=True, help='Turn on verbose logging.')
@click.pass_context
def cli(ctx, config_path, root, verbose):
    """gowork - Locate projects in a distributor/author/project workspace.

    Projects live in <root>/src/<distributor>/<author>/<project>, for
    example ~/go/src/github.com/alice/tool. The root comes from --root,
    the config file, or $GOPATH (in that order), defaulting to ~/go.
    """
    config = load_config(config_path)
    if root:
        config['general']['root'] = root
    setup_logging(verbose, config)

    ctx.ensure_object(dict)
    ctx.obj.update({
        'config': config,
        'config_path': config_path,
        'verbose': verbose,
    })


cli.add_command(workon_handler, name='workon')
cli.add_command(search_handler, name='search')
cli.add_command(find_author_handler, name='find-author')
cli.add_command(distros_handler, name='distros')
cli.add_command(authors_handler, name='authors')
cli.add_command(projects_handler, name='projects')
cli.add_command(root_handler, name='root')
cli.add_command(shell_init_handler, name='shell-init')
cli.add_command(config_cmd)


def main():
    cli()


if __name__ == "__main__":
    main()
