"""
Common CLI utilities and decorators for consistent command behavior.
"""

import json
import sys
from functools import wraps
from typing import Generator

import click

from .exceptions import AmbiguousMatchError
from .exit_codes import (
    SUCCESS, INTERRUPTED,
    get_exit_code_for_exception, CommandError
)
from .format_utils import FORMATS, format_output, get_format_from_env
from .progress import get_progress


def standard_command(streaming: bool = False):
    """
    Decorator that provides standard CLI behavior:
    - Progress reporting on stderr
    - Clean data output on stdout
    - --quiet/-q to suppress data output
    - Consistent error handling and exit codes

    The wrapped command returns a generator, list or dict of
    JSON-serializable items, or None if it printed its own output.

    Args:
        streaming: If True, output JSONL as items are produced.
                   If False, collect results and output at end.
    """
    def decorator(func):

        @wraps(func)
        def wrapper(*args, **kwargs):
            ctx = click.get_current_context(silent=True)
            obj = (ctx.find_root().obj if ctx else None) or {}

            verbose = kwargs.get('verbose', False) or obj.get('verbose', False)
            quiet = kwargs.get('quiet', False)
            output_format = kwargs.get('format', None)
            fields_str = kwargs.get('fields', None)
            fields = fields_str.split(',') if fields_str else None

            if output_format is None:
                output_format = get_format_from_env(
                    obj.get('config', {}).get('output', {}).get('format', 'jsonl')
                )

            progress = get_progress(enabled=verbose or None)
            kwargs['progress'] = progress

            try:
                result = func(*args, **kwargs)
                if not streaming and isinstance(result, Generator):
                    # Collect first so a failure produces no partial output
                    result = list(result)

                if quiet:
                    # Consume the generator so errors still surface
                    if isinstance(result, Generator):
                        for _ in result:
                            pass
                elif result is None:
                    # Command handles its own output
                    pass
                elif isinstance(result, Generator):
                    for line in format_output(result, output_format, fields):
                        print(line, flush=True)
                elif isinstance(result, (list, tuple)):
                    for line in format_output(iter(result), output_format, fields):
                        print(line, flush=True)
                elif isinstance(result, dict):
                    for line in format_output(iter([result]), output_format, fields):
                        print(line, flush=True)
                else:
                    print(result, flush=True)

                sys.exit(SUCCESS)

            except KeyboardInterrupt:
                progress.error("Interrupted by user")
                sys.exit(INTERRUPTED)
            except click.ClickException:
                raise
            except CommandError as e:
                progress.error(str(e))
                if not quiet:
                    error_obj = {
                        "error": str(e),
                        "type": type(e).__name__,
                        "exit_code": e.exit_code
                    }
                    print(json.dumps(error_obj, ensure_ascii=False), flush=True)
                sys.exit(e.exit_code)
            except Exception as e:
                progress.error(str(e))
                if not quiet:
                    error_obj = {
                        "error": str(e),
                        "type": type(e).__name__
                    }
                    if isinstance(e, AmbiguousMatchError):
                        error_obj['candidates'] = [str(c) for c in e.candidates]
                    print(json.dumps(error_obj, ensure_ascii=False), flush=True)
                sys.exit(get_exit_code_for_exception(e))

        return wrapper
    return decorator


# Standard options that many commands share
common_options = {
    'quiet': click.option('-q', '--quiet', is_flag=True,
                          help='Suppress data output, show only progress'),
    'format': click.option('-f', '--format',
                           type=click.Choice(list(FORMATS)),
                           help='Output format (default: jsonl, or from GOWORK_FORMAT env)'),
    'fields': click.option('--fields',
                           help='Comma-separated list of fields to include (for CSV/TSV)'),
    'table': click.option('--table', is_flag=True,
                          help='Display as a formatted table'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('quiet', 'format')
        def my_command(quiet, format):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator


def get_config() -> dict:
    """Return the configuration loaded by the root command."""
    from .config import load_config

    ctx = click.get_current_context(silent=True)
    obj = (ctx.find_root().obj if ctx else None) or {}
    if 'config' not in obj:
        obj['config'] = load_config()
    return obj['config']


def get_hierarchy():
    """Build a HierarchyService for the configured workspace root."""
    from .config import resolve_root
    from .services import HierarchyService

    return HierarchyService(resolve_root(get_config()))
