import json
from pathlib import Path

import click

from ..cli_utils import standard_command, add_common_options, get_config
from ..config import get_config_path, get_default_config, save_config
from ..exit_codes import ConfigError


@click.group("config")
def config_cmd():
    """Configuration management commands."""
    pass


@config_cmd.command("show")
@click.option("--pretty", is_flag=True, help="Display as formatted JSON instead of single-line JSONL")
@click.option("--path", is_flag=True, help="Show the config file path being used")
def show_config(pretty, path):
    """Show the current configuration with all merges applied.

    By default, outputs single-line JSON (JSONL format).
    Use --pretty for human-readable formatted output.
    Use --path to see which config file is being used.
    """
    if path:
        obj = click.get_current_context().find_root().obj or {}
        config_path = obj.get('config_path') or get_config_path()
        click.echo(json.dumps({"config_path": str(config_path)}))
        return

    config = get_config()

    if pretty:
        click.echo(json.dumps(config, indent=2, ensure_ascii=False))
    else:
        click.echo(json.dumps(config, ensure_ascii=False))


@config_cmd.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
@click.option("--root", default="", help="Workspace root to store in the file")
@add_common_options("quiet")
@standard_command()
def init_config(force, root, progress, **kwargs):
    """Write a default configuration file."""
    obj = click.get_current_context().find_root().obj or {}
    config_path = Path(obj.get('config_path') or get_config_path())

    if config_path.exists() and not force:
        raise ConfigError(f"Configuration already exists at {config_path} (use --force to overwrite)")

    config = get_default_config()
    if root:
        config["general"]["root"] = root
    written = save_config(config, config_path)
    progress.success(f"Configuration written to {written}")
    return {"config_path": str(written)}
