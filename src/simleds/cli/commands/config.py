"""Configuration commands."""

from pathlib import Path
from typing import Optional

import click

from simleds.exceptions import ConfigurationError
from simleds.models import AppConfig


@click.group()
def config():
    """Show or initialize the simleds configuration."""


@config.command()
@click.option("--path", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Config file (default: ~/.simleds/config.json)")
@click.pass_context
def show(ctx, config_path: Optional[Path]):
    """Display the configuration."""
    from ..main import report_error

    try:
        app_config = AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        report_error(e, ctx.obj.get("log_path") if ctx.obj else None)
        return

    click.echo(f"Config file: {config_path or AppConfig.default_path()}")
    for name, field in AppConfig.model_fields.items():
        click.echo(f"  {name}: {getattr(app_config, name)}")
        if field.description:
            click.echo(f"      {field.description}")


@config.command()
@click.option("--path", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Config file (default: ~/.simleds/config.json)")
def init(config_path: Optional[Path]):
    """Write a default configuration file."""
    path = config_path or AppConfig.default_path()
    if path.exists():
        click.echo(f"Config already exists: {path}")
        return
    AppConfig().save(path)
    click.echo(f"Wrote default config to {path}")
