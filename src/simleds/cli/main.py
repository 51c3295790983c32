"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from simleds.exceptions import SimLedsError, format_error_for_display
from simleds.models import AppConfig

from .commands import check, config, replay

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.home() / ".simleds" / "logs"


def resolve_log_path(debug: bool, log_file: Optional[Path], log_dir: Path = DEFAULT_LOG_DIR) -> Path:
    """Where log records go for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "simleds-debug.log"
    return log_dir / "simleds.log"


def setup_logging(
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
    log_dir: Path = DEFAULT_LOG_DIR,
) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode logging to ./simleds-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level used with a custom log file
        log_dir: Directory of the rotating log file when no other file is given

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file, log_dir)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps the last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


def report_error(error: BaseException, log_path: Optional[Path]) -> None:
    """Show an error without a traceback and exit with status 1."""
    if isinstance(error, SimLedsError):
        logger.error(f"Command failed: {error.technical_message}", exc_info=error)
    else:
        logger.exception("Command failed")
    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
    sys.exit(1)


@click.group()
@click.pass_context
@click.version_option(version="0.1.0", prog_name="simleds")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./simleds-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(ctx, verbose: int, debug: bool, log_file: Optional[Path], log_level: str):
    """
    simleds - LED effects driven by racing simulator telemetry.

    Load an LED profile, build its effect tree and drive it from telemetry.

    \b
    Examples:
      # Validate a profile and show where its effects land
      simleds check my-profile.json

    \b
      # Replay a telemetry recording on an 18 LED strip
      simleds replay my-profile.json lap.jsonl --leds 18

    \b
      # Show the current configuration
      simleds config show
    """
    ctx.ensure_object(dict)
    log_dir = DEFAULT_LOG_DIR
    if not (log_file or debug):
        try:
            log_dir = AppConfig.load_or_default().log_dir
        except SimLedsError as e:
            # The command reading the config reports the error itself
            click.echo(f"Warning: {e.user_message}, logging to {log_dir}", err=True)
    ctx.obj["log_path"] = setup_logging(verbose, debug, log_file, log_level, log_dir)


cli.add_command(check)
cli.add_command(replay)
cli.add_command(config)

if __name__ == "__main__":
    cli()
