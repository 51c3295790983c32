"""Telemetry replay command."""

import logging
from pathlib import Path
from typing import Optional

import click

from simleds.core import LedEngine
from simleds.devices import ConsoleSink
from simleds.exceptions import ErrorContext, SimLedsError
from simleds.models import AppConfig, load_profile
from simleds.telemetry import read_telemetry

logger = logging.getLogger(__name__)


@click.command()
@click.argument("profile")
@click.argument("telemetry", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--leds", "-n", type=click.IntRange(min=1), default=None,
              help="Number of LEDs on the strip (default: from config)")
@click.option("--interval", "-i", type=click.FloatRange(min=0), default=None,
              help="Seconds between moments (default: from config, 0 for no wait)")
@click.option("--color/--no-color", default=True, help="Color the LED dots")
@click.pass_context
def replay(ctx, profile: str, telemetry: Path, leds: Optional[int], interval: Optional[float], color: bool):
    """Drive PROFILE from a TELEMETRY recording and print every frame.

    TELEMETRY is a JSON-lines file with one snapshot per line, e.g.
    {"rpm": 8100, "max_rpm": 9000, "gear": 4, "flags": {"yellow": true}}
    """
    from ..main import report_error

    log_path = ctx.obj.get("log_path") if ctx.obj else None
    try:
        with ErrorContext("replay telemetry", logger_instance=logger):
            config = AppConfig.load_or_default()
            led_profile = load_profile(config.resolve_profile(profile))
            sink = ConsoleSink(leds or config.led_count, color=color)
            engine = LedEngine.from_profile(led_profile, sink)
            processed = engine.run(
                read_telemetry(telemetry),
                interval=config.poll_interval if interval is None else interval,
            )
            engine.shutdown()
    except (SimLedsError, OSError) as e:
        report_error(e, log_path)
        return
    except KeyboardInterrupt:
        logger.info("Replay interrupted by user")
        click.echo("\nStopped.", err=True)
        return

    click.echo(f"Replayed {processed} moments", err=True)
