"""Profile validation command."""

import logging

import click

from simleds.effects import EffectGroup, describe_tree
from simleds.exceptions import ErrorContext, SimLedsError
from simleds.models import AppConfig, UnknownContainer, load_profile

logger = logging.getLogger(__name__)


def _unknown_containers(containers):
    for container in containers:
        if isinstance(container, UnknownContainer):
            yield container
        yield from _unknown_containers(getattr(container, "led_containers", ()))


@click.command()
@click.argument("profile")
@click.pass_context
def check(ctx, profile: str):
    """Validate PROFILE and print its effect tree.

    PROFILE is a path or the name of a profile in the profiles directory.
    """
    from ..main import report_error

    log_path = ctx.obj.get("log_path") if ctx.obj else None
    try:
        with ErrorContext("check profile", logger_instance=logger):
            config = AppConfig.load_or_default()
            path = config.resolve_profile(profile)
            led_profile = load_profile(path)
            root = EffectGroup.root(led_profile)
    except (SimLedsError, OSError) as e:
        report_error(e, log_path)
        return

    click.echo(f"Profile: {led_profile.name} ({led_profile.profile_id})")
    for line in describe_tree(root):
        click.echo(line)

    for container in _unknown_containers(led_profile.led_containers):
        click.echo(
            f"Warning: unsupported container type '{container.container_type}' "
            f"at position {container.start_position} is ignored",
            err=True,
        )
