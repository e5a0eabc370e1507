"""Root CLI command group and global option handling.

Contents:
    * :func:`cli` - Root command group with global options. Without a
      subcommand it prints the canonical ``hyperup`` line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from hyperup import __init__conf__
from hyperup.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from hyperup.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides to a Config, raising UsageError on failure."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging and dispatch to a subcommand.

    Configuration is loaded once with the profile, ``--set`` overrides are
    applied, and the result is stored in the Click context. Without a
    subcommand the fixed ``hyperup`` chain runs once on ``vim script``,
    independent of configuration, so a bare ``hyperup`` always prints
    ``vim script rocks, you all!``.
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        from .commands import echo_canonical_line

        echo_canonical_line()


# Deferred: command modules import from package ancestors of this module.
def _register_commands() -> None:
    from .commands import (
        cli_config,
        cli_config_generate_examples,
        cli_info,
        cli_run,
    )

    for cmd in (
        cli_run,
        cli_info,
        cli_config,
        cli_config_generate_examples,
    ):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
