"""Chain CLI command.

Contents:
    * :func:`cli_run` - Apply the configured transformer chain to a text.
    * :func:`echo_canonical_line` - Print ``hyperup("vim script")``.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hyperup.domain.behaviors import CANONICAL_INPUT, Transformer, build_chain, hyperup
from hyperup.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _resolve_chain(cli_ctx: CLIContext, endings: tuple[str, ...]) -> tuple[Transformer, str]:
    """Return the transformer and default input for this invocation.

    ``--ending`` values replace the configured endings; the configured input
    is still used as the default text.

    Raises:
        SystemExit: With CONFIG_ERROR when the ``[hyperup]`` section is invalid.
    """
    try:
        chain_config = cli_ctx.services.load_chain_config_from_dict(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid chain configuration", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    transformer = build_chain(endings) if endings else chain_config.build_transformer()
    return transformer, chain_config.input


def echo_canonical_line() -> None:
    """Print the fixed ``adore -> announce -> exclaim`` chain applied to ``vim script``.

    Reads no configuration, so layered settings cannot change the line.
    """
    with lib_log_rich.runtime.bind(job_id="cli-default", extra={"command": "default", "chain": hyperup.__name__}):
        logger.info("Applying canonical chain", extra={"input": CANONICAL_INPUT})
        click.echo(hyperup(CANONICAL_INPUT))


@click.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text", required=False)
@click.option(
    "--ending",
    "-e",
    "endings",
    multiple=True,
    metavar="SUFFIX",
    help="Append SUFFIX; repeat to build a custom chain instead of the configured one.",
)
@click.pass_context
def cli_run(ctx: click.Context, text: str | None, endings: tuple[str, ...]) -> None:
    r"""Apply the transformer chain to TEXT and print the single result line.

    Without TEXT the configured input is used (default: ``vim script``).
    Without --ending the configured endings are used, which by default
    form the ``adore -> announce -> exclaim`` chain:

    \b
        $ hyperup run
        vim script rocks, you all!
        $ hyperup run lua -e " is" -e " fine"
        lua is fine
    """
    cli_ctx = get_cli_context(ctx)
    transformer, default_input = _resolve_chain(cli_ctx, endings)
    source = text if text is not None else default_input

    extra = {"command": "run", "chain": transformer.__name__, "custom_endings": bool(endings)}
    with lib_log_rich.runtime.bind(job_id="cli-run", extra=extra):
        logger.info("Applying transformer chain", extra={"input": source})
        click.echo(transformer(source))


__all__ = ["cli_run", "echo_canonical_line"]
