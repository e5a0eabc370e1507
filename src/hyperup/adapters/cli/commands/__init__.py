"""CLI command implementations.

Contents:
    * Chain command from :mod:`.run_cmd`
    * Info command from :mod:`.info`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config, cli_config_generate_examples
from .info import cli_info
from .run_cmd import cli_run, echo_canonical_line

__all__ = [
    "cli_config",
    "cli_config_generate_examples",
    "cli_info",
    "cli_run",
    "echo_canonical_line",
]
