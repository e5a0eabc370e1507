"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml``; ``tests/test_metadata.py`` keeps them in
sync.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...)
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery
    * :func:`print_info` - render the metadata block for the ``info`` command
"""

from __future__ import annotations

from typing import Final

#: Distribution name declared in ``pyproject.toml``.
name: Final[str] = "hyperup"
#: Human-readable summary shown in CLI help output.
title: Final[str] = "Chain string-suffixing closures into one composed transformer"
#: Current release version pulled from ``pyproject.toml``.
version: Final[str] = "1.0.0"
#: Author attribution.
author: Final[str] = "bitranox"
#: Console-script name published by the package.
shell_command: Final[str] = "hyperup"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: Final[str] = "bitranox"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: Final[str] = "hyperup"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: Final[str] = "hyperup"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hyperup:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
