"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split a ``SECTION.KEY[.SUBKEY...]=VALUE`` string into a ConfigOverride.

    The first ``=`` separates the dotted path from the value, the first dot
    separates the section from the key path.

    Raises:
        ValueError: If ``=`` or the dot is missing, or a path component is empty.

    Examples:
        >>> override = parse_override('hyperup.endings=["!", "?"]')
        >>> override.section, override.key_path, override.value
        ('hyperup', ('endings',), ['!', '?'])

        >>> parse_override("hyperup.input=lua").value
        'lua'
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)

    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path_part.split(".")
    key_path = tuple(keys)

    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Parse ``raw`` as JSON, falling back to the plain string.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("null")
        (True, 42, None)
        >>> coerce_value('[" rocks", "!"]')
        [' rocks', '!']
        >>> coerce_value("vim script")
        'vim script'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target``, creating intermediate tables.

    Raises:
        TypeError: If an intermediate key already holds a non-table value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _nest_override(tree, ConfigOverride(section="lib_log_rich", key_path=("a", "b"), value=1))
        >>> tree
        {'lib_log_rich': {'a': {'b': 1}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge CLI overrides into a Config instance.

    Args:
        config: Original immutable Config from file/env layers.
        raw_overrides: ``SECTION.KEY=VALUE`` strings from ``--set``.

    Returns:
        New Config with overrides applied, or ``config`` itself when there
        are none.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"hyperup": {"input": "vim script"}}, {})
        >>> apply_overrides(cfg, ("hyperup.input=lua",))["hyperup"]["input"]
        'lua'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
