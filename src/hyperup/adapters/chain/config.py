"""Chain configuration model and loader.

Provides the ChainConfig Pydantic model for the validated, immutable
``[hyperup]`` section and the loader that creates it from configuration
dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...domain.behaviors import CANONICAL_ENDINGS, CANONICAL_INPUT, Transformer, build_chain
from ...domain.errors import ConfigurationError

#: Name of the configuration section holding chain settings.
CHAIN_SECTION: Final[str] = "hyperup"


class ChainConfig(BaseModel):
    """Validated, immutable chain configuration.

    Example:
        >>> config = ChainConfig(endings=[" rocks", "!"])
        >>> config.endings
        (' rocks', '!')
        >>> config.input
        'vim script'
        >>> config.build_transformer()("python")
        'python rocks!'
    """

    model_config = ConfigDict(frozen=True)

    input: str = CANONICAL_INPUT
    endings: tuple[str, ...] = Field(default=CANONICAL_ENDINGS)

    @field_validator("endings", mode="before")
    @classmethod
    def _coerce_string_to_sequence(cls, v: Any) -> Any:
        """Coerce a single string to a one-element list.

        Environment variables and .env files provide plain strings instead of
        TOML arrays. An empty string stays a valid (empty) ending.

        Examples:
            >>> ChainConfig._coerce_string_to_sequence("!")
            ['!']
            >>> ChainConfig._coerce_string_to_sequence([" rocks", "!"])
            [' rocks', '!']
        """
        if isinstance(v, str):
            return [v]
        return v

    def build_transformer(self) -> Transformer:
        """Compose one suffixer per configured ending, in order."""
        return build_chain(self.endings)


def _describe_errors(exc: ValidationError) -> str:
    """Render pydantic errors as ``field: message`` pairs.

    Example:
        >>> try:
        ...     ChainConfig.model_validate({"endings": 42})
        ... except ValidationError as exc:
        ...     print(_describe_errors(exc))  # doctest: +ELLIPSIS
        endings: ...
    """
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or CHAIN_SECTION
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def load_chain_config_from_dict(config_dict: Mapping[str, Any]) -> ChainConfig:
    """Load ChainConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    ChainConfig Pydantic model. A missing section yields the canonical chain.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a ``hyperup`` section with chain settings.

    Returns:
        Validated chain settings with defaults for missing values.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> config = load_chain_config_from_dict({"hyperup": {"input": "lua"}})
        >>> config.build_transformer()(config.input)
        'lua rocks, you all!'
        >>> load_chain_config_from_dict({}).endings
        (' rocks', ', you all', '!')
    """
    section: Any = config_dict.get(CHAIN_SECTION, {})

    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[{CHAIN_SECTION}] must be a table, got {type(section).__name__}")

    try:
        return ChainConfig.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [{CHAIN_SECTION}] configuration: {_describe_errors(exc)}") from exc


__all__ = [
    "CHAIN_SECTION",
    "ChainConfig",
    "load_chain_config_from_dict",
]
