"""In-memory chain configuration adapter for testing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..chain.config import CHAIN_SECTION, ChainConfig


def load_chain_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> ChainConfig:
    """Parse chain config from dict using the real Pydantic model."""
    chain_raw = config_dict.get(CHAIN_SECTION, {})
    return ChainConfig.model_validate(chain_raw if chain_raw else {})


__all__ = ["load_chain_config_from_dict_in_memory"]
