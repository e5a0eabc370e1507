"""Chain adapter - ``[hyperup]`` configuration section.

Contents:
    * :class:`.config.ChainConfig` - Validated chain settings.
    * :func:`.config.load_chain_config_from_dict` - Config dict loader.
"""

from __future__ import annotations

from .config import CHAIN_SECTION, ChainConfig, load_chain_config_from_dict

__all__ = [
    "CHAIN_SECTION",
    "ChainConfig",
    "load_chain_config_from_dict",
]
