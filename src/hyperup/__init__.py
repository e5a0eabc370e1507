"""Public package surface exposing transformers, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: suffixer factory and composed transformers
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    CANONICAL_INPUT,
    CANONICAL_OUTPUT,
    Transformer,
    adore,
    announce,
    build_chain,
    compose,
    ender,
    exclaim,
    hyperup,
)

__all__ = [
    "CANONICAL_INPUT",
    "CANONICAL_OUTPUT",
    "Transformer",
    "adore",
    "announce",
    "build_chain",
    "compose",
    "ender",
    "exclaim",
    "get_config",
    "hyperup",
    "print_info",
]
