"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Suffixer factory and transformer composition
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_ENDINGS,
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
from .enums import OutputFormat
from .errors import ConfigurationError

__all__ = [
    # Behaviors
    "CANONICAL_ENDINGS",
    "CANONICAL_INPUT",
    "CANONICAL_OUTPUT",
    "Transformer",
    "adore",
    "announce",
    "build_chain",
    "compose",
    "ender",
    "exclaim",
    "hyperup",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
