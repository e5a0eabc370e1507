"""Centralized logging initialization for all entry points.

Both ``python -m hyperup`` and the ``hyperup`` console script reach
:func:`init_logging` through the root CLI command, so the lib_log_rich
runtime is configured from the same ``[lib_log_rich]`` section no matter
how the program is started.

Contents:
    * :class:`LoggingConfigModel` - boundary validation of the config section.
    * :func:`init_logging` - idempotent runtime initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hyperup import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Extra fields pass through unchanged to ``lib_log_rich.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(service="hyperup", environment="dev").environment
        'dev'
        >>> LoggingConfigModel().service is None
        True
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})

    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime once per process.

    Loads .env files so ``LOG_*`` variables are visible, builds the runtime
    configuration from ``config`` and bridges standard :mod:`logging` so
    modules can keep using ``logging.getLogger(__name__)``. Later calls
    return immediately.

    Args:
        config: Loaded layered configuration with a ``[lib_log_rich]`` section.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
