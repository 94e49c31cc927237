"""
Logging configuration.

The packaged YAML config (`src/globearc/config/logging.yaml`) defines formatters and
handlers; the level comes from settings (`GLOBEARC_LOG_LEVEL`) unless the CLI passes
`--log-level` explicitly.
"""

from __future__ import annotations

import copy
import logging.config

from globearc.config.settings import get_logging_config, get_settings


def configure_logging(level: str | None = None) -> None:
    """Apply the packaged logging config with the effective level."""
    config = copy.deepcopy(get_logging_config())

    effective = (level or get_settings().app.log_level).upper()
    config.setdefault("root", {})["level"] = effective
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict) and "level" in handler:
            handler["level"] = effective

    logging.config.dictConfig(config)
