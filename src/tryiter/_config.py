"""Library configuration: TryIterConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from tryiter._logging import configure_logging

__all__ = [
    'TryIterConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'TRYITER_LOG_LEVEL'
LOG_FORMAT_ENV = 'TRYITER_LOG_FORMAT'


@dataclass(frozen=True)
class TryIterConfig:
    """Configuration for tryiter.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or colored console lines (False).
    """

    log_level: str | None = None
    json_output: bool = True

    @property
    def tracing(self) -> bool:
        """True when adapters should emit their debug events."""
        return self.log_level is not None


_DEFAULT = TryIterConfig()

# Global configuration (set by init())
_config: TryIterConfig | None = None


def _detect_log_level() -> str | None:
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Resolve the output format from the environment.

    Priority:
    1. TRYITER_LOG_FORMAT ("json" or "console")
    2. Default to JSON
    """
    env_format = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, env_format)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> TryIterConfig:
    """Initialize tryiter with the given configuration.

    Unset arguments are read from ``TRYITER_LOG_LEVEL`` and
    ``TRYITER_LOG_FORMAT``.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: JSON (True) or console (False) rendering.

    Returns:
        The TryIterConfig that was set.

    Example:
        ```python
        import tryiter

        tryiter.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = TryIterConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> TryIterConfig:
    """Get the active configuration.

    Returns:
        The TryIterConfig set by init(), or the silent default.
    """
    if _config is None:
        return _DEFAULT
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
