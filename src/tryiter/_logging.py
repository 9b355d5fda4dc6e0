"""Structured logging for tryiter's adapter events.

Adapters that swallow or short-circuit on an error report it as one structlog
event named ``<adapter>.<action>`` (``take_ok.halted``, ``filter_ok.discarded``,
``try_collect.short_circuit``, ``try_buffer.short_circuit``). The processor
chain turns the raw error object into ``error`` (its repr) and ``error_type``,
and hands every finished entry to the registered hooks.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import structlog

__all__ = [
    'add_log_hook',
    'capture_events',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'log_adapter_event',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]


class _HookRegistry:
    """Ordered set of hooks, run as the last structlog processor before rendering."""

    __slots__ = ('_hooks',)

    def __init__(self) -> None:
        self._hooks: list[LogHook] = []

    def add(self, hook: LogHook) -> None:
        self._hooks.append(hook)

    def remove(self, hook: LogHook) -> None:
        if hook in self._hooks:
            self._hooks.remove(hook)

    def clear(self) -> None:
        self._hooks.clear()

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for hook in tuple(self._hooks):
            try:
                hook(dict(event_dict))
            except Exception:  # noqa: BLE001, S110
                pass  # a failing hook must not break logging
        return event_dict


_hooks = _HookRegistry()


def add_log_hook(hook: LogHook) -> None:
    """Register a hook receiving a copy of each log entry."""
    _hooks.add(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister a hook; unknown hooks are ignored."""
    _hooks.remove(hook)


def clear_log_hooks() -> None:
    """Unregister every hook."""
    _hooks.clear()


@contextmanager
def capture_events(prefix: str = '') -> Iterator[list[dict[str, Any]]]:
    """Collect log entries whose event name starts with ``prefix``.

    Example:
        ```python
        with capture_events('take_ok.') as events:
            list(take_ok(source))
        ```
    """
    events: list[dict[str, Any]] = []

    def hook(entry: dict[str, Any]) -> None:
        if str(entry.get('event', '')).startswith(prefix):
            events.append(entry)

    _hooks.add(hook)
    try:
        yield events
    finally:
        _hooks.remove(hook)


def _describe_error(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Replace a raw ``error`` object by its repr and type name."""
    if 'error' in event_dict and 'error_type' not in event_dict:
        error = event_dict['error']
        event_dict['error_type'] = error.__name__ if isinstance(error, type) else type(error).__name__
        event_dict['error'] = repr(error)
    return event_dict


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route tryiter's events (and stdlib records) to stderr.

    Args:
        level: Logging level name; adapter events are emitted at DEBUG.
        json_output: Render JSON lines (True) or colored console lines (False).
    """
    stamp = structlog.processors.TimeStamper(fmt='iso')
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            stamp,
            _describe_error,
            _hooks,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # module-level loggers must see configuration made after import
        cache_logger_on_first_use=False,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.add_log_level, structlog.stdlib.add_logger_name, stamp],
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def log_adapter_event(logger: Any, adapter: str, action: str, error: object) -> None:
    """Emit the ``<adapter>.<action>`` debug event for an error an adapter dropped."""
    logger.debug(f'{adapter}.{action}', adapter=adapter, error=error)
