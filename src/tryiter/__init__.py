"""tryiter: composable adapters for iterators of Ok/Err outcomes.

Write map / filter / flat-map pipelines against success values only, and let
each adapter decide what happens to errors: forward them, stop at them, skip
them, or short-circuit on them.

Flat imports (preferred):
    from tryiter import Ok, Err, safe, tryiter
    from tryiter import try_map, map_and_then, try_filter, take_ok, filter_ok
    from tryiter import try_collect, try_buffer

Example:
    ```python
    from tryiter import safe, tryiter

    parse = safe(int)
    tryiter(map(parse, ['1', '2', '3'])).try_map(lambda n: n + 1).try_collect()
    # Ok(value=[2, 3, 4])
    ```
"""

# Configuration and logging
from tryiter._config import TryIterConfig, get_config, init
from tryiter._logging import (
    add_log_hook,
    capture_events,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Decorators
from tryiter.decorators import safe, try_parse

# Adapters
from tryiter.adapters import (
    FilterOk,
    TakeOk,
    TryFilter,
    TryFlatMap,
    TryMap,
    filter_ok,
    map_and_then,
    take_ok,
    try_filter,
    try_flat_map,
    try_map,
)

# Terminal operations
from tryiter.collect import Buffer, ReversedBuffer, try_buffer, try_collect
from tryiter.errors import NotAnOutcomeError

# Outcome types
from tryiter.outcome import Err, Ok, Result, is_outcome

# Capability
from tryiter.protocols import TryIter, TryIterable, TryIterator, tryiter

__all__ = [
    'Buffer',
    'Err',
    'FilterOk',
    'NotAnOutcomeError',
    'Ok',
    'Result',
    'ReversedBuffer',
    'TakeOk',
    'TryFilter',
    'TryFlatMap',
    'TryIter',
    'TryIterConfig',
    'TryIterable',
    'TryIterator',
    'TryMap',
    'add_log_hook',
    'capture_events',
    'clear_log_hooks',
    'configure_logging',
    'filter_ok',
    'get_config',
    'get_logger',
    'init',
    'is_outcome',
    'map_and_then',
    'remove_log_hook',
    'safe',
    'take_ok',
    'try_buffer',
    'try_collect',
    'try_filter',
    'try_flat_map',
    'try_map',
    'try_parse',
    'tryiter',
]
