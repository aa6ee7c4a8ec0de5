from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Optional

QUEUE_CAPACITY = 5

_TRUTHY = ('1', 'true', 'yes', 'on')


def _env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None


_debug_override: Optional[bool] = None


def set_debug(enabled: Optional[bool]) -> Optional[bool]:
    """Force traces on or off (None falls back to TETRIS_STACK_DEBUG).
    Returns the previous setting so callers can restore it."""
    global _debug_override
    previous = _debug_override
    _debug_override = enabled
    return previous


def debug_enabled() -> bool:
    if _debug_override is not None:
        return _debug_override
    return _env_flag('TETRIS_STACK_DEBUG')


def debug_log(tag: str, message: str) -> None:
    """Print a tagged trace line to stderr when TETRIS_STACK_DEBUG is set."""
    if debug_enabled():
        print(f"[{tag}] {message}", file=sys.stderr)


@dataclass(frozen=True)
class StackConfig:
    capacity: int = QUEUE_CAPACITY
    seed: Optional[int] = None
    clear_screen: bool = True
    pause: bool = True
    debug: bool = False
    json_stats: bool = False


def load_config(args: Optional[argparse.Namespace] = None) -> StackConfig:
    """
    Build the runtime configuration.
    Order: command-line flags, then TETRIS_STACK_* environment variables,
    then defaults.
    """
    capacity = _env_int('TETRIS_STACK_CAPACITY')
    seed = _env_int('TETRIS_STACK_SEED')
    no_clear = _env_flag('TETRIS_STACK_NO_CLEAR')
    no_pause = _env_flag('TETRIS_STACK_NO_PAUSE')
    debug = debug_enabled()
    json_stats = False

    if args is not None:
        if getattr(args, 'capacity', None) is not None:
            capacity = args.capacity
        if getattr(args, 'seed', None) is not None:
            seed = args.seed
        no_clear = no_clear or bool(getattr(args, 'no_clear', False))
        no_pause = no_pause or bool(getattr(args, 'no_pause', False))
        debug = debug or bool(getattr(args, 'debug', False))
        json_stats = bool(getattr(args, 'json', False))

    if capacity is None:
        capacity = QUEUE_CAPACITY
    if capacity < 1:
        raise ValueError(f'capacity must be a positive integer, got {capacity}')

    return StackConfig(
        capacity=capacity,
        seed=seed,
        clear_screen=not no_clear,
        pause=not no_pause,
        debug=debug,
        json_stats=json_stats,
    )
