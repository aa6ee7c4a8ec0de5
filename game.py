from __future__ import annotations

# Facade module that re-exports the Tetris Stack core.
# Tests and tools import from here; single-responsibility modules live
# under tetris_stack_core/*.

from tetris_stack_core.piece import Kind, Piece, PIECE_KINDS
from tetris_stack_core.errors import (
    StackError,
    QueueError,
    QueueFull,
    QueueEmpty,
    InvalidChoice,
)
from tetris_stack_core.config import (
    QUEUE_CAPACITY,
    StackConfig,
    load_config,
    debug_log,
    debug_enabled,
    set_debug,
)
from tetris_stack_core.factory import PieceFactory
from tetris_stack_core.piece_queue import PieceQueue
from tetris_stack_core.session import Session, SessionStats
from tetris_stack_core.menu import (
    MenuChoice,
    LoopState,
    MenuLoop,
    StepResult,
    parse_choice,
)
from tetris_stack_core.codec import (
    piece_to_json,
    queue_to_json,
    stats_to_json,
)


def main() -> None:
    # CLI driver delegated to tetris_stack_core.cli
    from tetris_stack_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
