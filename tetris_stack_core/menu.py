from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

from .errors import InvalidChoice, QueueError, StackError
from .piece import Piece
from .piece_queue import PieceQueue
from .session import Session, SessionStats


class MenuChoice(IntEnum):
    QUIT = 0
    PLAY = 1
    INSERT = 2
    INVALID = -1


class LoopState(Enum):
    RUNNING = 'running'
    TERMINATED = 'terminated'


def parse_choice(text: Optional[str]) -> MenuChoice:
    """Normalizes a line of user input to a menu code; never raises."""
    if text is None:
        return MenuChoice.INVALID
    raw = text.strip()
    # Plain ASCII digits only; int() would also take signs, '_' and other scripts.
    if not (raw.isascii() and raw.isdigit()):
        return MenuChoice.INVALID
    value = int(raw)
    if value not in (MenuChoice.QUIT, MenuChoice.PLAY, MenuChoice.INSERT):
        return MenuChoice.INVALID
    return MenuChoice(value)


@dataclass(frozen=True)
class StepResult:
    """Outcome of one menu action, ready to be rendered."""
    choice: MenuChoice
    state: LoopState
    snapshot: Tuple[Piece, ...]
    piece: Optional[Piece] = None
    error: Optional[StackError] = None
    stats: Optional[SessionStats] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MenuLoop:
    """Running/Terminated state machine behind the interactive menu.

    Built only after ``Session.initialize()`` has produced a full queue.
    Queue guard failures and unknown choices are reported in the
    ``StepResult``; they never end the loop.
    """

    def __init__(self, session: Session, queue: PieceQueue):
        self.session = session
        self.queue = queue
        self.state = LoopState.RUNNING

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def step(self, choice: MenuChoice, raw: str = '') -> StepResult:
        if not self.running:
            raise RuntimeError('session already terminated')

        piece: Optional[Piece] = None
        error: Optional[StackError] = None
        stats: Optional[SessionStats] = None

        if choice == MenuChoice.PLAY:
            try:
                piece = self.session.play_piece(self.queue)
            except QueueError as e:
                error = e
        elif choice == MenuChoice.INSERT:
            try:
                piece = self.session.insert_piece(self.queue)
            except QueueError as e:
                error = e
        elif choice == MenuChoice.QUIT:
            stats = self.session.end_session(self.queue)
            self.state = LoopState.TERMINATED
        else:
            choice = MenuChoice.INVALID
            error = InvalidChoice(raw)

        return StepResult(
            choice=choice,
            state=self.state,
            snapshot=self.queue.snapshot(),
            piece=piece,
            error=error,
            stats=stats,
        )

    def feed(self, text: str) -> StepResult:
        """Parses a raw input line and applies it."""
        return self.step(parse_choice(text), raw=text)
