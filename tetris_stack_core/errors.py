from __future__ import annotations


class StackError(Exception):
    """Base class for recoverable Tetris Stack errors."""


class QueueError(StackError):
    pass


class QueueFull(QueueError):
    """Raised when a piece is enqueued onto a saturated queue."""

    def __init__(self, capacity: int):
        super().__init__(f'queue is full ({capacity}/{capacity} pieces)')
        self.capacity = capacity


class QueueEmpty(QueueError):
    """Raised when a piece is dequeued from a drained queue."""

    def __init__(self) -> None:
        super().__init__('queue is empty')


class InvalidChoice(StackError, ValueError):
    """Menu input that is not one of the known option codes."""

    def __init__(self, raw: str):
        super().__init__(f'invalid menu choice: {raw!r}')
        self.raw = raw
