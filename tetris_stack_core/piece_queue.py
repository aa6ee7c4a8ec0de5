from __future__ import annotations

from typing import List, Optional, Tuple, cast

from .config import QUEUE_CAPACITY, debug_log
from .errors import QueueEmpty, QueueFull
from .piece import Piece


class PieceQueue:
    """Fixed-capacity circular FIFO of upcoming pieces.

    Occupied slots are always the circular run of length ``count`` that
    starts at ``head``. A rejected enqueue or dequeue leaves the queue
    exactly as it was.
    """

    def __init__(self, capacity: int = QUEUE_CAPACITY):
        if capacity < 1:
            raise ValueError(f'capacity must be a positive integer, got {capacity}')
        self._capacity = capacity
        self._slots: List[Optional[Piece]] = [None] * capacity
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._count

    @property
    def head(self) -> int:
        return self._head

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self._capacity

    def enqueue(self, piece: Piece) -> None:
        """Appends a piece after the current tail."""
        if self.is_full():
            raise QueueFull(self._capacity)
        slot = (self._head + self._count) % self._capacity
        self._slots[slot] = piece
        self._count += 1
        debug_log('queue', f"enqueue {piece.label()} -> slot {slot} (count={self._count})")

    def dequeue(self) -> Piece:
        """Removes and returns the piece at the head."""
        if self.is_empty():
            raise QueueEmpty()
        slot = self._head
        piece = cast(Piece, self._slots[slot])
        self._slots[slot] = None
        self._head = (self._head + 1) % self._capacity
        self._count -= 1
        debug_log('queue', f"dequeue {piece.label()} <- slot {slot} (count={self._count})")
        return piece

    def snapshot(self) -> Tuple[Piece, ...]:
        """Pieces in FIFO order, head first. Does not touch the queue."""
        out: List[Piece] = []
        for i in range(self._count):
            out.append(cast(Piece, self._slots[(self._head + i) % self._capacity]))
        return tuple(out)

    def __repr__(self) -> str:
        labels = ' '.join(p.label() for p in self.snapshot())
        return f"PieceQueue({self._count}/{self._capacity}: {labels})"
