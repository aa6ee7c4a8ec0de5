from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import QUEUE_CAPACITY
from .errors import QueueFull
from .factory import PieceFactory
from .piece import Piece
from .piece_queue import PieceQueue


@dataclass(frozen=True)
class SessionStats:
    """End-of-session figures shown on quit."""
    total_pieces_generated: int
    remaining_in_queue: int


class Session:
    """Orchestrates the factory and the queue for the menu actions."""

    def __init__(self, factory: Optional[PieceFactory] = None, capacity: int = QUEUE_CAPACITY):
        self.factory = factory or PieceFactory()
        self.capacity = capacity

    def initialize(self) -> PieceQueue:
        """Creates an empty queue and fills it to capacity."""
        queue = PieceQueue(self.capacity)
        for _ in range(self.capacity):
            queue.enqueue(self.factory.create_piece())
        return queue

    def play_piece(self, queue: PieceQueue) -> Piece:
        # QueueEmpty propagates to the caller.
        return queue.dequeue()

    def insert_piece(self, queue: PieceQueue) -> Piece:
        # Checked before creating, so a rejected insert burns no id.
        if queue.is_full():
            raise QueueFull(queue.capacity)
        piece = self.factory.create_piece()
        queue.enqueue(piece)
        return piece

    def end_session(self, queue: PieceQueue) -> SessionStats:
        return SessionStats(
            total_pieces_generated=self.factory.next_id,
            remaining_in_queue=queue.count,
        )
