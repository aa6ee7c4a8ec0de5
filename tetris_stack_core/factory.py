from __future__ import annotations

import random
import time
from typing import Optional, Sequence

from .config import debug_log
from .piece import Kind, Piece, PIECE_KINDS


class PieceFactory:
    """Creates pieces of a random kind, numbered from 0 upward.

    The id counter belongs to the factory and is never reset; a piece that
    has been played keeps its id retired for good.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        kinds: Sequence[Kind] = PIECE_KINDS,
        rng: Optional[random.Random] = None,
    ):
        if not kinds:
            raise ValueError('at least one piece kind is required')
        # Seeded once; wall clock when no seed is given.
        self._rng = rng or random.Random(seed if seed is not None else time.time_ns())
        self._kinds = tuple(kinds)
        self._next_id = 0

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def kinds(self) -> tuple:
        return self._kinds

    def create_piece(self) -> Piece:
        piece = Piece(kind=self._rng.choice(self._kinds), id=self._next_id)
        self._next_id += 1
        debug_log('factory', f"created {piece.label()}")
        return piece
