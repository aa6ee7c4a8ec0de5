from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Kind = str  # 'I', 'O', 'T', 'L'

PIECE_KINDS: Tuple[Kind, ...] = ('I', 'O', 'T', 'L')


@dataclass(frozen=True)
class Piece:
    """A single upcoming piece: its kind and the id it was created with."""
    kind: Kind
    id: int

    def label(self) -> str:
        return f"[{self.kind} {self.id}]"
