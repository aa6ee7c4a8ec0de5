from __future__ import annotations

from typing import Any, Dict

from .piece import Piece
from .piece_queue import PieceQueue
from .session import SessionStats


def piece_to_json(p: Piece) -> Dict[str, Any]:
    return {"kind": str(p.kind), "id": int(p.id)}


def queue_to_json(q: PieceQueue) -> Dict[str, Any]:
    return {
        "capacity": int(q.capacity),
        "count": int(q.count),
        "pieces": [piece_to_json(p) for p in q.snapshot()],
    }


def stats_to_json(s: SessionStats) -> Dict[str, Any]:
    return {
        "totalPiecesGenerated": int(s.total_pieces_generated),
        "remainingInQueue": int(s.remaining_in_queue),
    }
