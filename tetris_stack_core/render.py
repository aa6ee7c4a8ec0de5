from __future__ import annotations

import os
from typing import List, Sequence, Tuple

from .errors import QueueEmpty, QueueFull
from .menu import StepResult
from .piece import Piece
from .session import SessionStats

RULE = "=" * 52


def _center(text: str) -> str:
    return text.center(len(RULE)).rstrip()


def header() -> str:
    return "\n".join([
        "",
        RULE,
        _center("TETRIS STACK - PIECE QUEUE"),
        RULE,
    ])


def queue_view(snapshot: Sequence[Piece], capacity: int) -> str:
    """Renders the queue head-first with NEXT/LAST markers under the ends."""
    lines: List[str] = ["", "--- PIECE QUEUE ---"]
    if not snapshot:
        lines.append("")
        lines.append("[!] The queue is empty!")
        lines.append("    Insert new pieces to keep playing.")
        return "\n".join(lines)

    labels = [p.label() for p in snapshot]
    row = " ".join(labels)
    lines.append("")
    lines.append(f"Current queue ({len(snapshot)}/{capacity} pieces):")
    lines.append("")
    lines.append(row)

    first_mid = len(labels[0]) // 2
    last_mid = len(row) - len(labels[-1]) + len(labels[-1]) // 2
    if len(labels) == 1:
        lines.append(_overlay((first_mid, "^")))
        lines.append(_overlay((first_mid, "NEXT")))
    else:
        lines.append(_overlay((first_mid, "^"), (last_mid, "^")))
        lines.append(_overlay((first_mid, "NEXT"), (last_mid, "LAST")))
    return "\n".join(lines)


def _overlay(*items: Tuple[int, str]) -> str:
    """Places each text centered on its column, left to right."""
    chars: List[str] = []
    for col, text in items:
        start = max(0, col - len(text) // 2)
        end = start + len(text)
        if len(chars) < end:
            chars.extend(" " * (end - len(chars)))
        chars[start:end] = text
    return "".join(chars)


def menu() -> str:
    return "\n".join([
        "",
        RULE,
        _center("ACTIONS"),
        RULE,
        "  [1] Play piece (take from the front)",
        "  [2] Insert new piece (add to the back)",
        "  [0] Quit",
        RULE,
    ])


MENU_PROMPT = "Choose an option: "


def initial_fill_report(snapshot: Sequence[Piece]) -> str:
    lines = ["", "[*] Generating the initial queue...", ""]
    for p in snapshot:
        lines.append(f"    Piece generated: {p.label()}")
    lines.append("")
    lines.append("[+] Initial queue complete!")
    return "\n".join(lines)


def play_report(result: StepResult) -> str:
    lines = ["", "--- PLAY PIECE ---", ""]
    if result.piece is not None:
        lines.append("[+] Piece played!")
        lines.append("")
        lines.append(f"    Kind: [{result.piece.kind}]")
        lines.append(f"    ID..: {result.piece.id}")
        lines.append("")
        lines.append("    The piece was placed on the board!")
    elif isinstance(result.error, QueueEmpty):
        lines.append("[X] Error! The queue is empty.")
        lines.append("    Insert new pieces before playing.")
    return "\n".join(lines)


def insert_report(result: StepResult) -> str:
    lines = ["", "--- INSERT NEW PIECE ---", ""]
    if result.piece is not None:
        lines.append("[*] Generating a new piece...")
        lines.append("")
        lines.append(f"    Kind: [{result.piece.kind}]")
        lines.append(f"    ID..: {result.piece.id}")
        lines.append("")
        lines.append("[+] Piece added to the back of the queue!")
    elif isinstance(result.error, QueueFull):
        lines.append("[X] Error! The queue is full.")
        lines.append("    Play some pieces before adding new ones.")
    return "\n".join(lines)


def invalid_choice_report() -> str:
    return "\n[X] Invalid option! Try again."


def farewell(stats: SessionStats) -> str:
    return "\n".join([
        "",
        RULE,
        "  Thanks for playing Tetris Stack!",
        "  See you next game!",
        RULE,
        "",
        "  Session statistics:",
        f"  - Total pieces generated: {stats.total_pieces_generated}",
        f"  - Pieces left in queue..: {stats.remaining_in_queue}",
        "",
        RULE,
        "",
    ])


def clear_screen(enabled: bool = True) -> None:
    if not enabled:
        return
    os.system('cls' if os.name == 'nt' else 'clear')


def pause(enabled: bool = True) -> None:
    if not enabled:
        return
    try:
        input("\nPress ENTER to continue...")
    except EOFError:
        pass
