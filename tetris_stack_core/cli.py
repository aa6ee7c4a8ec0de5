from __future__ import annotations

import argparse
import json
from typing import List, Optional

from . import render
from .codec import queue_to_json, stats_to_json
from .config import StackConfig, debug_log, load_config, set_debug
from .factory import PieceFactory
from .menu import MenuChoice, MenuLoop
from .session import Session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Tetris Stack: upcoming piece queue simulator')
    parser.add_argument('--capacity', type=int, default=None, help='Queue capacity (default 5)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for piece kinds')
    parser.add_argument('--no-clear', action='store_true', help='Do not clear the screen between actions')
    parser.add_argument('--no-pause', action='store_true', help='Do not wait for ENTER after each action')
    parser.add_argument('--debug', action='store_true', help='Trace queue operations to stderr')
    parser.add_argument('--json', action='store_true', help='Also print final statistics as JSON')
    return parser


def _read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def run(config: StackConfig) -> None:
    # Traces follow config.debug for this run only.
    previous = set_debug(config.debug)
    try:
        _play(config)
    finally:
        set_debug(previous)


def _play(config: StackConfig) -> None:
    session = Session(PieceFactory(seed=config.seed), capacity=config.capacity)

    render.clear_screen(config.clear_screen)
    print(render.header())
    print("\n[*] Welcome to Tetris Stack!")
    print("\nGetting the game ready...")

    queue = session.initialize()
    print(render.initial_fill_report(queue.snapshot()))
    debug_log('cli', f"initial queue {json.dumps(queue_to_json(queue))}")
    render.pause(config.pause)

    loop = MenuLoop(session, queue)
    while loop.running:
        render.clear_screen(config.clear_screen)
        print(render.header())
        print(render.queue_view(queue.snapshot(), queue.capacity))
        print(render.menu())
        text = _read_line(render.MENU_PROMPT)
        if text is None:
            # End of input quits like option 0.
            result = loop.step(MenuChoice.QUIT)
        else:
            result = loop.feed(text)

        if result.stats is not None:
            render.clear_screen(config.clear_screen)
            print(render.header())
            print(render.farewell(result.stats))
            if config.json_stats:
                print(json.dumps(stats_to_json(result.stats)))
        elif result.choice == MenuChoice.INVALID:
            print(render.invalid_choice_report())
            render.pause(config.pause)
        else:
            render.clear_screen(config.clear_screen)
            print(render.header())
            if result.choice == MenuChoice.PLAY:
                print(render.play_report(result))
            else:
                print(render.insert_report(result))
            print(render.queue_view(result.snapshot, queue.capacity))
            render.pause(config.pause)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args)
    except ValueError as e:
        parser.error(str(e))
    run(config)
