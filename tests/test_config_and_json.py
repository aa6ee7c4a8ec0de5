import argparse
import contextlib
import io
import os
import unittest
from unittest.mock import patch

from game import (
    QUEUE_CAPACITY,
    Piece,
    PieceFactory,
    Session,
    debug_enabled,
    debug_log,
    load_config,
    set_debug,
    piece_to_json,
    queue_to_json,
    stats_to_json,
)

_ENV_KEYS = (
    'TETRIS_STACK_CAPACITY',
    'TETRIS_STACK_SEED',
    'TETRIS_STACK_NO_CLEAR',
    'TETRIS_STACK_NO_PAUSE',
    'TETRIS_STACK_DEBUG',
)


def _clean_env(**overrides):
    env = {k: v for k, v in os.environ.items() if k not in _ENV_KEYS}
    env.update(overrides)
    return patch.dict(os.environ, env, clear=True)


class TestConfig(unittest.TestCase):
    def test_given_no_env_and_no_args_when_loading_then_defaults(self):
        with _clean_env():
            cfg = load_config()
        self.assertEqual(cfg.capacity, QUEUE_CAPACITY)
        self.assertIsNone(cfg.seed)
        self.assertTrue(cfg.clear_screen)
        self.assertTrue(cfg.pause)
        self.assertFalse(cfg.debug)
        self.assertFalse(cfg.json_stats)

    def test_given_env_vars_when_loading_then_applied(self):
        with _clean_env(TETRIS_STACK_CAPACITY='7', TETRIS_STACK_SEED='42',
                        TETRIS_STACK_NO_CLEAR='yes', TETRIS_STACK_DEBUG='on'):
            cfg = load_config()
        self.assertEqual(cfg.capacity, 7)
        self.assertEqual(cfg.seed, 42)
        self.assertFalse(cfg.clear_screen)
        self.assertTrue(cfg.pause)
        self.assertTrue(cfg.debug)

    def test_given_args_and_env_when_loading_then_args_win(self):
        args = argparse.Namespace(capacity=3, seed=1, no_clear=False, no_pause=True, debug=False, json=True)
        with _clean_env(TETRIS_STACK_CAPACITY='7', TETRIS_STACK_SEED='42'):
            cfg = load_config(args)
        self.assertEqual(cfg.capacity, 3)
        self.assertEqual(cfg.seed, 1)
        self.assertFalse(cfg.pause)
        self.assertTrue(cfg.json_stats)

    def test_given_bad_env_values_when_loading_then_value_error(self):
        with _clean_env(TETRIS_STACK_CAPACITY='five'):
            with self.assertRaises(ValueError):
                load_config()
        with _clean_env(TETRIS_STACK_CAPACITY='0'):
            with self.assertRaises(ValueError):
                load_config()

    def test_given_debug_switch_when_logging_then_tagged_line_on_stderr(self):
        err = io.StringIO()
        with _clean_env(TETRIS_STACK_DEBUG='1'), contextlib.redirect_stderr(err):
            debug_log('queue', 'hello')
        self.assertEqual(err.getvalue(), '[queue] hello\n')

        err2 = io.StringIO()
        with _clean_env(), contextlib.redirect_stderr(err2):
            debug_log('queue', 'hello')
        self.assertEqual(err2.getvalue(), '')

    def test_given_debug_switch_when_enqueueing_then_queue_traces(self):
        err = io.StringIO()
        with _clean_env(TETRIS_STACK_DEBUG='1'), contextlib.redirect_stderr(err):
            Session(PieceFactory(seed=0), capacity=2).initialize()
        lines = err.getvalue().splitlines()
        self.assertEqual(sum(1 for ln in lines if ln.startswith('[factory] created')), 2)
        self.assertEqual(sum(1 for ln in lines if ln.startswith('[queue] enqueue')), 2)

    def test_given_explicit_switch_when_logging_then_overrides_env_and_restores(self):
        err = io.StringIO()
        with _clean_env(TETRIS_STACK_DEBUG='1'), contextlib.redirect_stderr(err):
            previous = set_debug(False)
            try:
                self.assertFalse(debug_enabled())
                debug_log('queue', 'muted')
            finally:
                set_debug(previous)
            self.assertTrue(debug_enabled())
        self.assertEqual(err.getvalue(), '')
        self.assertIsNone(previous)


class TestJson(unittest.TestCase):
    def test_given_piece_when_to_json_then_kind_and_id(self):
        obj = piece_to_json(Piece(kind='L', id=17))
        self.assertEqual(obj, {"kind": "L", "id": 17})

    def test_given_session_when_encoding_queue_and_stats_then_expected_shape(self):
        session = Session(PieceFactory(seed=3), capacity=4)
        q = session.initialize()
        session.play_piece(q)
        qj = queue_to_json(q)
        self.assertEqual(qj["capacity"], 4)
        self.assertEqual(qj["count"], 3)
        self.assertEqual([p["id"] for p in qj["pieces"]], [1, 2, 3])
        sj = stats_to_json(session.end_session(q))
        self.assertEqual(sj, {"totalPiecesGenerated": 4, "remainingInQueue": 3})


if __name__ == '__main__':
    unittest.main(verbosity=2)
