"""
Tetris Stack core Python package.

Pure-logic pieces of the upcoming-piece queue, kept apart from the console
program so they can be driven and tested without a terminal.
Modules:
- piece.py: Piece, PIECE_KINDS
- factory.py: PieceFactory
- piece_queue.py: PieceQueue (fixed-capacity circular buffer)
- session.py: Session, SessionStats
- menu.py: MenuChoice, MenuLoop (Running/Terminated state machine)
- render.py, cli.py: console presentation
"""
