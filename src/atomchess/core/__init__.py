"""Board-level helpers shared by the rulesets.

Piece placement, move generation, check detection and FEN come from
python-chess. This package adds the few board queries atomic rules need.

Quick start::

    import chess
    from atomchess.core import surrounding_squares, without

    board = chess.BaseBoard()
    blasted = without(board, surrounding_squares(chess.E1))
"""

from atomchess.core.board import (
    bishops_on_opposite_colors,
    king_count,
    surrounding_squares,
    without,
)
from atomchess.core.result import GameResult

__all__ = [
    "GameResult",
    "bishops_on_opposite_colors",
    "king_count",
    "surrounding_squares",
    "without",
]
