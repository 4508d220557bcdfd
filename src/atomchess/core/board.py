"""Placement queries and copy-on-write edits over python-chess boards.

Boards handed around by the rulesets are :class:`chess.BaseBoard` values.
Nothing here mutates its argument.
"""

from __future__ import annotations

from collections.abc import Iterable

import chess


def surrounding_squares(sq: chess.Square) -> chess.SquareSet:
    """The up-to-8 squares adjacent to *sq*, diagonals included.

    Corners have 3 neighbours and edges 5. *sq* itself is never included.
    """
    return chess.SquareSet(chess.BB_KING_ATTACKS[sq])


def without(board: chess.BaseBoard, squares: Iterable[chess.Square]) -> chess.BaseBoard:
    """Copy of *board* with every square in *squares* emptied."""
    result = board.copy()
    for sq in squares:
        result.remove_piece_at(sq)
    return result


def king_count(board: chess.BaseBoard) -> int:
    return chess.popcount(board.kings)


def _single_shade(bishops: chess.Bitboard) -> chess.Bitboard:
    """The square colour holding all of *bishops*, or empty if they are mixed."""
    for shade in (chess.BB_LIGHT_SQUARES, chess.BB_DARK_SQUARES):
        if bishops and not bishops & ~shade:
            return shade
    return chess.BB_EMPTY


def bishops_on_opposite_colors(board: chess.BaseBoard) -> bool:
    """Only bishops besides the kings, each side's on one square colour,
    the two sides' colours different.

    Such bishops can never attack one another.
    """
    if board.occupied & ~(board.kings | board.bishops):
        return False
    white = _single_shade(board.pieces_mask(chess.BISHOP, chess.WHITE))
    black = _single_shade(board.pieces_mask(chess.BISHOP, chess.BLACK))
    return bool(white and black) and white != black
