"""Atomic chess: every capture explodes.

The capturing piece, the captured piece and every non-pawn piece adjacent
to the capture square leave the board. Exploding the enemy king wins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import chess

from atomchess.core.board import (
    bishops_on_opposite_colors,
    king_count,
    surrounding_squares,
    without,
)
from atomchess.variant.base import MovesByOrigin, Variant
from atomchess.variant.standard import find_move, standard_legal_moves

if TYPE_CHECKING:
    from atomchess.variant.situation import PlayedMove, Situation

_LOGGER = logging.getLogger(__name__)


def merge_moves(base: MovesByOrigin, extra: MovesByOrigin) -> MovesByOrigin:
    """Union of two move mappings, origin by origin.

    A move from *extra* is dropped when *base* already holds one with the
    same destination and promotion.
    """
    merged: MovesByOrigin = {origin: list(moves) for origin, moves in base.items()}
    for origin, moves in extra.items():
        bucket = merged.setdefault(origin, [])
        seen = {(mv.to_sq, mv.promotion) for mv in bucket}
        for mv in moves:
            if (mv.to_sq, mv.promotion) not in seen:
                seen.add((mv.to_sq, mv.promotion))
                bucket.append(mv)
    return merged


def explode(played: PlayedMove) -> PlayedMove:
    """Detonate a capture.

    Non-captures come back unchanged. Pawns standing next to the capture
    square survive; the two pieces on it never do.
    """
    if not played.captures:
        return played

    board = played.after
    blast = chess.SquareSet(chess.BB_SQUARES[played.to_sq])
    blast |= surrounding_squares(played.to_sq) & (board.occupied & ~board.pawns)

    _LOGGER.debug(
        "%s explodes %s",
        played,
        ", ".join(chess.square_name(sq) for sq in blast),
    )
    return played.with_after(without(board, blast))


def insufficient_winning_material(board: chess.BaseBoard) -> bool:
    """One side has a bare king and the other cannot force an explosion.

    A bare king can always shepherd itself away from a single rook, minor
    piece or pawn, but not from a queen.
    """
    white = chess.popcount(board.occupied_co[chess.WHITE])
    black = chess.popcount(board.occupied_co[chess.BLACK])
    if white != 1 and black != 1:
        return False

    if white + black == 2:
        return True
    others = board.occupied & ~board.kings
    return chess.popcount(others) == 1 and not others & board.queens


class Atomic(Variant):
    """Atomic chess overlay on top of standard move generation."""

    id = 7
    key = "atomic"
    name = "Atomic"
    short_name = "Atom"
    title = "Nuke your opponent's king to win."

    def legal_moves(self, situation: Situation) -> MovesByOrigin:
        usual = standard_legal_moves(situation)

        king_sq = situation.king_square
        safe: MovesByOrigin
        if king_sq is None:
            safe = usual
        else:
            # Capturing next to your own king blows it up.
            perimeter = surrounding_squares(king_sq)
            safe = {}
            for origin, moves in usual.items():
                kept = [
                    mv for mv in moves if not mv.captures or mv.to_sq not in perimeter
                ]
                if kept:
                    safe[origin] = kept

        if not situation.check:
            return safe
        # In check, exploding the enemy king is as good as parrying.
        return merge_moves(safe, self._king_threatening_moves(situation))

    def _king_threatening_moves(self, situation: Situation) -> MovesByOrigin:
        """Captures that explode the opponent's king without exploding ours."""
        board = situation.board
        their_king = board.king(not situation.color)
        our_king = situation.king_square
        if their_king is None or our_king is None:
            return {}

        target = surrounding_squares(their_king)
        forbidden = surrounding_squares(our_king)
        threats: MovesByOrigin = {}
        for actor in situation.actors():
            if actor.piece.piece_type == chess.KING:
                continue
            moves = [
                mv
                for mv in actor.moves
                if mv.captures and mv.to_sq in target and mv.to_sq not in forbidden
            ]
            if moves:
                threats[actor.square] = moves

        if threats:
            _LOGGER.debug(
                "%s in check, %d king-threatening moves",
                chess.COLOR_NAMES[situation.color],
                sum(len(moves) for moves in threats.values()),
            )
        return threats

    def apply_move(
        self,
        situation: Situation,
        from_sq: chess.Square,
        to_sq: chess.Square,
        promotion: chess.PieceType | None = None,
    ) -> PlayedMove:
        played = find_move(
            self.legal_moves(situation), situation, from_sq, to_sq, promotion
        )
        return explode(played)

    def is_special_draw(self, situation: Situation) -> bool:
        # Opposite-coloured bishops can never capture each other, so no
        # explosion and no ordinary mate.
        board = situation.board
        return bishops_on_opposite_colors(board) or insufficient_winning_material(board)

    def is_special_end(self, situation: Situation) -> bool:
        """A king has been blown off the board."""
        return king_count(situation.board) != 2

    @property
    def draws_on_insufficient_material(self) -> bool:
        # A lone piece beside a king is often enough to win by explosion.
        return False
