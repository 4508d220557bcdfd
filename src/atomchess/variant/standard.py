"""Standard chess rules and the base behaviour other rulesets build on."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import chess

from atomchess.variant.base import IllegalMoveError, MovesByOrigin, Variant

if TYPE_CHECKING:
    from atomchess.variant.situation import PlayedMove, Situation

_LOGGER = logging.getLogger(__name__)


def standard_legal_moves(situation: Situation) -> MovesByOrigin:
    """Legal moves under ordinary chess rules, grouped by origin square."""
    by_origin: MovesByOrigin = {}
    for played in situation.played(situation.legal_base_moves()):
        by_origin.setdefault(played.from_sq, []).append(played)
    return by_origin


def find_move(
    legal: MovesByOrigin,
    situation: Situation,
    from_sq: chess.Square,
    to_sq: chess.Square,
    promotion: chess.PieceType | None = None,
) -> PlayedMove:
    """Pick the move matching *from_sq*/*to_sq*/*promotion* out of *legal*.

    A missing promotion role on a promoting move means a queen.
    """
    origin = chess.square_name(from_sq)
    piece = situation.board.piece_at(from_sq)
    if piece is None:
        raise _rejected(f"No piece on {origin}")
    if piece.color != situation.color:
        raise _rejected(f"Not {chess.COLOR_NAMES[situation.color]}'s piece on {origin}")

    candidates = [mv for mv in legal.get(from_sq, ()) if mv.to_sq == to_sq]
    if not candidates:
        raise _rejected(
            f"Piece on {origin} cannot move to {chess.square_name(to_sq)}"
        )

    wanted = promotion
    if wanted is None and candidates[0].promotion is not None:
        wanted = chess.QUEEN
    for mv in candidates:
        if mv.promotion == wanted:
            return mv
    raise _rejected(
        f"Piece on {origin} cannot promote to "
        f"{chess.piece_name(promotion) if promotion is not None else 'nothing'}"
    )


def _rejected(reason: str) -> IllegalMoveError:
    _LOGGER.debug("Rejected move: %s", reason)
    return IllegalMoveError(reason)


class Standard(Variant):
    """Ordinary chess."""

    id = 1
    key = "standard"
    name = "Standard"
    short_name = "Std"
    title = "Standard rules of chess (FIDE)"

    def legal_moves(self, situation: Situation) -> MovesByOrigin:
        return standard_legal_moves(situation)

    def apply_move(
        self,
        situation: Situation,
        from_sq: chess.Square,
        to_sq: chess.Square,
        promotion: chess.PieceType | None = None,
    ) -> PlayedMove:
        return find_move(
            self.legal_moves(situation), situation, from_sq, to_sq, promotion
        )

    def is_special_draw(self, situation: Situation) -> bool:
        return False

    def is_special_end(self, situation: Situation) -> bool:
        return False

    @property
    def draws_on_insufficient_material(self) -> bool:
        return True
