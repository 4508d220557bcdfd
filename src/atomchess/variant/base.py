"""Abstract ruleset interface.

The game layer holds one :class:`Variant` instance, chosen at setup time,
and routes every legality question through it. Each ruleset is a separate
implementation of this interface; shared base behaviour lives in
:mod:`atomchess.variant.standard` as plain functions that rulesets compose.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, TypeAlias

import chess

from atomchess.core.result import GameResult

if TYPE_CHECKING:
    from atomchess.variant.situation import PlayedMove, Situation

MovesByOrigin: TypeAlias = "dict[chess.Square, list[PlayedMove]]"


class IllegalMoveError(ValueError):
    """Requested move is not in the ruleset's legal-move mapping."""


class Variant(ABC):
    """Capability set every ruleset implements."""

    id: ClassVar[int]
    key: ClassVar[str]
    name: ClassVar[str]
    short_name: ClassVar[str]
    title: ClassVar[str]

    @abstractmethod
    def legal_moves(self, situation: Situation) -> MovesByOrigin:
        """Legal moves for the side to move, grouped by origin square."""

    @abstractmethod
    def apply_move(
        self,
        situation: Situation,
        from_sq: chess.Square,
        to_sq: chess.Square,
        promotion: chess.PieceType | None = None,
    ) -> PlayedMove:
        """Play a legal move.

        Raises:
            IllegalMoveError: no legal move matches *from_sq*/*to_sq*/*promotion*.
        """

    @abstractmethod
    def is_special_draw(self, situation: Situation) -> bool:
        """Ruleset-specific draw, checked once per ply."""

    @abstractmethod
    def is_special_end(self, situation: Situation) -> bool:
        """Ruleset-specific game end, checked once per ply."""

    @property
    @abstractmethod
    def draws_on_insufficient_material(self) -> bool:
        """Whether the standard insufficient-material draw applies."""

    # -- Shared behaviour ---------------------------------------------------

    def game_result(self, situation: Situation) -> GameResult:
        """Result of the game at *situation* under this ruleset."""
        board = situation.board
        if self.is_special_end(situation):
            survivors = [c for c in chess.COLORS if board.king(c) is not None]
            if len(survivors) == 1:
                return GameResult.win_for(survivors[0])
            return GameResult.DRAW

        if not any(self.legal_moves(situation).values()):
            if situation.check:
                return GameResult.win_for(not situation.color)
            return GameResult.DRAW  # stalemate

        if self.is_special_draw(situation):
            return GameResult.DRAW

        if self.draws_on_insufficient_material and board.is_insufficient_material():
            return GameResult.DRAW

        if board.is_seventyfive_moves():
            return GameResult.DRAW

        return GameResult.IN_PROGRESS

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"
