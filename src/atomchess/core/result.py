"""Game outcome as reported by the rulesets."""

from __future__ import annotations

from enum import IntEnum

import chess


class GameResult(IntEnum):
    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: chess.Color) -> GameResult:
        return cls.WHITE_WINS if color == chess.WHITE else cls.BLACK_WINS
