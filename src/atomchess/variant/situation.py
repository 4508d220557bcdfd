"""Per-ply snapshots consumed by the variant rulesets.

A :class:`Situation` freezes a :class:`chess.Board` for the duration of one
legality/application pass. :class:`PlayedMove` is a candidate move together
with the piece placement it leaves behind.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

import chess


@dataclass(frozen=True, slots=True)
class PlayedMove:
    """A move as the base engine would play it, with the resulting placement.

    ``after`` only reflects what ordinary chess does to the board; rule
    overlays swap it for their own placement through :meth:`with_after`.
    """

    move: chess.Move
    piece: chess.Piece
    captures: bool
    after: chess.BaseBoard

    @property
    def from_sq(self) -> chess.Square:
        return self.move.from_square

    @property
    def to_sq(self) -> chess.Square:
        return self.move.to_square

    @property
    def promotion(self) -> chess.PieceType | None:
        return self.move.promotion

    def with_after(self, board: chess.BaseBoard) -> PlayedMove:
        return replace(self, after=board)

    def __str__(self) -> str:
        return self.move.uci()


@dataclass(frozen=True, slots=True)
class Actor:
    """A piece on its square with its candidate moves."""

    square: chess.Square
    piece: chess.Piece
    moves: tuple[PlayedMove, ...]


def _placement(board: chess.BaseBoard) -> chess.BaseBoard:
    return chess.BaseBoard(board.board_fen())


class Situation:
    """Immutable snapshot: board, side to move and whether it is in check."""

    __slots__ = ("_board", "_check")

    def __init__(self, board: chess.Board) -> None:
        self._board = board.copy(stack=False)
        self._check = self._board.is_check()

    @classmethod
    def from_fen(cls, fen: str) -> Situation:
        return cls(chess.Board(fen))

    # -- Accessors ----------------------------------------------------------

    @property
    def board(self) -> chess.Board:
        """Current position. Treat as read-only."""
        return self._board

    @property
    def color(self) -> chess.Color:
        """Side to move."""
        return self._board.turn

    @property
    def check(self) -> bool:
        return self._check

    @property
    def king_square(self) -> chess.Square | None:
        return self._board.king(self.color)

    @property
    def fen(self) -> str:
        return self._board.fen()

    # -- Move construction --------------------------------------------------

    def _targets(self) -> chess.Bitboard:
        # A king leaves the board only in an explosion, never by capture.
        return chess.BB_ALL & ~self._board.kings

    def legal_base_moves(self) -> list[chess.Move]:
        """Standard legal moves; king safety judged by ordinary check rules."""
        return list(self._board.generate_legal_moves(to_mask=self._targets()))

    def played(self, moves: Iterable[chess.Move]) -> list[PlayedMove]:
        """Play each of *moves* on a scratch copy and record the result."""
        scratch = self._board.copy(stack=False)
        result: list[PlayedMove] = []
        for move in moves:
            piece = scratch.piece_at(move.from_square)
            if piece is None:
                raise ValueError(f"No piece on {chess.square_name(move.from_square)}")
            captures = scratch.is_capture(move)
            scratch.push(move)
            result.append(PlayedMove(move, piece, captures, _placement(scratch)))
            scratch.pop()
        return result

    def actors(self) -> list[Actor]:
        """Every piece of the side to move with its pseudo-legal moves.

        These moves ignore whether the mover's king is left in check.
        """
        board = self._board
        targets = self._targets()
        actors: list[Actor] = []
        for sq in chess.SquareSet(board.occupied_co[self.color]):
            piece = board.piece_at(sq)
            assert piece is not None
            moves = list(
                board.generate_pseudo_legal_moves(
                    from_mask=chess.BB_SQUARES[sq], to_mask=targets
                )
            )
            actors.append(Actor(sq, piece, tuple(self.played(moves))))
        return actors

    def play(self, played: PlayedMove) -> Situation:
        """The situation after *played*, with the opponent to move.

        Clocks and en passant follow ordinary chess. The placement comes from
        ``played.after``, and castling rights whose king or rook is gone are
        dropped.
        """
        board = self._board.copy(stack=False)
        board.push(played.move)
        board.set_piece_map(played.after.piece_map())
        board.castling_rights = board.clean_castling_rights()
        return Situation(board)

    def __repr__(self) -> str:
        return f"Situation({self.fen!r})"
