"""Pluggable rulesets: standard chess and the atomic overlay."""

from atomchess.variant.atomic import Atomic, explode
from atomchess.variant.base import IllegalMoveError, MovesByOrigin, Variant
from atomchess.variant.registry import ALL, by_id, by_key, default
from atomchess.variant.situation import Actor, PlayedMove, Situation
from atomchess.variant.standard import Standard

__all__ = [
    "ALL",
    "Actor",
    "Atomic",
    "IllegalMoveError",
    "MovesByOrigin",
    "PlayedMove",
    "Situation",
    "Standard",
    "Variant",
    "by_id",
    "by_key",
    "default",
    "explode",
]
