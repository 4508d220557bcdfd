"""Lookup of the available rulesets.

Variants are stateless, so one shared instance of each is enough.
"""

from __future__ import annotations

import logging
import os
from typing import Final

from atomchess.variant.atomic import Atomic
from atomchess.variant.base import Variant
from atomchess.variant.standard import Standard

_LOGGER = logging.getLogger(__name__)

ENV_VARIANT: Final = "ATOMCHESS_VARIANT"
DEFAULT_KEY: Final = Standard.key

ALL: tuple[Variant, ...] = (Standard(), Atomic())

_BY_KEY: dict[str, Variant] = {v.key: v for v in ALL}
_BY_ID: dict[int, Variant] = {v.id: v for v in ALL}


def by_key(key: str) -> Variant:
    try:
        return _BY_KEY[key.lower()]
    except KeyError:
        raise KeyError(f"Unknown variant: {key!r}") from None


def by_id(variant_id: int) -> Variant:
    try:
        return _BY_ID[variant_id]
    except KeyError:
        raise KeyError(f"Unknown variant id: {variant_id!r}") from None


def default() -> Variant:
    """Variant named by ``$ATOMCHESS_VARIANT``, else standard chess."""
    key = os.environ.get(ENV_VARIANT, DEFAULT_KEY)
    try:
        return by_key(key)
    except KeyError:
        _LOGGER.warning(
            "Ignoring %s=%r: unknown variant, using %s", ENV_VARIANT, key, DEFAULT_KEY
        )
        return _BY_KEY[DEFAULT_KEY]
