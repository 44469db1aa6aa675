from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .convert import Hex, OKLCh, mix, parse, to_polar

log = logging.getLogger(__name__)

# Tailwind-style 10-step scale labels
SCALE_STEPS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)
BASE_INDEX = 5

WHITE: Hex = "#ffffff"
BLACK: Hex = "#000000"

# (anchor, weight of the base color) per step; None marks the base itself.
# Bump MIX_TABLE_VERSION whenever a weight is retuned.
MIX_TABLE_VERSION = 1
MIX_TABLE: Tuple[Tuple[Optional[Hex], float], ...] = (
    (WHITE, 0.05),
    (WHITE, 0.2),
    (WHITE, 0.4),
    (WHITE, 0.6),
    (WHITE, 0.8),
    (None, 1.0),
    (BLACK, 0.8),
    (BLACK, 0.6),
    (BLACK, 0.4),
    (BLACK, 0.2),
)


@dataclass(frozen=True)
class ScaleStep:
    step: int
    hex: Hex
    polar: OKLCh


ColorScale = Tuple[ScaleStep, ...]


def generate(base: str) -> ColorScale:
    """
    Derive the 50–900 scale for `base`.
    Returns an empty tuple if anything fails; a partial scale is never produced.
    """
    try:
        seed = parse(base)
        hexes = [
            seed if anchor is None else mix(anchor, seed, weight)
            for anchor, weight in MIX_TABLE
        ]
        return tuple(
            ScaleStep(step, hex_i, to_polar(hex_i))
            for step, hex_i in zip(SCALE_STEPS, hexes)
        )
    except Exception as exc:
        log.warning("Scale generation failed for %r: %s", base, exc)
        return ()


def is_complete(scale: ColorScale) -> bool:
    return len(scale) == len(SCALE_STEPS)


__all__ = [
    "BASE_INDEX",
    "BLACK",
    "ColorScale",
    "MIX_TABLE",
    "MIX_TABLE_VERSION",
    "SCALE_STEPS",
    "ScaleStep",
    "WHITE",
    "generate",
    "is_complete",
]
