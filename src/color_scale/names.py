from __future__ import annotations

import logging
from functools import lru_cache

import numpy as np

from .convert import lab
from .named_colors import NAMED_COLORS

log = logging.getLogger(__name__)

FALLBACK_NAME = "Custom"


@lru_cache(None)
def _reference_lab() -> np.ndarray:
    # N×3 Lab table for the dictionary, built once; read-only afterwards
    table = np.stack([lab(hex_) for hex_, _ in NAMED_COLORS])
    table.setflags(write=False)
    return table


def nearest(color: str) -> tuple[str, float]:
    """
    Closest dictionary name and its distance. Ties go to the earlier entry
    (np.argmin returns the first minimum). Raises InvalidColor.
    """
    query = lab(color)
    dist = np.linalg.norm(_reference_lab() - query, axis=1)
    i = int(np.argmin(dist))
    return NAMED_COLORS[i][1], float(dist[i])


def name(color: str) -> str:
    """Display name for `color`; never raises."""
    try:
        return nearest(color)[0]
    except Exception as exc:
        log.warning("Color naming failed for %r: %s", color, exc)
        return FALLBACK_NAME


__all__ = ["FALLBACK_NAME", "name", "nearest"]
