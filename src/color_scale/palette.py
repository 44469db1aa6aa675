from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .convert import Hex
from .names import name
from .scale import BASE_INDEX, ColorScale, generate, is_complete

DEFAULT_PRIMARY: Hex = "#6366f1"
DEFAULT_SECONDARY: Hex = "#f59e0b"


@dataclass(frozen=True)
class Palette:
    base: str
    name: str
    scale: ColorScale

    @property
    def ok(self) -> bool:
        return is_complete(self.scale)


def build_palette(color: str) -> Palette:
    """Scale plus the name of its 500 step (or of the raw input if no scale)."""
    scale = generate(color)
    label = name(scale[BASE_INDEX].hex if is_complete(scale) else color)
    return Palette(base=color, name=label, scale=scale)


def random_hex(rng: Optional[np.random.Generator] = None) -> Hex:
    rng = rng if rng is not None else np.random.default_rng()
    r, g, b = (int(v) for v in rng.integers(0, 256, size=3))
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = [
    "DEFAULT_PRIMARY",
    "DEFAULT_SECONDARY",
    "Palette",
    "build_palette",
    "random_hex",
]
