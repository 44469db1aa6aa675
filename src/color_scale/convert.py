from __future__ import annotations

import logging
import math
import string
from typing import NamedTuple

import numpy as np
from coloraide import Color as _Base
from coloraide.spaces.lab_d65 import LabD65
from coloraide.spaces.lch_d65 import LChD65

log = logging.getLogger(__name__)


class Color(_Base):
    """Project-local Color class with the D65 Lab/LCh spaces pinned."""


Color.register([LabD65(), LChD65()], overwrite=True)

Hex = str

MIX_SPACE = "lch-d65"  # CIE LCh (D65), polar — scale interpolation
NAME_SPACE = "lab-d65"  # CIE Lab (D65), Cartesian — naming distance
POLAR_SPACE = "oklch"  # display / export

FIT_HEX = {"method": "raytrace"}  # consistent gamut-fit for hex output

# below this OKLCH chroma the hue is undefined
ACHROMATIC_CHROMA = 1e-4


class InvalidColor(ValueError):
    """Raised for anything that is not a 3- or 6-digit hex color."""


class OKLCh(NamedTuple):
    l: float
    c: float
    h: float  # nan when achromatic


def parse(text: str) -> Hex:
    """Normalize to '#rrggbb'; accept 3- or 6-digit hex only."""
    if not isinstance(text, str):
        raise InvalidColor(f"expected a hex string, got {type(text).__name__}")
    raw = text.strip()
    if raw.startswith("#"):
        raw = raw[1:]
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise InvalidColor(f"invalid hex: {text!r}")
    return "#" + raw.lower()


def display_hex(color: str) -> str:
    return parse(color).upper()


def to_polar(color: str) -> OKLCh:
    """sRGB hex → OKLCH. Hue is nan for achromatic colors."""
    l, c, h = Color(parse(color)).convert(POLAR_SPACE).coords()
    l, c, h = float(l), float(c), float(h)
    if math.isnan(c):
        c = 0.0
    if c < ACHROMATIC_CHROMA or math.isnan(h):
        h = math.nan
    else:
        h = h % 360.0
    return OKLCh(l, c, h)


def from_polar(l: float, c: float, h: float) -> Hex:
    """OKLCH → sRGB hex, gamut-fit when needed."""
    hue = 0.0 if math.isnan(h) else float(h)
    return (
        Color(POLAR_SPACE, [float(l), float(c), hue])
        .convert("srgb")
        .to_string(hex=True, fit=FIT_HEX)
    )


def mix(a: str, b: str, weight_of_b: float, *, space: str = MIX_SPACE) -> Hex:
    """Interpolate a → b in a polar space, taking the shorter hue arc."""
    hex_a, hex_b = parse(a), parse(b)
    w = 0.0 if weight_of_b <= 0.0 else 1.0 if weight_of_b >= 1.0 else weight_of_b
    if w == 0.0:
        return hex_a
    if w == 1.0:
        return hex_b
    mixed = Color(hex_a).mix(hex_b, w, space=space, hue="shorter")
    return mixed.convert("srgb").to_string(hex=True, fit=FIT_HEX)


def lab(color: str) -> np.ndarray:
    """Cartesian coordinates used for perceptual distance."""
    coords = Color(parse(color)).convert(NAME_SPACE).coords()
    return np.asarray(coords, dtype=np.float64)


def perceptual_distance(a: str, b: str) -> float:
    return float(np.linalg.norm(lab(a) - lab(b)))


def format_number(x: float) -> str:
    """Fixed three decimals; nan renders as 0.000."""
    if math.isnan(x):
        return "0.000"
    s = f"{x:.3f}"
    return "0.000" if s == "-0.000" else s


__all__ = [
    "ACHROMATIC_CHROMA",
    "FIT_HEX",
    "Hex",
    "InvalidColor",
    "MIX_SPACE",
    "NAME_SPACE",
    "OKLCh",
    "POLAR_SPACE",
    "display_hex",
    "format_number",
    "from_polar",
    "lab",
    "mix",
    "parse",
    "perceptual_distance",
    "to_polar",
]
