from __future__ import annotations

import re
from typing import Iterable, Sequence, Tuple

from .convert import OKLCh, format_number, to_polar
from .scale import SCALE_STEPS, ScaleStep

VAR_PREFIX = "--color-"
INDENT = "  "

_WS = re.compile(r"\s+")


class IncompleteScale(ValueError):
    """Export was attempted on a scale that is not exactly 10 steps."""


def token_name(name: str) -> str:
    """'Azure Radiance' → 'azure-radiance'."""
    return _WS.sub("-", name.lower())


def format_oklch(polar: OKLCh) -> str:
    l, c, h = polar
    return f"oklch({format_number(l)} {format_number(c)} {format_number(h)})"


def export(scale: Sequence[ScaleStep], name: str) -> str:
    """One `--color-<token>-<step>: oklch(...);` line per step, 50 → 900."""
    if len(scale) != len(SCALE_STEPS):
        raise IncompleteScale(
            f"scale has {len(scale)} steps, expected {len(SCALE_STEPS)}"
        )
    token = token_name(name)
    lines = []
    for label, step in zip(SCALE_STEPS, scale):
        # re-derive from hex so precision never depends on how the scale was built
        value = format_oklch(to_polar(step.hex))
        lines.append(f"{INDENT}{VAR_PREFIX}{token}-{label}: {value};\n")
    return "".join(lines)


def export_theme(palettes: Iterable[Tuple[Sequence[ScaleStep], str]]) -> str:
    """Wrap the declarations of every (scale, name) pair in a `@theme` block."""
    body = "".join(export(scale, name) for scale, name in palettes)
    return "@theme {\n" + body + "}"


__all__ = [
    "INDENT",
    "IncompleteScale",
    "VAR_PREFIX",
    "export",
    "export_theme",
    "format_oklch",
    "token_name",
]
