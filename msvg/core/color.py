# File: msvg/core/color.py
# Project: MinimalSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-16
# Purpose: Colores con nombre (enum cerrado) + RGB explícito.
# Notes: El valor del enum es exactamente el token que se escribe en el SVG.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from msvg.utils.errors import MsvgValidationError


class Color(str, Enum):
    """Colores con nombre para stroke / fill / fondo.

    - NONE: se escribe como `none` (ausencia de pintura).
    - El resto se escribe con su nombre tal cual (`Black`, `Green`, ...).
    """

    NONE = "none"
    BLACK = "Black"
    BLUE = "Blue"
    GREEN = "Green"
    RED = "Red"
    WHITE = "White"


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            # bool es int en Python; no lo aceptamos como canal.
            if isinstance(v, bool) or not isinstance(v, int):
                raise MsvgValidationError(f"Canal {name} inválido (int): {v!r}")
            if not 0 <= v <= 255:
                raise MsvgValidationError(f"Canal {name} fuera de rango 0..255: {v!r}")

    def token(self) -> str:
        return f"rgb({self.r},{self.g},{self.b})"


Paint = Union[Color, Rgb]


def paint_token(paint: Optional[Paint]) -> str:
    """Token de salida para un color; ausente = `none`."""
    if paint is None:
        return Color.NONE.value
    if isinstance(paint, Rgb):
        return paint.token()
    return Color(paint).value

