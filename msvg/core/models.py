# File: msvg/core/models.py
# Project: MinimalSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-16
# Purpose: Modelos del documento: segmentos de path, Drawing y Document.
# Notes: Acumuladores mutables; la serialización vive en msvg.svg.exporter.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence, Union

from msvg.core.color import Paint
from msvg.utils.errors import MsvgValidationError

if TYPE_CHECKING:
    from msvg.core.settings import RenderSettings

Number = Union[int, float]


# ----------------------------
# Segmentos (variante cerrada)
# ----------------------------

@dataclass(frozen=True)
class MoveTo:
    x: Number
    y: Number


@dataclass(frozen=True)
class LineTo:
    x: Number
    y: Number


@dataclass(frozen=True)
class BezierCurve:
    """Cúbica: primer control, segundo control, punto final."""

    c1x: Number
    c1y: Number
    c2x: Number
    c2y: Number
    x: Number
    y: Number


@dataclass(frozen=True)
class ClosePath:
    pass


@dataclass(frozen=True)
class RawPathData:
    """Path data ya armado por el caller (se emite tal cual)."""

    text: str


Segment = Union[MoveTo, LineTo, BezierCurve, ClosePath, RawPathData]


# ----------------------------
# Drawing
# ----------------------------

@dataclass
class Drawing:
    """Un <path>: estilo opcional + lista ordenada de segmentos.

    No hay reglas entre segmentos (ej.: un `C` antes de un `M` se emite igual).
    Los setters/append devuelven `self` para poder encadenar.
    """

    stroke_color: Optional[Paint] = None
    fill_color: Optional[Paint] = None
    stroke_width: Optional[Number] = None
    _segments: list[Segment] = field(default_factory=list, init=False, repr=False)

    # Estilo (último set gana)
    def set_stroke_color(self, color: Paint) -> "Drawing":
        self.stroke_color = color
        return self

    def set_fill_color(self, color: Paint) -> "Drawing":
        self.fill_color = color
        return self

    def set_stroke_width(self, width: Number) -> "Drawing":
        self.stroke_width = width
        return self

    # Geometría
    def move_to(self, x: Number, y: Number) -> "Drawing":
        self._segments.append(MoveTo(x, y))
        return self

    def line_to(self, x: Number, y: Number) -> "Drawing":
        self._segments.append(LineTo(x, y))
        return self

    def bezier(
        self, c1x: Number, c1y: Number, c2x: Number, c2y: Number, x: Number, y: Number
    ) -> "Drawing":
        self._segments.append(BezierCurve(c1x, c1y, c2x, c2y, x, y))
        return self

    def close_path(self) -> "Drawing":
        self._segments.append(ClosePath())
        return self

    def add_raw(self, path_data: str) -> "Drawing":
        """Agrega path data crudo (ej.: `"M 0 0 L 100 100"`)."""
        self._segments.append(RawPathData(str(path_data)))
        return self

    def undo(self) -> Optional[Segment]:
        """Quita y devuelve el último segmento (None si no hay)."""
        if not self._segments:
            return None
        return self._segments.pop()

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def render_path_data(self) -> str:
        from msvg.svg.exporter import render_path_data

        return render_path_data(self._segments)


# ----------------------------
# Document
# ----------------------------

class Document:
    """Documento SVG: viewport fijo, fondo opcional y drawings en orden de pintado."""

    def __init__(self, viewport: Sequence[Number]) -> None:
        try:
            vb = tuple(viewport)
        except TypeError as e:
            raise MsvgValidationError(f"viewport inválido: {viewport!r}") from e
        if len(vb) != 4:
            raise MsvgValidationError(
                f"viewport inválido: se esperan 4 valores (min-x, min-y, w, h), llegaron {len(vb)}"
            )
        self._viewport: tuple[Number, Number, Number, Number] = vb  # type: ignore[assignment]
        self.background: Optional[Paint] = None
        self.xmlns: Optional[str] = None
        self._drawings: list[Drawing] = []

    @property
    def viewport(self) -> tuple[Number, Number, Number, Number]:
        return self._viewport

    def set_background(self, color: Paint) -> "Document":
        self.background = color
        return self

    def clear_background(self) -> "Document":
        self.background = None
        return self

    def set_xmlns(self, xmlns: str) -> "Document":
        self.xmlns = str(xmlns)
        return self

    def add_drawing(self, drawing: Drawing) -> "Document":
        self._drawings.append(drawing)
        return self

    @property
    def drawings(self) -> tuple[Drawing, ...]:
        return tuple(self._drawings)

    def __len__(self) -> int:
        return len(self._drawings)

    def render(self, settings: Optional["RenderSettings"] = None) -> str:
        from msvg.svg.exporter import render_document

        return render_document(self, settings)

    def render_body(self, settings: Optional["RenderSettings"] = None) -> str:
        """Igual que render() pero sin el wrapper <svg>...</svg>."""
        from msvg.svg.exporter import render_body

        return render_body(self, settings)

    def __repr__(self) -> str:
        return (
            f"Document(viewport={self._viewport!r}, background={self.background!r}, "
            f"drawings={len(self._drawings)})"
        )
