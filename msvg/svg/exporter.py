# File: msvg/svg/exporter.py
# Project: MinimalSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-16
# Purpose: Serialización de Document/Drawing a texto SVG + export a archivo.
# Notes: Funciones puras salvo export_svg(); el formato de salida es fijo.
from __future__ import annotations

import math
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, Optional
from xml.sax.saxutils import escape

from msvg.core.color import Paint, paint_token
from msvg.core.models import (
    BezierCurve,
    ClosePath,
    Document,
    Drawing,
    LineTo,
    MoveTo,
    RawPathData,
    Segment,
)
from msvg.core.settings import RenderSettings
from msvg.utils.errors import MsvgIOError, MsvgValidationError
from msvg.utils.log import get_logger

log = get_logger(__name__)

_ATTR_ENTITIES = {'"': "&quot;"}


def format_number(value: Any) -> str:
    """Número plano: sin unidades ni notación científica.

    - int: tal cual.
    - float entero (3.0): sin decimales ("3").
    - resto: decimal sin ceros de cola (0.1 -> "0.1", 1e-7 -> "0.0000001").
    """
    if isinstance(value, (bool, str, bytes)):
        raise MsvgValidationError(f"Número inválido ({type(value).__name__}): {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        d = value
    else:
        try:
            f = float(value)
        except (TypeError, ValueError) as e:
            raise MsvgValidationError(f"Número inválido: {value!r}") from e
        if not math.isfinite(f):
            raise MsvgValidationError(f"Número no finito: {value!r}")
        if f.is_integer():
            return str(int(f))
        # repr() da el float más corto que redondea igual; Decimal evita el exponente.
        d = Decimal(repr(f))
    if not d.is_finite():
        raise MsvgValidationError(f"Número no finito: {value!r}")
    s = format(d, "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s in ("-0", ""):
        s = "0"
    return s


def _nums(*values: Any) -> str:
    return " ".join(format_number(v) for v in values)


def format_segment(seg: Segment) -> str:
    """Un comando de path: letra + argumentos separados por espacio."""
    if isinstance(seg, MoveTo):
        return f"M {_nums(seg.x, seg.y)}"
    if isinstance(seg, LineTo):
        return f"L {_nums(seg.x, seg.y)}"
    if isinstance(seg, BezierCurve):
        return f"C {_nums(seg.c1x, seg.c1y, seg.c2x, seg.c2y, seg.x, seg.y)}"
    if isinstance(seg, ClosePath):
        return "Z"
    if isinstance(seg, RawPathData):
        return seg.text.strip()
    raise MsvgValidationError(f"Segmento desconocido: {seg!r}")


def render_path_data(segments: Iterable[Segment]) -> str:
    # Raw vacío no deja dobles espacios.
    parts = (format_segment(s) for s in segments)
    return " ".join(p for p in parts if p)


def _attr(value: str) -> str:
    return escape(value, _ATTR_ENTITIES)


def render_path_element(drawing: Drawing) -> str:
    width = "0" if drawing.stroke_width is None else format_number(drawing.stroke_width)
    return (
        f'<path d="{_attr(render_path_data(drawing.segments))}"'
        f' stroke="{paint_token(drawing.stroke_color)}"'
        f' fill="{paint_token(drawing.fill_color)}"'
        f' stroke-width="{width}"/>'
    )


def render_background(color: Optional[Paint]) -> Optional[str]:
    """<rect> de fondo, o None si nunca se seteó (Color.NONE sí emite fill="none")."""
    if color is None:
        return None
    return f'<rect width="100%" height="100%" fill="{paint_token(color)}"/>'


def _body_lines(document: Document) -> list[str]:
    lines: list[str] = []
    bg = render_background(document.background)
    if bg is not None:
        lines.append(bg)
    # Orden de inserción = orden de pintado.
    lines.extend(render_path_element(d) for d in document.drawings)
    return lines


def render_body(document: Document, settings: Optional[RenderSettings] = None) -> str:
    """Elementos internos (rect + paths) sin el wrapper <svg>."""
    st = settings or RenderSettings()
    return st.newline.join(_body_lines(document))


def render_document(document: Document, settings: Optional[RenderSettings] = None) -> str:
    st = settings or RenderSettings()
    xmlns = document.xmlns if document.xmlns is not None else st.xmlns
    open_tag = f'<svg viewBox="{_nums(*document.viewport)}" xmlns="{_attr(xmlns)}">'
    lines = [open_tag]
    lines.extend(f"{st.indent}{ln}" for ln in _body_lines(document))
    lines.append("</svg>")
    return st.newline.join(lines)


def export_svg(document: Document, out_path: str | Path, settings: Optional[RenderSettings] = None) -> Path:
    """Escribe document.render() en un .svg (UTF-8).

    - Fuerza extensión .svg.
    - Escribe de forma atómica (tmp + replace) para no dejar archivos a medias.
    """
    p = Path(out_path)
    if p.suffix.lower() != ".svg":
        p = p.with_suffix(".svg")

    markup = render_document(document, settings)
    tmp = p.with_suffix(p.suffix + ".tmp")
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(markup + "\n", encoding="utf-8")
        tmp.replace(p)
    except OSError as e:
        raise MsvgIOError(f"No se pudo exportar SVG: {p}") from e

    log.info("SVG exportado: %s (%d drawings)", p, len(document))
    return p
