"""MinimalSvg: documentos SVG mínimos (paths) armados en memoria.

Uso típico::

    from msvg import Color, Document, Drawing

    doc = Document([0, 0, 100, 100]).set_background(Color.GREEN)
    doc.add_drawing(Drawing().set_stroke_color(Color.BLACK).move_to(0, 0).line_to(100, 100))
    markup = doc.render()
"""

from __future__ import annotations

from msvg.core.color import Color, Paint, Rgb
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
from msvg.core.settings import RenderSettings, load_render_settings
from msvg.core.version import APP_VERSION as __version__
from msvg.svg.exporter import export_svg
from msvg.utils.errors import MsvgError, MsvgIOError, MsvgValidationError

__all__ = [
    "BezierCurve",
    "ClosePath",
    "Color",
    "Document",
    "Drawing",
    "LineTo",
    "MoveTo",
    "MsvgError",
    "MsvgIOError",
    "MsvgValidationError",
    "Paint",
    "RawPathData",
    "RenderSettings",
    "Rgb",
    "Segment",
    "export_svg",
    "load_render_settings",
]
