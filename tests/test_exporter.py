from __future__ import annotations

import xml.etree.ElementTree as ET
from decimal import Decimal
from pathlib import Path

import pytest
from svgelements import Close, CubicBezier, Line, Move
from svgelements import Path as SvgPath

from msvg.core.color import Color, Rgb
from msvg.core.models import Document, Drawing
from msvg.core.settings import RenderSettings
from msvg.svg.exporter import (
    export_svg,
    format_number,
    render_background,
    render_path_element,
)
from msvg.utils.errors import MsvgIOError, MsvgValidationError

NS = "{http://www.w3.org/2000/svg}"


def _example_drawing() -> Drawing:
    return Drawing().move_to(0, 0).line_to(100, 100).bezier(100, 80, 20, 0, 0, 0)


def _example_document() -> Document:
    doc = Document([0, 0, 100, 100])
    doc.set_background(Color.GREEN)
    d = _example_drawing()
    d.set_stroke_color(Color.BLACK)
    d.set_stroke_width(3)
    d.set_fill_color(Color.BLACK)
    doc.add_drawing(d)
    return doc


# ----------------------------
# Números
# ----------------------------

@pytest.mark.parametrize(
    "value, text",
    [
        (0, "0"),
        (-12, "-12"),
        (3.0, "3"),
        (0.5, "0.5"),
        (2.25, "2.25"),
        (-0.0, "0"),
        (1e-7, "0.0000001"),
        (1e21, "1000000000000000000000"),
        (Decimal("1.500"), "1.5"),
    ],
)
def test_format_number_plain(value, text: str) -> None:
    assert format_number(value) == text


@pytest.mark.parametrize("value", [True, float("nan"), float("inf"), "abc", "3", b"3", None])
def test_format_number_rejects(value) -> None:
    with pytest.raises(MsvgValidationError):
        format_number(value)


# ----------------------------
# Path data
# ----------------------------

def test_path_data_exact() -> None:
    assert _example_drawing().render_path_data() == "M 0 0 L 100 100 C 100 80 20 0 0 0"


def test_path_data_close_and_floats() -> None:
    d = Drawing().move_to(0.5, 1).line_to(2, 3.25).close_path()
    assert d.render_path_data() == "M 0.5 1 L 2 3.25 Z"


def test_path_data_empty_drawing() -> None:
    assert Drawing().render_path_data() == ""


def test_path_data_raw_is_verbatim_and_ordered() -> None:
    d = Drawing().move_to(0, 0).add_raw(" L 5 5 L 6 6 ").add_raw("").close_path()
    assert d.render_path_data() == "M 0 0 L 5 5 L 6 6 Z"


def test_path_data_after_undo() -> None:
    d = Drawing().move_to(0, 0).line_to(100, 100)
    d.undo()
    assert d.render_path_data() == "M 0 0"


def test_path_data_parses_back_to_same_geometry() -> None:
    d = _example_drawing().close_path()
    segs = list(SvgPath(d.render_path_data()))
    assert [type(s) for s in segs] == [Move, Line, CubicBezier, Close]
    curve = segs[2]
    assert (curve.control1.x, curve.control1.y) == (100, 80)
    assert (curve.control2.x, curve.control2.y) == (20, 0)
    assert (curve.end.x, curve.end.y) == (0, 0)


def test_path_data_bbox_matches_points() -> None:
    d = Drawing().move_to(10, 20).line_to(110, 20).line_to(110, 70).close_path()
    assert SvgPath(d.render_path_data()).bbox() == (10, 20, 110, 70)


# ----------------------------
# Elementos
# ----------------------------

def test_unstyled_path_element() -> None:
    el = render_path_element(Drawing().move_to(0, 0))
    assert el == '<path d="M 0 0" stroke="none" fill="none" stroke-width="0"/>'


def test_explicit_zero_width_and_rgb() -> None:
    d = Drawing().set_stroke_color(Rgb(10, 100, 50)).set_stroke_width(0)
    assert render_path_element(d) == (
        '<path d="" stroke="rgb(10,100,50)" fill="none" stroke-width="0"/>'
    )


def test_raw_path_data_is_attribute_escaped() -> None:
    el = render_path_element(Drawing().add_raw('M 0 0 "&'))
    assert 'd="M 0 0 &quot;&amp;"' in el


def test_render_background() -> None:
    assert render_background(None) is None
    assert render_background(Color.NONE) == '<rect width="100%" height="100%" fill="none"/>'
    assert render_background(Color.WHITE) == '<rect width="100%" height="100%" fill="White"/>'


# ----------------------------
# Documento
# ----------------------------

def test_end_to_end_example() -> None:
    assert _example_document().render() == (
        '<svg viewBox="0 0 100 100" xmlns="http://www.w3.org/2000/svg">\n'
        '  <rect width="100%" height="100%" fill="Green"/>\n'
        '  <path d="M 0 0 L 100 100 C 100 80 20 0 0 0" stroke="Black" fill="Black" stroke-width="3"/>\n'
        "</svg>"
    )


@pytest.mark.parametrize("viewport", [(0, 0, 100, 100), (-5, 10, 640, 480), (1.5, 0, 2, 3.0)])
def test_render_starts_with_viewbox(viewport) -> None:
    out = Document(viewport).render()
    a, b, c, d = (format_number(v) for v in viewport)
    assert out.startswith(f'<svg viewBox="{a} {b} {c} {d}" ')


def test_no_background_no_rect() -> None:
    doc = Document([0, 0, 10, 10]).add_drawing(Drawing())
    assert "<rect" not in doc.render()


def test_background_produces_exactly_one_rect() -> None:
    doc = Document([0, 0, 10, 10])
    doc.set_background(Color.RED)
    doc.set_background(Color.BLUE)
    out = doc.render()
    assert out.count("<rect") == 1
    assert 'fill="Blue"' in out


def test_background_none_color_emits_rect_with_none_fill() -> None:
    doc = Document([0, 0, 10, 10]).set_background(Color.NONE)
    out = doc.render()
    assert out.count("<rect") == 1
    assert '<rect width="100%" height="100%" fill="none"/>' in out
    # Solo clear_background() saca el rect.
    doc.clear_background()
    assert "<rect" not in doc.render()


def test_empty_document() -> None:
    assert Document([0, 0, 1, 1]).render() == (
        '<svg viewBox="0 0 1 1" xmlns="http://www.w3.org/2000/svg">\n</svg>'
    )


def test_render_is_idempotent() -> None:
    doc = _example_document()
    assert doc.render() == doc.render()


def test_drawings_render_in_insertion_order() -> None:
    doc = Document([0, 0, 10, 10])
    doc.add_drawing(Drawing().move_to(1, 1))
    doc.add_drawing(Drawing().move_to(2, 2))
    out = doc.render()
    assert out.index('d="M 1 1"') < out.index('d="M 2 2"')


def test_render_reflects_later_mutation() -> None:
    doc = Document([0, 0, 10, 10])
    d = Drawing().move_to(0, 0)
    doc.add_drawing(d)
    before = doc.render()
    d.line_to(5, 5)
    assert doc.render() != before
    assert 'd="M 0 0 L 5 5"' in doc.render()


def test_output_is_well_formed_svg() -> None:
    doc = _example_document()
    doc.add_drawing(Drawing().move_to(5, 5).close_path())
    root = ET.fromstring(doc.render())
    assert root.tag == f"{NS}svg"
    assert root.attrib["viewBox"] == "0 0 100 100"
    rects = root.findall(f"{NS}rect")
    paths = root.findall(f"{NS}path")
    assert len(rects) == 1
    assert rects[0].attrib["fill"] == "Green"
    assert [p.attrib["d"] for p in paths] == [
        "M 0 0 L 100 100 C 100 80 20 0 0 0",
        "M 5 5 Z",
    ]
    assert paths[1].attrib == {"d": "M 5 5 Z", "stroke": "none", "fill": "none", "stroke-width": "0"}


def test_custom_xmlns() -> None:
    doc = Document([0, 0, 100, 100]).set_xmlns("urn:example")
    assert doc.render().startswith('<svg viewBox="0 0 100 100" xmlns="urn:example">')


def test_settings_layout_and_default_xmlns() -> None:
    st = RenderSettings(indent="", newline="", xmlns="urn:default")
    doc = Document([0, 0, 100, 100]).add_drawing(Drawing().move_to(0, 0))
    assert doc.render(st) == (
        '<svg viewBox="0 0 100 100" xmlns="urn:default">'
        '<path d="M 0 0" stroke="none" fill="none" stroke-width="0"/>'
        "</svg>"
    )
    # xmlns propio del documento gana sobre settings.
    doc.set_xmlns("urn:own")
    assert 'xmlns="urn:own"' in doc.render(st)


def test_render_body_has_no_svg_wrapper() -> None:
    doc = Document([0, 0, 100, 100])
    doc.set_background(Rgb(0, 0, 0))
    doc.add_drawing(Drawing().set_stroke_color(Rgb(10, 100, 50)))
    assert doc.render_body() == (
        '<rect width="100%" height="100%" fill="rgb(0,0,0)"/>\n'
        '<path d="" stroke="rgb(10,100,50)" fill="none" stroke-width="0"/>'
    )


# ----------------------------
# Export a archivo
# ----------------------------

def test_export_svg_writes_render_output(tmp_path: Path) -> None:
    doc = _example_document()
    out = export_svg(doc, tmp_path / "nested" / "drawing.svg")
    assert out == tmp_path / "nested" / "drawing.svg"
    assert out.read_text(encoding="utf-8") == doc.render() + "\n"
    assert not (tmp_path / "nested" / "drawing.svg.tmp").exists()


def test_export_svg_forces_extension(tmp_path: Path) -> None:
    out = export_svg(Document([0, 0, 1, 1]), tmp_path / "drawing.txt")
    assert out.suffix == ".svg"
    assert out.exists()


def test_export_svg_io_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(MsvgIOError):
        export_svg(Document([0, 0, 1, 1]), blocker / "drawing.svg")


def test_numeric_string_coordinate_is_rejected() -> None:
    d = Drawing().move_to("3", 0)  # type: ignore[arg-type]
    with pytest.raises(MsvgValidationError):
        d.render_path_data()
