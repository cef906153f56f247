# File: msvg/core/settings.py
# Project: MinimalSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-16
# Purpose: Settings de render (indentación, salto de línea, xmlns) desde JSON + env.
# Notes: render() nunca lee settings por su cuenta; el caller los pasa explícitos.
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from msvg.core.version import DEFAULT_INDENT, DEFAULT_NEWLINE, DEFAULT_XMLNS

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: msvg_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "msvg_settings.json"

ENV_INDENT = "MSVG_INDENT"
ENV_NEWLINE = "MSVG_NEWLINE"

NEWLINES = {
    "lf": "\n",
    "crlf": "\r\n",
    "none": "",
}

MAX_INDENT = 16


@dataclass(frozen=True)
class RenderSettings:
    """Layout del texto generado.

    - indent: prefijo de cada hijo de <svg> (default: dos espacios).
    - newline: separador entre elementos ("" = todo en una línea).
    - xmlns: namespace para documentos que no setearon uno propio.
    """

    indent: str = DEFAULT_INDENT
    newline: str = DEFAULT_NEWLINE
    xmlns: str = DEFAULT_XMLNS


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca msvg_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    return data if isinstance(data, dict) else {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _coerce_indent(v: Any) -> str | None:
    # Acepta cantidad de espacios (int o "4").
    if isinstance(v, bool):
        return None
    try:
        n = int(str(v).strip())
    except (TypeError, ValueError):
        return None
    if 0 <= n <= MAX_INDENT:
        return " " * n
    return None


def _coerce_newline(v: Any) -> str | None:
    if not isinstance(v, str):
        return None
    return NEWLINES.get(v.strip().lower())


def load_render_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> RenderSettings:
    """Arma RenderSettings: defaults <- msvg_settings.json <- env vars.

    Claves JSON soportadas:
        render.indent   (int, espacios)
        render.newline  ("lf" | "crlf" | "none")
        render.xmlns    (str)

    Valores inválidos se ignoran (warning) y queda el default.
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)

    indent = DEFAULT_INDENT
    newline = DEFAULT_NEWLINE
    xmlns = DEFAULT_XMLNS
    applied: Dict[str, Any] = {}

    raw_indent = _deep_get(data, "render.indent")
    if raw_indent is not None:
        v = _coerce_indent(raw_indent)
        if v is None:
            _log.warning("render.indent inválido: %r", raw_indent)
        else:
            indent = v
            applied["render.indent"] = len(v)

    raw_newline = _deep_get(data, "render.newline")
    if raw_newline is not None:
        v = _coerce_newline(raw_newline)
        if v is None:
            _log.warning("render.newline inválido: %r", raw_newline)
        else:
            newline = v
            applied["render.newline"] = raw_newline

    raw_xmlns = _deep_get(data, "render.xmlns")
    if isinstance(raw_xmlns, str) and raw_xmlns.strip():
        xmlns = raw_xmlns.strip()
        applied["render.xmlns"] = xmlns

    # Env vars ganan sobre el JSON (overrides manuales).
    env_indent = os.environ.get(ENV_INDENT)
    if env_indent:
        v = _coerce_indent(env_indent)
        if v is None:
            _log.warning("%s inválido: %r", ENV_INDENT, env_indent)
        else:
            indent = v
            applied[ENV_INDENT] = len(v)

    env_newline = os.environ.get(ENV_NEWLINE)
    if env_newline:
        v = _coerce_newline(env_newline)
        if v is None:
            _log.warning("%s inválido: %r", ENV_NEWLINE, env_newline)
        else:
            newline = v
            applied[ENV_NEWLINE] = env_newline

    if applied:
        _log.info("Render settings aplicados: %s", applied)
    return RenderSettings(indent=indent, newline=newline, xmlns=xmlns)
