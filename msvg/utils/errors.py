# File: msvg/utils/errors.py
# Project: MinimalSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-16
# Purpose: Errores tipados del proyecto.
# Notes: Los builders no validan geometría; estos errores cubren tipos y E/S.
from __future__ import annotations


class MsvgError(Exception):
    """Error base del proyecto."""


class MsvgValidationError(MsvgError):
    """Error de validación (viewport, canal RGB, número no formateable)."""


class MsvgIOError(MsvgError):
    """Error de E/S (escritura del .svg)."""
