# File: msvg/utils/log.py
# Project: MinimalSvg (MSVG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-16
# Purpose: Loggers por módulo.
# Notes: La librería no configura handlers; eso lo decide la app que la usa.
from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
