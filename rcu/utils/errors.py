# File: rcu/utils/errors.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Errores tipados del proyecto.
# Notes: El core (units/angles/color/geom) no lanza; solo los adaptadores (qt/net/cli).
from __future__ import annotations


class RcuError(Exception):
    """Error base del proyecto."""


class RcuValidationError(RcuError):
    """Error de validación (argumentos de CLI, input mal formado en adaptadores)."""


class RcuIOError(RcuError):
    """Error de E/S (lectura/escritura de archivos)."""


class RcuRequestError(RcuError):
    """Request HTTP fallido (status != 200 o error de transporte).

    `status` es None cuando no hubo respuesta (DNS, conexión, etc.).
    """

    def __init__(self, message: str, *, status: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.url = url


class RcuImageError(RcuError):
    """No se pudo cargar o rasterizar una imagen."""
