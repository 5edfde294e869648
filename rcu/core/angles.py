# File: rcu/core/angles.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Conversión rad <-> deg (numérica y en strings "Ndeg"/"Nrad").
# Notes: Internamente los ángulos son radianes; los strings son solo presentación.
from __future__ import annotations

import math
from typing import Any

from rcu.core.units import (
    format_number,
    is_deg_number,
    is_number,
    is_rad_number,
    parse_float_prefix,
    to_number,
)


def rad_to_deg(v: float) -> float:
    """Radianes a grados: math.pi -> 180."""
    return v * (180 / math.pi)


def deg_to_rad(v: float) -> float:
    """Grados a radianes: 180 -> math.pi."""
    return v * (math.pi / 180)


def to_deg(v: Any) -> Any:
    """1 -> "1deg", "3.14rad" -> "179.9...deg".

    Lo que ya es "deg" (o no se reconoce) vuelve tal cual.
    """
    if is_number(v):
        return f"{format_number(v)}deg"
    if is_rad_number(v):
        # Delegamos a la rama numérica: el resultado siempre termina en "deg".
        return to_deg(rad_to_deg(parse_float_prefix(v) or 0.0))
    return v


def to_rad(v: Any) -> Any:
    """1 -> "1rad", "180deg" -> "3.14...rad"."""
    if is_number(v):
        return f"{format_number(v)}rad"
    if is_deg_number(v):
        return to_rad(deg_to_rad(parse_float_prefix(v) or 0.0))
    return v


def angle_to_radians(v: Any) -> float:
    """Valor en radianes para números, "Ndeg", "Nrad" o strings numéricos.

    Cualquier otra cosa -> 0.0 (el rotador lo trata como "no rotar").
    """
    if is_deg_number(v):
        return deg_to_rad(to_number(v))
    if is_rad_number(v) or is_number(v):
        return float(to_number(v))
    return 0.0
