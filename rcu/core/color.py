# File: rcu/core/color.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Formateo de colores RGB/RGBA a "rgb(r,g,b)" / "rgba(r,g,b,a)".
# Notes:
# - multiple=1 para canales 0..255; multiple=255 para canales normalizados 0..1.
# - El alfa se escala con el MISMO multiple (no hay rama especial 0..1 para alfa).
from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from rcu.core.units import format_number, to_number


@dataclass
class Color:
    r: float = 0
    g: float = 0
    b: float = 0
    a: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"r": self.r, "g": self.g, "b": self.b}
        if self.a is not None:
            d["a"] = self.a
        return d

    @staticmethod
    def from_any(c: Any) -> "Color":
        """Acepta Color, dict {"r","g","b","a"?} u objeto con atributos r/g/b/a."""
        if isinstance(c, Color):
            return c
        if isinstance(c, Mapping):
            return Color(
                r=c.get("r", 0),
                g=c.get("g", 0),
                b=c.get("b", 0),
                a=c.get("a"),
            )
        return Color(
            r=getattr(c, "r", 0),
            g=getattr(c, "g", 0),
            b=getattr(c, "b", 0),
            a=getattr(c, "a", None),
        )


def to_multiple_int(v: Any, multiple: Any = 1) -> float:
    """Escala y redondea hacia arriba: 0.5 * 255 -> 128.

    Canales no numéricos (None, "abc") cuentan como 0. NaN/inf pasan sin redondear.
    """
    n = to_number(v) * to_number(multiple)
    if not math.isfinite(n):
        return n
    return math.ceil(n)


def color_to_string(color: Any, multiple: float = 1) -> str:
    """Color -> "rgb(r,g,b)" o "rgba(r,g,b,a)" (sin espacios).

    Args:
        color: Color, dict o similar con r/g/b y alfa opcional
        multiple: factor de escala (255 para canales normalizados)

    Returns:
        String CSS-like, ej. "rgba(255,0,0,255)"
    """
    c = Color.from_any(color)
    rgb = ",".join(format_number(to_multiple_int(v, multiple)) for v in (c.r, c.g, c.b))
    if c.a is not None:
        return f"rgba({rgb},{format_number(to_multiple_int(c.a, multiple))})"
    return f"rgb({rgb})"
