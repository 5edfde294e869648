# File: rcu/core/units.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Clasificación, parseo y formateo de valores con unidad (px/deg/rad).
# Notes:
# - Política permisiva: nada en este módulo lanza. Si no se reconoce, passthrough o 0.
# - Sin dependencias (ni Qt ni httpx).
from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

# Número "plano": dígitos con fracción opcional, espacios alrededor permitidos.
_NUMBER_RE = re.compile(r"\s*[0-9]+(\.[0-9]+)?\s*")

# Número + sufijo de unidad (sufijo case-insensitive).
_PX_RE = re.compile(r"\s*[0-9.]+\s*px\s*", re.IGNORECASE)
_DEG_RE = re.compile(r"\s*[0-9.]+\s*deg\s*", re.IGNORECASE)
_RAD_RE = re.compile(r"\s*[0-9.]+\s*rad\s*", re.IGNORECASE)

# Prefijo flotante estilo parseFloat: "12.5px" -> 12.5, "  -3e2abc" -> -300.0
_FLOAT_PREFIX_RE = re.compile(
    r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))",
)

# toFixed acepta 0..100
_MAX_FRACTION_DIGITS = 100


def _is_real(v: Any) -> bool:
    # bool es subclase de int, pero no es un "número" para este módulo.
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _fullmatch(rx: re.Pattern[str], v: Any) -> bool:
    return isinstance(v, str) and rx.fullmatch(v) is not None


def is_number(v: Any) -> bool:
    """True si `v` es int/float, o un string numérico plano (" 2", "2.5 ").

    Strings con unidad ("2px") devuelven False.
    """
    return _is_real(v) or _fullmatch(_NUMBER_RE, v)


def is_px_number(v: Any) -> bool:
    """True si `v` es un string tipo "2px" / " 2.5 PX "."""
    return _fullmatch(_PX_RE, v)


def is_deg_number(v: Any) -> bool:
    """True si `v` es un string tipo "90deg"."""
    return _fullmatch(_DEG_RE, v)


def is_rad_number(v: Any) -> bool:
    """True si `v` es un string tipo "3.14rad"."""
    return _fullmatch(_RAD_RE, v)


def format_number(v: Any) -> str:
    """Formatea un número como lo haría una concatenación `v + "unit"`.

    - 2.0 -> "2", 2.5 -> "2.5", 2 -> "2"
    - nan/inf -> "NaN" / "Infinity" / "-Infinity"
    - strings se devuelven tal cual (ya vienen "formateados" por el caller).
    """
    if isinstance(v, str):
        return v
    if isinstance(v, float):
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "Infinity" if v > 0 else "-Infinity"
        if v.is_integer() and abs(v) < 1e21:
            return str(int(v))
        return repr(v)
    return str(v)


def parse_float_prefix(s: str) -> float | None:
    """Extrae el flotante inicial de `s` (semántica parseFloat). None si no hay."""
    if not isinstance(s, str):
        return None
    m = _FLOAT_PREFIX_RE.match(s)
    if m is None:
        return None
    token = m.group(1)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def to_px(v: Any) -> Any:
    """2 -> "2px". Valores que ya tienen unidad (o no reconocidos) pasan sin cambios."""
    if is_number(v):
        return f"{format_number(v)}px"
    return v


def round_fraction(v: float, fraction_digits: int) -> float:
    """Redondeo a N decimales, half-up sobre el valor binario exacto (como toFixed)."""
    if not math.isfinite(v):
        return v
    try:
        digits = int(fraction_digits)
    except (TypeError, ValueError):
        return v
    digits = max(0, min(digits, _MAX_FRACTION_DIGITS))
    d = Decimal(v)
    q = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # quantize necesita lugar para la parte entera + los decimales pedidos
        ctx.prec = max(28, d.adjusted() + digits + 2)
        return float(d.quantize(q, rounding=ROUND_HALF_UP))


def to_number(v: Any, fraction_digits: int | None = None) -> float:
    """Convierte a número: "2px" -> 2, " 3.5 " -> 3.5, "abc" -> 0.

    Nunca lanza: cualquier cosa no parseable termina en 0.

    Args:
        v: número o string (con o sin unidad)
        fraction_digits: si se pasa, redondea a esa cantidad de decimales

    Returns:
        El valor numérico.
    """
    n: float
    if _is_real(v):
        n = v
    elif is_number(v):
        n = float(v)
    elif isinstance(v, str):
        parsed = parse_float_prefix(v)
        n = 0 if parsed is None or math.isnan(parsed) else parsed
    else:
        n = 0

    if fraction_digits is not None:
        n = round_fraction(float(n), fraction_digits)
    return n
