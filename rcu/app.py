# File: rcu/app.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Entry-point CLI (python -m rcu.app / rcu): conversiones, colores, rotación.
# Notes: Qt se importa solo para rotate-image (offscreen por default).
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from rcu.core.angles import to_deg, to_rad
from rcu.core.color import Color, color_to_string
from rcu.core.settings import UtilSettings, apply_project_settings
from rcu.core.units import format_number, to_number, to_px
from rcu.core.version import APP_SHORT, APP_VERSION, NORMALIZED_COLOR_MULTIPLE
from rcu.geom.rotate import Point, rotate_points
from rcu.utils.errors import RcuError, RcuIOError, RcuValidationError
from rcu.utils.log import coerce_log_level, get_logger, setup_logging

log = get_logger(__name__)


def _parse_point(s: str) -> Point:
    """"x,y" -> Point. Error de validación si no son dos números."""
    parts = [p.strip() for p in str(s).split(",")]
    if len(parts) != 2:
        raise RcuValidationError(f"Punto inválido (se espera x,y): {s!r}")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError as e:
        raise RcuValidationError(f"Punto inválido (se espera x,y): {s!r}") from e


def _float_arg(s: str) -> float:
    try:
        return float(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"no es un número: {s!r}") from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="rcu", description=f"{APP_SHORT} v{APP_VERSION} - unidades, colores y geometría")
    ap.add_argument("--version", action="version", version=f"{APP_SHORT} {APP_VERSION}")
    ap.add_argument("--log-level", default=None, help="debug|info|warning|error")
    ap.add_argument("--no-log-file", action="store_true", help="Solo consola (sin rcu.log)")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("px", help="2 -> 2px")
    p.add_argument("value")

    p = sub.add_parser("number", help="2px -> 2")
    p.add_argument("value")
    p.add_argument("--digits", type=int, default=None, help="Decimales a conservar")

    p = sub.add_parser("deg", help="1 -> 1deg, 3.14rad -> 180deg")
    p.add_argument("value")

    p = sub.add_parser("rad", help="1 -> 1rad, 180deg -> 3.14rad")
    p.add_argument("value")

    p = sub.add_parser("color", help="r g b [a] -> rgb()/rgba()")
    p.add_argument("channels", nargs="+", type=_float_arg)
    p.add_argument("--multiple", type=_float_arg, default=None, help="255 para canales normalizados 0..1")
    p.add_argument("--normalized", action="store_true", help="Canales 0..1 (equivale a --multiple 255)")

    p = sub.add_parser("rotate", help="Rota puntos x,y alrededor de un pivote")
    p.add_argument("points", nargs="+", help="Puntos x,y")
    p.add_argument("--pivot", default="0,0", help="Pivote x,y (default 0,0)")
    p.add_argument("--angle", required=True, help="Radianes o Ndeg / Nrad")

    p = sub.add_parser("rotate-image", help="Rota una imagen y devuelve data URL")
    p.add_argument("source", help="Path, data: URL o http(s) URL")
    p.add_argument("angle", help="Radianes o Ndeg / Nrad")
    p.add_argument("--format", dest="fmt", default=None, help="PNG|JPG|BMP|WEBP")
    p.add_argument("--out", default=None, help="Escribe el data URL en este archivo")
    return ap


def _run_rotate_image(args: argparse.Namespace, settings: UtilSettings) -> str:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtGui import QGuiApplication

    from rcu.qt.image_rotate import rotate_image

    _app = QGuiApplication.instance() or QGuiApplication([])
    angle = args.angle if not _looks_numeric(args.angle) else float(args.angle)
    out = rotate_image(args.source, angle, fmt=args.fmt or settings.image_format) or ""
    if args.out:
        try:
            Path(args.out).write_text(out, encoding="utf-8")
        except OSError as e:
            raise RcuIOError(f"No se pudo escribir {args.out}") from e
        return args.out
    return out


def _looks_numeric(s: str) -> bool:
    try:
        float(s)
        return True
    except ValueError:
        return False


def run(args: argparse.Namespace, settings: UtilSettings) -> str:
    cmd = args.command
    if cmd == "px":
        return str(to_px(args.value))
    if cmd == "number":
        digits = args.digits if args.digits is not None else settings.fraction_digits
        return format_number(to_number(args.value, digits))
    if cmd == "deg":
        return str(to_deg(args.value))
    if cmd == "rad":
        return str(to_rad(args.value))
    if cmd == "color":
        ch = list(args.channels)
        if len(ch) not in (3, 4):
            raise RcuValidationError("color espera 3 (rgb) o 4 (rgba) canales")
        if args.normalized:
            multiple = NORMALIZED_COLOR_MULTIPLE
        elif args.multiple is not None:
            multiple = args.multiple
        else:
            multiple = settings.color_multiple
        return color_to_string(Color(*ch), multiple)
    if cmd == "rotate":
        pts = [_parse_point(s) for s in args.points]
        pivot = _parse_point(args.pivot)
        angle = float(args.angle) if _looks_numeric(args.angle) else args.angle
        rotate_points(pts, pivot, angle)
        return "\n".join(",".join(format_number(v) for v in p.as_tuple()) for p in pts)
    if cmd == "rotate-image":
        return _run_rotate_image(args, settings)
    raise RcuValidationError(f"Comando desconocido: {cmd}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Project-level defaults (repo-local): rcu_settings.json
    apply_project_settings(logger=log, prefer_env=True)
    settings = UtilSettings.load().with_env_overrides()

    level = coerce_log_level(args.log_level or settings.log_level, logging.INFO)
    setup_logging(None if args.no_log_file else settings.log_dir, level=level)

    try:
        print(run(args, settings))
    except RcuError as e:
        log.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
