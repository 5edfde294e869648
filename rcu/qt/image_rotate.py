# File: rcu/qt/image_rotate.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Rotar una imagen re-renderizándola en un raster del mismo tamaño (QPainter).
# Notes:
# - translate(centro) -> rotate -> translate(-centro). Las esquinas que salen del lienzo se recortan.
# - Fuente: path local, data: URL o http(s) (vía rcu.net.request).
# - Salida: data URL base64 (PNG por default; RCU_IMAGE_FORMAT para cambiarlo).
from __future__ import annotations

import base64
import logging
import math
import os
from pathlib import Path
from typing import Any, Optional
from urllib.parse import unquote_to_bytes

import httpx
from PySide6.QtCore import QBuffer, QByteArray, QIODevice
from PySide6.QtGui import QColor, QImage, QPainter

from rcu.core.angles import angle_to_radians
from rcu.net.request import fetch_bytes
from rcu.utils.errors import RcuImageError, RcuRequestError

log = logging.getLogger(__name__)

DEFAULT_IMAGE_FORMAT = "PNG"


def image_format_from_env() -> str:
    fmt = os.environ.get("RCU_IMAGE_FORMAT", DEFAULT_IMAGE_FORMAT).strip().upper()
    return fmt if fmt in ("PNG", "JPG", "JPEG", "BMP", "WEBP") else DEFAULT_IMAGE_FORMAT


def _decode_data_url(url: str) -> bytes:
    header, sep, payload = url.partition(",")
    if not sep:
        raise RcuImageError("data URL inválida (falta ',')")
    if header.endswith(";base64"):
        try:
            return base64.b64decode(payload, validate=False)
        except Exception as e:
            raise RcuImageError("data URL inválida (base64)") from e
    return unquote_to_bytes(payload)


def load_image_bytes(source: str, *, client: Optional[httpx.Client] = None) -> bytes:
    if source.startswith("data:"):
        return _decode_data_url(source)
    if source.startswith(("http://", "https://")):
        try:
            return fetch_bytes(source, client=client)
        except RcuRequestError as e:
            raise RcuImageError(f"No se pudo descargar la imagen: {source}") from e
    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise RcuImageError(f"No se pudo leer la imagen: {source}") from e


def rotate_qimage(img: QImage, rotation: Any) -> QImage:
    """Devuelve una copia de `img` rotada `rotation` (radianes o "Ndeg"/"Nrad") sobre su centro."""
    w, h = img.width(), img.height()
    out = QImage(w, h, QImage.Format_ARGB32_Premultiplied)
    out.fill(QColor(0, 0, 0, 0))

    radians = rotation if isinstance(rotation, (int, float)) else angle_to_radians(rotation)

    p = QPainter(out)
    try:
        p.setRenderHint(QPainter.SmoothPixmapTransform, True)
        p.translate(w / 2.0, h / 2.0)
        p.rotate(math.degrees(float(radians)))
        p.translate(-w / 2.0, -h / 2.0)
        p.drawImage(0, 0, img)
    finally:
        p.end()
    return out


def image_to_data_url(img: QImage, fmt: Optional[str] = None) -> str:
    fmt = (fmt or image_format_from_env()).upper()
    ba = QByteArray()
    buf = QBuffer(ba)
    buf.open(QIODevice.WriteOnly)
    try:
        ok = img.save(buf, fmt)
    finally:
        buf.close()
    if not ok:
        raise RcuImageError(f"No se pudo codificar la imagen como {fmt}")
    mime = "jpeg" if fmt == "JPG" else fmt.lower()
    return f"data:image/{mime};base64,{base64.b64encode(bytes(ba)).decode('ascii')}"


def rotate_image(
    source: Optional[str],
    rotation: Any,
    *,
    fmt: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> Optional[str]:
    """Rota la imagen `source` y la devuelve como data URL.

    `source` vacío/None se devuelve tal cual.

    Raises:
        RcuImageError: no se pudo leer, descargar o decodificar la imagen.
    """
    if not source:
        return source

    data = load_image_bytes(source, client=client)
    img = QImage()
    if not img.loadFromData(data) or img.isNull():
        raise RcuImageError(f"Formato de imagen no soportado: {source[:64]}")

    out = rotate_qimage(img, rotation)
    log.debug("rotate_image: %dx%d rotation=%s", img.width(), img.height(), rotation)
    return image_to_data_url(out, fmt)


def image_size(data_url: str) -> tuple[int, int]:
    """Tamaño (w, h) de una imagen en data URL; (0, 0) si no se puede decodificar."""
    img = QImage()
    try:
        if not img.loadFromData(_decode_data_url(data_url)):
            return (0, 0)
    except RcuImageError:
        return (0, 0)
    return (img.width(), img.height())
