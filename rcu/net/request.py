# File: rcu/net/request.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Request HTTP mínimo (GET/POST con params form-encoded) sobre httpx.
# Notes:
# - One-shot: sin retry, sin cancelación. Timeout = default de httpx.
# - Éxito = status 200 -> texto. Cualquier otra cosa -> RcuRequestError (una sola).
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import quote

import httpx

from rcu.core.units import format_number
from rcu.utils.errors import RcuRequestError

log = logging.getLogger(__name__)

# Mismo set "seguro" que encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _param_str(value: Any) -> str:
    # true/false/null en minúscula y 2.0 -> "2", como los serializa el navegador
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return format_number(value)


def encode_params(data: Optional[Mapping[str, Any]]) -> str:
    """{"a": 1, "b": "x y"} -> "a=1&b=x%20y" (solo se codifica el valor)."""
    if not data:
        return ""
    return "&".join(f"{name}={quote(_param_str(value), safe=_URI_COMPONENT_SAFE)}" for name, value in data.items())


def build_url(url: str, query: str) -> str:
    if not query:
        return url
    return url + ("&" if "?" in url else "?") + query


def request(
    url: str,
    *,
    method: str = "GET",
    headers: Optional[Mapping[str, str]] = None,
    data: Optional[Mapping[str, Any]] = None,
    client: Optional[httpx.Client] = None,
) -> str:
    """Pide `url` y devuelve el cuerpo como texto.

    - GET: `data` va en la query string.
    - POST: `data` va en el body (form-encoded).
    - Otros métodos: sin body.

    Raises:
        RcuRequestError: status != 200 o error de transporte.
    """
    method = (method or "GET").upper()
    params = encode_params(data)
    req_headers: dict[str, str] = dict(headers or {})
    body: Optional[str] = None

    if method == "GET":
        url = build_url(url, params)
    elif method == "POST":
        body = params
        if not any(k.lower() == "content-type" for k in req_headers):
            req_headers["Content-Type"] = FORM_CONTENT_TYPE

    own_client = client is None
    c = client or httpx.Client(follow_redirects=True)
    try:
        log.debug("%s %s", method, url)
        resp = c.request(method, url, headers=req_headers, content=body)
    except httpx.HTTPError as e:
        raise RcuRequestError(f"Request fallido: {method} {url}: {e}", url=url) from e
    finally:
        if own_client:
            c.close()

    if resp.status_code != 200:
        log.info("Request %s %s -> HTTP %s", method, url, resp.status_code)
        raise RcuRequestError(
            f"Request fallido: {method} {url}: HTTP {resp.status_code}",
            status=resp.status_code,
            url=url,
        )
    return resp.text


def fetch_bytes(url: str, *, client: Optional[httpx.Client] = None) -> bytes:
    """GET binario (imágenes). Mismas reglas de error que request()."""
    own_client = client is None
    c = client or httpx.Client(follow_redirects=True)
    try:
        resp = c.get(url)
    except httpx.HTTPError as e:
        raise RcuRequestError(f"Request fallido: GET {url}: {e}", url=url) from e
    finally:
        if own_client:
            c.close()
    if resp.status_code != 200:
        raise RcuRequestError(f"Request fallido: GET {url}: HTTP {resp.status_code}", status=resp.status_code, url=url)
    return resp.content
