# File: rcu/dom/element.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Setters de estilo/atributos/clases sobre un elemento sintético + id local.
# Notes:
# - Escrituras directas; no es un motor CSS (no valida nombres ni valores).
# - El id de local_uuid() es único por proceso, no global.
from __future__ import annotations

import random
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union

from rcu.core.units import to_px


@dataclass
class Element:
    tag: str = "div"
    style: dict[str, Any] = field(default_factory=dict)
    attributes: dict[str, str] = field(default_factory=dict)
    # Ordenado y sin duplicados (como classList).
    class_list: list[str] = field(default_factory=list)

    def has_class(self, name: str) -> bool:
        return name in self.class_list


def css(element: Element, name: Union[str, Mapping[str, Any], None], value: Any = None) -> Optional[Element]:
    """Setea estilo(s): css(el, "width", "10px") o css(el, {"width": "10px", ...}).

    `name` vacío -> no hace nada (devuelve None). Devuelve el elemento para encadenar.
    """
    if not name:
        return None
    if isinstance(name, Mapping):
        for n, v in name.items():
            css(element, n, v)
    else:
        element.style[name] = value
    return element


def css_px(element: Element, name: str, value: Any) -> Optional[Element]:
    """Igual que css() pero normaliza números a "Npx" (10 -> "10px")."""
    return css(element, name, to_px(value))


def attr(element: Element, name: str, value: Any = None) -> Any:
    """Con value: setea str(value) y devuelve value. Sin value: lee (None si no está)."""
    if value is not None:
        element.attributes[name] = str(value)
        return value
    return element.attributes.get(name)


def set_class(element: Element, name: Union[str, Iterable[str]], remove: bool = False) -> None:
    """Agrega (o quita con remove=True) una o varias clases."""
    if not isinstance(name, str):
        for n in name:
            set_class(element, n, remove)
        return
    if remove:
        if name in element.class_list:
            element.class_list.remove(name)
    elif name not in element.class_list:
        element.class_list.append(name)


def local_uuid() -> str:
    """Id local (milisegundos + aleatorio). Alcanza con que no se repita en este proceso."""
    now_ms = int(time.time() * 1000)
    rnd = random.randrange(10_000_000_000)
    return str(now_ms + rnd)
