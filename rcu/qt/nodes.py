# File: rcu/qt/nodes.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Adaptadores QWidget/QScrollArea -> RenderedNode / PageScroll.
# Notes:
# - Snapshot por valor: el RenderedNode no guarda referencias a Qt.
# - La cadena de offset_parent sigue parentWidget() hasta la ventana top-level.
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QPoint
from PySide6.QtWidgets import QScrollArea, QWidget

from rcu.geom.node_position import BoundingRect, PageScroll, RenderedNode

log = logging.getLogger(__name__)


def node_from_widget(widget: Optional[QWidget], *, native: bool = False) -> Optional[RenderedNode]:
    """Convierte un QWidget (y sus padres) en una cadena de RenderedNode.

    Args:
        widget: widget origen (None -> None)
        native: si True, agrega `client_rect` con la geometría del widget mapeada
            a su ventana top-level (equivalente a una medición relativa al viewport)

    Returns:
        RenderedNode del widget, con offset_parent apuntando al nodo del padre.
    """
    if widget is None:
        return None

    chain: list[QWidget] = []
    cur: Optional[QWidget] = widget
    while cur is not None:
        chain.append(cur)
        cur = cur.parentWidget()

    # Construimos desde la raíz hacia el widget.
    parent_node: Optional[RenderedNode] = None
    for w in reversed(chain):
        parent_node = RenderedNode(
            offset_top=float(w.y()),
            offset_left=float(w.x()),
            offset_parent=parent_node,
            client_width=float(w.width()),
            client_height=float(w.height()),
        )

    node = parent_node
    if node is not None and native:
        top_left = widget.mapTo(widget.window(), QPoint(0, 0)) if widget.parentWidget() else QPoint(0, 0)
        node.client_rect = BoundingRect(
            x=float(top_left.x()),
            y=float(top_left.y()),
            width=float(widget.width()),
            height=float(widget.height()),
        )
    log.debug("node_from_widget: %s (depth=%d, native=%s)", type(widget).__name__, len(chain), native)
    return node


def scroll_from_area(area: Optional[QScrollArea]) -> PageScroll:
    """Scroll actual de un QScrollArea.

    - root_*: valor de las scrollbars.
    - body_*: desplazamiento del widget interno (fallback si no hay scrollbars activas).
    """
    if area is None:
        return PageScroll()
    inner = area.widget()
    return PageScroll(
        root_left=float(area.horizontalScrollBar().value()),
        root_top=float(area.verticalScrollBar().value()),
        body_left=float(-inner.x()) if inner is not None else 0.0,
        body_top=float(-inner.y()) if inner is not None else 0.0,
    )


def scroll_reader(area: Optional[QScrollArea]) -> Callable[[], PageScroll]:
    """Lector perezoso: cada llamada lee el scroll del momento."""
    return lambda: scroll_from_area(area)
