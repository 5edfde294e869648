"""Visual-node position and bounds resolution.

Two node variants
- `RenderedNode`: DOM-like element. Its position is the sum of offset_left /
  offset_top along the containment-ancestor chain (offset_parent links). It may
  carry a native, viewport-relative `client_rect` measurement.
- `LogicalPoint`: synthetic node with plain x / y.

Both implement `resolve_position()`. Foreign objects (adapters) that expose the
same attribute names are resolved by shape, with the same rules.

Rules kept on purpose
- The root-most node of a chain (no offset_parent) contributes no offset.
- Synthetic nodes are asymmetric: a truthy x contributes x only; otherwise a
  truthy y contributes y only.
- Nothing here raises for a missing node: zeroed Position / BoundingRect.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class BoundingRect:
    """Rect in page coordinates (already offset by ancestors and scroll)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    def copy(self) -> "BoundingRect":
        return BoundingRect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class PageScroll:
    """Current page scroll. Root values win; body values are the fallback."""

    root_left: float = 0.0
    root_top: float = 0.0
    body_left: float = 0.0
    body_top: float = 0.0

    @property
    def left(self) -> float:
        return self.root_left or self.body_left

    @property
    def top(self) -> float:
        return self.root_top or self.body_top


ScrollSource = Union[PageScroll, Callable[[], PageScroll], None]


@dataclass
class RenderedNode:
    offset_top: float = 0.0
    offset_left: float = 0.0
    offset_parent: Optional["RenderedNode"] = None
    client_width: float = 0.0
    client_height: float = 0.0
    # Native measurement, relative to the viewport (not the page).
    client_rect: Optional[BoundingRect] = None

    def resolve_position(self) -> Position:
        return _accumulate_offsets(self)

    def ancestors(self) -> list["RenderedNode"]:
        out: list[RenderedNode] = []
        cur = self.offset_parent
        while cur is not None:
            out.append(cur)
            cur = cur.offset_parent
        return out


@dataclass
class LogicalPoint:
    x: float = 0.0
    y: float = 0.0
    client_width: float = 0.0
    client_height: float = 0.0

    def resolve_position(self) -> Position:
        return _synthetic_position(self)


def _accumulate_offsets(node: Any) -> Position:
    pos = Position()
    cur = node
    # No cycle guard: a containment tree cannot loop.
    while getattr(cur, "offset_parent", None) is not None:
        pos.y += cur.offset_top
        pos.x += cur.offset_left
        cur = cur.offset_parent
    return pos


def _synthetic_position(node: Any) -> Position:
    pos = Position()
    x = getattr(node, "x", None)
    y = getattr(node, "y", None)
    if x:
        pos.x += x
    elif y:
        pos.y += y
    return pos


def get_element_position(node: Any) -> Position:
    """Absolute (page) position of `node`; Position(0, 0) for None."""
    if node is None:
        return Position()
    resolve = getattr(node, "resolve_position", None)
    if callable(resolve):
        return resolve()
    if getattr(node, "offset_parent", None) is not None:
        return _accumulate_offsets(node)
    return _synthetic_position(node)


def read_page_scroll(scroll: ScrollSource = None) -> PageScroll:
    """Normalize a PageScroll / scroll-reader callable / None into a PageScroll."""
    if scroll is None:
        return PageScroll()
    if callable(scroll):
        return scroll() or PageScroll()
    return scroll


def _native_rect(node: Any) -> Optional[BoundingRect]:
    rect = getattr(node, "client_rect", None)
    if callable(rect):
        rect = rect()
    if rect is None:
        return None
    if isinstance(rect, BoundingRect):
        return rect.copy()
    return BoundingRect(rect.x, rect.y, rect.width, rect.height)


def get_element_bounding_rect(node: Any, scroll: ScrollSource = None) -> BoundingRect:
    """Bounding rect of `node` in page coordinates.

    With a native measurement, the viewport-relative rect is shifted by the
    page scroll. Otherwise the ancestor-chain position is combined with
    client_width / client_height.
    """
    if node is None:
        return BoundingRect()

    native = _native_rect(node)
    if native is not None:
        s = read_page_scroll(scroll)
        native.x += s.left
        native.y += s.top
        return native

    pos = get_element_position(node)
    return BoundingRect(
        x=pos.x,
        y=pos.y,
        width=getattr(node, "client_width", 0) or 0,
        height=getattr(node, "client_height", 0) or 0,
    )


def _page_xy(p: Any) -> Tuple[float, float]:
    if isinstance(p, Mapping):
        return (p.get("x", 0), p.get("y", 0))
    return (getattr(p, "x", 0), getattr(p, "y", 0))


def to_dom_position(page_pos: Any, node: Any, scroll: ScrollSource = None) -> Position:
    """Page coordinates -> coordinates local to `node`'s bounding rect."""
    rect = get_element_bounding_rect(node, scroll)
    x, y = _page_xy(page_pos)
    return Position(x - rect.x, y - rect.y)
