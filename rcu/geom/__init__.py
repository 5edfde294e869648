"""Geometry helpers.

This package is intentionally small and dependency-free: point rotation around
a pivot and visual-node position / bounds resolution. Qt widgets are adapted
into these types by `rcu.qt.nodes`, never imported here.
"""

from __future__ import annotations
