# File: rcu/qt/cursor.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Ubicar el cursor de texto (colapsado) en un editor Qt.
# Notes: Uso directo de la API de selección de Qt; sin lógica propia.
from __future__ import annotations

from typing import Any, Optional, Union

from PySide6.QtCore import QPoint
from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import QPlainTextEdit, QTextEdit

Editor = Union[QTextEdit, QPlainTextEdit]


def _as_qpoint(position: Any) -> QPoint:
    if isinstance(position, QPoint):
        return position
    if isinstance(position, dict):
        return QPoint(int(position.get("x", 0)), int(position.get("y", 0)))
    return QPoint(int(position.x), int(position.y))


def set_range(editor: Editor, position: Optional[Any] = None) -> int:
    """Coloca el cursor en `position` (coords del viewport) o al final del texto.

    La selección queda colapsada. Devuelve la posición (índice de carácter).
    """
    if position is not None:
        cursor = editor.cursorForPosition(_as_qpoint(position))
    else:
        cursor = editor.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
    cursor.clearSelection()
    editor.setTextCursor(cursor)
    return cursor.position()
