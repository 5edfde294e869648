# File: rcu/core/settings.py
# Project: RusticCanvasUtils (RCU)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Preferencias de usuario (JSON) + overrides por proyecto (rcu_settings.json -> env vars).
# Notes:
# - No depende de Qt; guarda en ~/.rcu/settings.json (RCU_HOME para cambiar la carpeta).
# - Tolerante: un JSON roto nunca rompe al caller, se loggea y se usan defaults.
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from rcu.core.version import SETTINGS_SCHEMA_VERSION

log = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("debug", "info", "warning", "error")
VALID_IMAGE_FORMATS = ("png", "jpg", "jpeg", "bmp", "webp")


def settings_dir() -> Path:
    """Carpeta de settings del usuario (RCU_HOME o ~/.rcu)."""
    override = os.environ.get("RCU_HOME", "").strip()
    return Path(override) if override else Path.home() / ".rcu"


def settings_path() -> Path:
    return settings_dir() / "settings.json"


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: rcu_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "rcu_settings.json"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca rcu_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except Exception as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga rcu_settings.json (si existe) y aplica overrides vía variables de entorno.

    Los consumidores (CLI, image_rotate, log) ya leen RCU_* env vars.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa.
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve un dict con los valores aplicados desde JSON.
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)
    if not data:
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    level = _deep_get(data, "logging.level")
    if isinstance(level, str) and level.strip().lower() in VALID_LOG_LEVELS:
        applied["logging.level"] = level.strip().lower()
        _set_env("RCU_LOG_LEVEL", applied["logging.level"])

    log_dir = _deep_get(data, "logging.dir")
    if isinstance(log_dir, str) and log_dir.strip():
        applied["logging.dir"] = log_dir.strip()
        _set_env("RCU_LOG_DIR", applied["logging.dir"])

    fmt = _deep_get(data, "image.format")
    if isinstance(fmt, str) and fmt.strip().lower() in VALID_IMAGE_FORMATS:
        applied["image.format"] = fmt.strip().upper()
        _set_env("RCU_IMAGE_FORMAT", applied["image.format"])

    multiple = _deep_get(data, "color.multiple")
    if isinstance(multiple, (int, float)) and not isinstance(multiple, bool) and 0 < multiple <= 65535:
        applied["color.multiple"] = multiple
        _set_env("RCU_COLOR_MULTIPLE", multiple)

    digits = _deep_get(data, "units.fraction_digits")
    if isinstance(digits, int) and not isinstance(digits, bool) and 0 <= digits <= 100:
        applied["units.fraction_digits"] = digits
        _set_env("RCU_FRACTION_DIGITS", digits)

    if applied:
        _log.info("Project settings aplicados: %s", applied)
    return applied


@dataclass
class UtilSettings:
    """Preferencias persistentes del usuario (defaults de la CLI)."""

    log_level: str = "info"
    log_dir: str = "logs"
    # 1 = canales 0..255; 255 = canales normalizados 0..1
    color_multiple: float = 1
    # None = sin redondeo en to_number
    fraction_digits: Optional[int] = None
    image_format: str = "PNG"

    @classmethod
    def load(cls) -> "UtilSettings":
        p = settings_path()
        try:
            if not p.exists():
                return cls()
            data = json.loads(p.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                return cls()
            out = cls()
            out.log_level = _coerce_choice(data.get("log_level"), VALID_LOG_LEVELS, out.log_level)
            out.log_dir = str(data.get("log_dir") or out.log_dir)
            out.color_multiple = _coerce_float(data.get("color_multiple"), 0.0, 65535.0, out.color_multiple)
            out.fraction_digits = _coerce_optional_int(data.get("fraction_digits"), 0, 100)
            out.image_format = _coerce_choice(data.get("image_format"), VALID_IMAGE_FORMATS, "png").upper()
            return out
        except Exception:
            log.debug("No se pudieron cargar settings: %s", p, exc_info=True)
            return cls()

    def save(self) -> Path | None:
        """Guarda en disco. Devuelve el path o None si falla (no rompe al caller)."""
        try:
            d = settings_dir()
            d.mkdir(parents=True, exist_ok=True)
            payload: Dict[str, Any] = {
                "schema_version": SETTINGS_SCHEMA_VERSION,
                "log_level": _coerce_choice(self.log_level, VALID_LOG_LEVELS, "info"),
                "log_dir": str(self.log_dir or "logs"),
                "color_multiple": _coerce_float(self.color_multiple, 0.0, 65535.0, 1),
                "fraction_digits": _coerce_optional_int(self.fraction_digits, 0, 100),
                "image_format": _coerce_choice(self.image_format, VALID_IMAGE_FORMATS, "png").upper(),
            }
            p = settings_path()
            p.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
            return p
        except Exception:
            log.debug("No se pudieron guardar settings", exc_info=True)
            return None

    def with_env_overrides(self) -> "UtilSettings":
        """Copia con los RCU_* del entorno aplicados encima (env gana)."""
        env = os.environ
        return UtilSettings(
            log_level=_coerce_choice(env.get("RCU_LOG_LEVEL"), VALID_LOG_LEVELS, self.log_level),
            log_dir=env.get("RCU_LOG_DIR") or self.log_dir,
            color_multiple=_coerce_float(env.get("RCU_COLOR_MULTIPLE"), 0.0, 65535.0, self.color_multiple),
            fraction_digits=(
                _coerce_optional_int(env.get("RCU_FRACTION_DIGITS"), 0, 100)
                if env.get("RCU_FRACTION_DIGITS")
                else self.fraction_digits
            ),
            image_format=_coerce_choice(env.get("RCU_IMAGE_FORMAT"), VALID_IMAGE_FORMATS, self.image_format.lower()).upper(),
        )


def _coerce_choice(v: Any, valid: tuple[str, ...], default: str) -> str:
    if isinstance(v, str):
        vv = v.strip().lower()
        if vv in valid:
            return vv
    return default


def _coerce_float(v: Any, min_v: float, max_v: float, default: float) -> float:
    try:
        n = float(v)
    except Exception:
        return default
    if n <= min_v or n > max_v:
        return default
    return n


def _coerce_optional_int(v: Any, min_v: int, max_v: int) -> Optional[int]:
    if v is None or isinstance(v, bool):
        return None
    try:
        n = int(v)
    except Exception:
        return None
    return max(min_v, min(n, max_v))
