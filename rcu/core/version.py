"""RCU - version constants.

Keep this module tiny and dependency-free. It is imported by the CLI and the
settings layer and must not have side effects.
"""

APP_NAME = "RusticCanvasUtils"
APP_SHORT = "RCU"

# Library semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"
# Schema version for ~/.rcu/settings.json.
SETTINGS_SCHEMA_VERSION = 1

# Multiplicador para colores normalizados (0..1 -> 0..255).
NORMALIZED_COLOR_MULTIPLE = 255
