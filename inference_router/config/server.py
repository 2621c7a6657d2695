"""HTTP server binding and surface configuration."""

from __future__ import annotations

DEFAULT_HOSTNAME = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_PROMETHEUS_PORT = 9000
DEFAULT_PAYLOAD_LIMIT = 2_000_000

# Usage statistics levels accepted by --usage-stats
USAGE_STATS_LEVELS: tuple[str, ...] = ("on", "off", "no-stack")
DEFAULT_USAGE_STATS = "on"

API_TITLE = "Text Generation Inference Router"
API_KEY_HEADER = "Authorization"
API_KEY_SCHEME = "Bearer"
API_KEY_ALT_HEADER = "X-API-Key"


__all__ = [
    "DEFAULT_HOSTNAME",
    "DEFAULT_PORT",
    "DEFAULT_PROMETHEUS_PORT",
    "DEFAULT_PAYLOAD_LIMIT",
    "USAGE_STATS_LEVELS",
    "DEFAULT_USAGE_STATS",
    "API_TITLE",
    "API_KEY_HEADER",
    "API_KEY_SCHEME",
    "API_KEY_ALT_HEADER",
]
