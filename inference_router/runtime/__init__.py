"""Bootstrap runtime: capacity negotiation and orchestration."""

from .bootstrap import ServerRunner, run_bootstrap, validate_for_variant
from .negotiation import apply_capacity, connect_backend, negotiate_capacity

__all__ = [
    "ServerRunner",
    "apply_capacity",
    "connect_backend",
    "negotiate_capacity",
    "run_bootstrap",
    "validate_for_variant",
]
