"""Helper functions kept out of the declarative config modules."""

from .env import env_flag, load_environment_context
from .validation import (
    Precondition,
    validate_limits,
    validate_arguments,
    executor_worker_exists,
)

__all__ = [
    "env_flag",
    "load_environment_context",
    "Precondition",
    "validate_limits",
    "validate_arguments",
    "executor_worker_exists",
]
