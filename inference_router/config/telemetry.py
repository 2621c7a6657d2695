"""Error-reporting configuration."""

import os

# Sentry is off unless a DSN is configured
SENTRY_DSN: str = os.getenv("SENTRY_DSN", "")
SENTRY_ENVIRONMENT: str = os.getenv("SENTRY_ENVIRONMENT", "production")
SENTRY_RELEASE: str = os.getenv("SENTRY_RELEASE", "")
SENTRY_SAMPLE_RATE: float = float(os.getenv("SENTRY_SAMPLE_RATE", "1.0"))
SENTRY_FLUSH_TIMEOUT_S = 2.0
SENTRY_TAG_CATEGORY = "error.category"
SENTRY_TAG_BACKEND = "router.backend"


__all__ = [
    "SENTRY_DSN",
    "SENTRY_ENVIRONMENT",
    "SENTRY_RELEASE",
    "SENTRY_SAMPLE_RATE",
    "SENTRY_FLUSH_TIMEOUT_S",
    "SENTRY_TAG_CATEGORY",
    "SENTRY_TAG_BACKEND",
]
