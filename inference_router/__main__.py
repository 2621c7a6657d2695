"""Allow ``python -m inference_router``."""

from .main import main

raise SystemExit(main())
