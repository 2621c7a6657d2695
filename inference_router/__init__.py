"""Inference Router bootstrap package.

This package owns everything that has to happen before a text-generation
router can serve its first request:

- Validating operator-supplied serving limits (argument validation)
- Locating and resolving a tokenizer across local disk, hub cache and hub API
- Negotiating batching capacity with the compute backend once it is online
- Handing the connected backend over to the HTTP server

Architecture Overview:
    - main.py: console entry point (``inference-router``)
    - cli/: argparse surface producing a ServingConfig
    - config/: configuration constants (environment-based)
    - state/: dataclasses shared across the bootstrap pipeline
    - helpers/: argument validation and environment parsing
    - hub/: resource location and metadata fetches against the hub
    - tokens/: tokenizer resolution strategies
    - backends/: v3 (shard-backed) and TensorRT-LLM backend variants
    - runtime/: capacity negotiation and bootstrap orchestration
    - server/: FastAPI application and uvicorn runner

Example:
    $ inference-router --tokenizer-name bigscience/bloom --backend v3

Environment Variables:
    Every CLI flag can be set through its upper-case environment variable
    (``--max-input-tokens`` -> ``MAX_INPUT_TOKENS``). Hub access honours
    ``HF_TOKEN``/``HUGGING_FACE_HUB_TOKEN``, ``HUGGINGFACE_HUB_CACHE``,
    ``HF_HUB_USER_AGENT_ORIGIN`` and ``HF_HUB_OFFLINE``.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
