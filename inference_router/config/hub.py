"""Hub and tokenizer resolution configuration."""

from __future__ import annotations

# Credential variables, checked in priority order
HUB_TOKEN_ENV_VARS: tuple[str, ...] = ("HF_TOKEN", "HUGGING_FACE_HUB_TOKEN")
HUB_CACHE_ENV_VAR = "HUGGINGFACE_HUB_CACHE"
HUB_USER_AGENT_ORIGIN_ENV_VAR = "HF_HUB_USER_AGENT_ORIGIN"
HUB_OFFLINE_ENV_VAR = "HF_HUB_OFFLINE"
TOKENIZER_OUTPUT_DIR_ENV_VAR = "TOKENIZER_OUTPUT_DIR"

DEFAULT_REVISION = "main"
DEFAULT_TOKENIZER_OUTPUT_DIR = "out"
TOKENIZER_JSON_FILE = "tokenizer.json"

# Auxiliary descriptor files fetched before tokenizer resolution
CONFIG_FILE = "config.json"
TOKENIZER_CONFIG_FILE = "tokenizer_config.json"
PREPROCESSOR_CONFIG_FILE = "preprocessor_config.json"
PROCESSOR_CONFIG_FILE = "processor_config.json"
METADATA_FILES: tuple[str, ...] = (
    CONFIG_FILE,
    TOKENIZER_CONFIG_FILE,
    PREPROCESSOR_CONFIG_FILE,
    PROCESSOR_CONFIG_FILE,
)

# Legacy state-space models ship without a tokenizer of their own
LEGACY_SSM_TOKENIZER = "EleutherAI/gpt-neox-20b"

HUB_LIBRARY_NAME = "inference-router"


__all__ = [
    "HUB_TOKEN_ENV_VARS",
    "HUB_CACHE_ENV_VAR",
    "HUB_USER_AGENT_ORIGIN_ENV_VAR",
    "HUB_OFFLINE_ENV_VAR",
    "TOKENIZER_OUTPUT_DIR_ENV_VAR",
    "DEFAULT_REVISION",
    "DEFAULT_TOKENIZER_OUTPUT_DIR",
    "TOKENIZER_JSON_FILE",
    "CONFIG_FILE",
    "TOKENIZER_CONFIG_FILE",
    "PREPROCESSOR_CONFIG_FILE",
    "PROCESSOR_CONFIG_FILE",
    "METADATA_FILES",
    "LEGACY_SSM_TOKENIZER",
    "HUB_LIBRARY_NAME",
]
