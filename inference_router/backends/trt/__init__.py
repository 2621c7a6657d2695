"""TensorRT-LLM executor worker backend."""

from .backend import TrtLlmBackend
from .variant import TrtLlmVariant

__all__ = ["TrtLlmBackend", "TrtLlmVariant"]
