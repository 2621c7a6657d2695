"""Centralized state dataclasses for the bootstrap pipeline.

This module re-exports all state definitions from their respective modules,
providing a single import point for state types.
"""

from .env import EnvironmentContext
from .hub import HubMetadata
from .config import ServingConfig
from .backend import ShardInfo, WarmupResult, CapacityDescriptor
from .tokens import FastTokenizer, ExternalTokenizer, ResolvedTokenizer

__all__ = [
    "CapacityDescriptor",
    "EnvironmentContext",
    "ExternalTokenizer",
    "FastTokenizer",
    "HubMetadata",
    "ResolvedTokenizer",
    "ServingConfig",
    "ShardInfo",
    "WarmupResult",
]
