"""Command-line surface."""

from .args import PRINT_SCHEMA_COMMAND, build_parser, config_from_args, parse_args

__all__ = ["PRINT_SCHEMA_COMMAND", "build_parser", "config_from_args", "parse_args"]
