"""Shared paths, parsing and reporting for the structural linters."""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE_DIR = ROOT / "inference_router"
CONFIG_DIR = PACKAGE_DIR / "config"
TESTS_DIR = ROOT / "tests"
UNIT_DIR = TESTS_DIR / "unit"


def rel(path: Path, root: Path = ROOT) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def iter_python_files(*dirs: Path) -> list[Path]:
    """Sorted .py files under ``dirs``, skipping ``__pycache__``."""
    files: list[Path] = []
    for directory in dirs:
        if directory.is_dir():
            files.extend(p for p in sorted(directory.rglob("*.py")) if "__pycache__" not in p.parts)
    return files


def parse_module(path: Path) -> ast.Module | None:
    try:
        return ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return None


def top_level_functions(tree: ast.Module) -> list[ast.FunctionDef | ast.AsyncFunctionDef]:
    return [node for node in tree.body if isinstance(node, ast.FunctionDef | ast.AsyncFunctionDef)]


def report(header: str, violations: list[str]) -> int:
    """Print ``violations`` under ``header`` to stderr; return the exit code."""
    if not violations:
        return 0
    print(f"{header}:", file=sys.stderr)
    for violation in violations:
        print(f"  {violation}", file=sys.stderr)
    return 1


__all__ = [
    "CONFIG_DIR",
    "PACKAGE_DIR",
    "ROOT",
    "TESTS_DIR",
    "UNIT_DIR",
    "iter_python_files",
    "parse_module",
    "rel",
    "report",
    "top_level_functions",
]
