"""Source module rules.

- config modules are declarative: constants and env reads, no functions
- top-level private functions come before public ones
"""

from __future__ import annotations

from pathlib import Path

from .shared import CONFIG_DIR, PACKAGE_DIR, rel, parse_module, iter_python_files, top_level_functions


def config_function_violations(config_dir: Path = CONFIG_DIR) -> list[str]:
    violations: list[str] = []
    for path in sorted(config_dir.glob("*.py")):
        tree = parse_module(path)
        if tree is None or path.name == "__init__.py":
            continue
        for node in top_level_functions(tree):
            violations.append(f"{rel(path)}: def {node.name}() (line {node.lineno}) belongs in helpers/")
    return violations


def function_order_violations(package_dir: Path = PACKAGE_DIR) -> list[str]:
    violations: list[str] = []
    for path in iter_python_files(package_dir):
        tree = parse_module(path)
        if tree is None:
            continue
        last_public: str | None = None
        for node in top_level_functions(tree):
            if not node.name.startswith("_"):
                last_public = node.name
            elif last_public is not None:
                violations.append(
                    f"{rel(path)}: private {node.name}() at line {node.lineno} follows public {last_public}()"
                )
                break
    return violations


__all__ = ["config_function_violations", "function_order_violations"]
