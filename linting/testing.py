"""Test layout rules.

Unit tests live in ``tests/unit/<domain>/`` under plain names (collection is
handled by ``tests/conftest.py``), and there is a single root conftest.
"""

from __future__ import annotations

from pathlib import Path

from .shared import TESTS_DIR, UNIT_DIR, rel, iter_python_files


def domain_folder_violations(unit_dir: Path = UNIT_DIR) -> list[str]:
    if not unit_dir.is_dir():
        return []
    return [
        f"{rel(child)}: must be inside a domain subfolder (tests/unit/<domain>/)"
        for child in sorted(unit_dir.iterdir())
        if child.is_file() and child.suffix == ".py" and child.name != "__init__.py"
    ]


def prefixed_file_violations(unit_dir: Path = UNIT_DIR) -> list[str]:
    return [
        f"{rel(path)}: filename must not use the test_ prefix"
        for path in iter_python_files(unit_dir)
        if path.name.startswith("test_")
    ]


def nested_conftest_violations(tests_dir: Path = TESTS_DIR) -> list[str]:
    return [
        f"{rel(path)}: only tests/conftest.py is allowed"
        for path in iter_python_files(tests_dir)
        if path.name == "conftest.py" and path.parent != tests_dir
    ]


__all__ = ["domain_folder_violations", "nested_conftest_violations", "prefixed_file_violations"]
