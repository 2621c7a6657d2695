"""Unit tests for the structural linters."""

from __future__ import annotations

from pathlib import Path

from linting.modules import config_function_violations, function_order_violations
from linting.testing import domain_folder_violations, prefixed_file_violations, nested_conftest_violations


def test_repository_is_clean() -> None:
    assert config_function_violations() == []
    assert function_order_violations() == []
    assert domain_folder_violations() == []
    assert prefixed_file_violations() == []
    assert nested_conftest_violations() == []


def test_config_functions_detected(tmp_path: Path) -> None:
    (tmp_path / "limits.py").write_text("LIMIT = 1\n\ndef compute():\n    return LIMIT\n")
    (tmp_path / "__init__.py").write_text("def allowed():\n    pass\n")
    violations = config_function_violations(tmp_path)
    assert len(violations) == 1
    assert "compute()" in violations[0]


def test_private_after_public_detected(tmp_path: Path) -> None:
    (tmp_path / "ok.py").write_text("def _a():\n    pass\n\ndef b():\n    pass\n")
    (tmp_path / "bad.py").write_text("def b():\n    pass\n\nasync def _a():\n    pass\n")
    violations = function_order_violations(tmp_path)
    assert len(violations) == 1
    assert "_a()" in violations[0]


def test_test_layout_rules(tmp_path: Path) -> None:
    unit = tmp_path / "unit"
    (unit / "hub").mkdir(parents=True)
    (unit / "flat.py").write_text("")
    (unit / "hub" / "test_prefixed.py").write_text("")
    (unit / "hub" / "conftest.py").write_text("")
    assert len(domain_folder_violations(unit)) == 1
    assert len(prefixed_file_violations(unit)) == 1
    assert len(nested_conftest_violations(tmp_path)) == 1
