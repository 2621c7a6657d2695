"""Run every structural linter and exit non-zero on any violation."""

from __future__ import annotations

import sys

from .shared import report
from .modules import config_function_violations, function_order_violations
from .testing import prefixed_file_violations, domain_folder_violations, nested_conftest_violations

RULES = (
    ("No-config-functions violations (config/ must be declarative)", config_function_violations),
    ("Function-order violations (private before public)", function_order_violations),
    ("Unit-test-domain-folders violations", domain_folder_violations),
    ("No-test-file-prefix violations", prefixed_file_violations),
    ("No-conftest-in-subfolders violations", nested_conftest_violations),
)


def main() -> int:
    status = 0
    for header, rule in RULES:
        status |= report(header, rule())
    return status


if __name__ == "__main__":
    sys.exit(main())
