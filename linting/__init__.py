"""Structural linters for the repository layout.

Run all of them with ``python -m linting``.
"""
