"""Unit tests for the transformers and legacy-config strategies."""

from __future__ import annotations

import json
import asyncio
from pathlib import Path

import pytest

import inference_router.tokens.strategies as strategies_mod
from inference_router.state import HubMetadata, EnvironmentContext
from inference_router.tokens import ResolutionContext, LegacyConfigStrategy, TransformersStrategy


def _context(tmp_path: Path, config: dict | None = None) -> ResolutionContext:
    config_path = None
    if config is not None:
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps(config))
    env = EnvironmentContext(tokenizer_output_dir=tmp_path / "out")
    return ResolutionContext("org/adapter", "v1", HubMetadata(config_path=config_path), env)


@pytest.fixture
def resolved_with(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, str | None]]:
    calls: list[tuple[str, str | None]] = []

    async def fake_resolve(identifier: str, revision: str | None, env: EnvironmentContext) -> bool:
        calls.append((identifier, revision))
        return True

    monkeypatch.setattr(strategies_mod, "resolve_with_transformers", fake_resolve)
    return calls


def test_transformers_strategy_uses_identifier_and_revision(tmp_path: Path, resolved_with) -> None:
    assert asyncio.run(TransformersStrategy().attempt(_context(tmp_path))) is True
    assert resolved_with == [("org/adapter", "v1")]


def test_transformers_failure_is_reported_not_raised(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def boom(identifier, revision, env) -> None:
        raise OSError("no tokenizer files")

    monkeypatch.setattr(strategies_mod, "_save_pretrained_tokenizer", boom)
    assert asyncio.run(TransformersStrategy().attempt(_context(tmp_path))) is False


def test_transformers_saves_pretrained_into_output_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    saved: list[tuple[str, str | None, Path]] = []

    def fake_save(identifier, revision, env) -> None:
        saved.append((identifier, revision, env.tokenizer_output_dir))

    monkeypatch.setattr(strategies_mod, "_save_pretrained_tokenizer", fake_save)
    assert asyncio.run(TransformersStrategy().attempt(_context(tmp_path))) is True
    assert saved == [("org/adapter", "v1", tmp_path / "out")]


def test_legacy_without_config_fails(tmp_path: Path, resolved_with) -> None:
    assert asyncio.run(LegacyConfigStrategy().attempt(_context(tmp_path))) is False
    assert resolved_with == []


def test_legacy_unreadable_config_fails(tmp_path: Path, resolved_with) -> None:
    context = _context(tmp_path, {})
    context.metadata.config_path.write_text("{broken")
    assert asyncio.run(LegacyConfigStrategy().attempt(context)) is False


def test_legacy_adapter_resolves_base_model_at_main(tmp_path: Path, resolved_with) -> None:
    context = _context(tmp_path, {"base_model_name_or_path": "org/base"})
    assert asyncio.run(LegacyConfigStrategy().attempt(context)) is True
    assert resolved_with == [("org/base", "main")]


def test_legacy_base_model_ignored_when_model_type_present(tmp_path: Path, resolved_with) -> None:
    context = _context(tmp_path, {"model_type": "llama", "base_model_name_or_path": "org/base"})
    assert asyncio.run(LegacyConfigStrategy().attempt(context)) is False
    assert resolved_with == []


def test_legacy_ssm_config_resolves_neox_tokenizer(tmp_path: Path, resolved_with) -> None:
    context = _context(tmp_path, {"model_type": "mamba", "ssm_config": {"d_model": 768}})
    assert asyncio.run(LegacyConfigStrategy().attempt(context)) is True
    assert resolved_with == [("EleutherAI/gpt-neox-20b", "main")]


def test_legacy_failed_base_resolution_fails(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    async def fail(identifier, revision, env) -> bool:
        return False

    monkeypatch.setattr(strategies_mod, "resolve_with_transformers", fail)
    context = _context(tmp_path, {"base_model_name_or_path": "org/base"})
    assert asyncio.run(LegacyConfigStrategy().attempt(context)) is False
