"""Unit tests for the TensorRT-LLM variant and executor worker handle."""

from __future__ import annotations

import stat
import asyncio
from pathlib import Path

import pytest
from tokenizers import Tokenizer
from tokenizers.models import WordLevel

import inference_router.backends.trt.backend as backend_mod
from inference_router.state import FastTokenizer, ServingConfig, ExternalTokenizer
from inference_router.backends import get_variant
from inference_router.backends.trt import TrtLlmBackend, TrtLlmVariant
from inference_router.helpers.validation import executor_worker_exists


def _fast_tokenizer(tmp_path: Path) -> FastTokenizer:
    return FastTokenizer(Tokenizer(WordLevel({"[UNK]": 0}, unk_token="[UNK]")), tmp_path / "tokenizer.json")


def _worker(tmp_path: Path) -> Path:
    worker = tmp_path / "executor_worker"
    worker.write_text("#!/bin/sh\nexec sleep 30\n")
    worker.chmod(worker.stat().st_mode | stat.S_IEXEC)
    return worker


def test_registry_returns_trt_variant() -> None:
    variant = get_variant("trtllm")
    assert isinstance(variant, TrtLlmVariant)
    assert variant.requires_fast_tokenizer is True
    assert variant.reports_capacity is False
    assert variant.support_chunking is False
    assert variant.preconditions() == (executor_worker_exists,)


def test_prepare_config_fills_static_defaults() -> None:
    config = TrtLlmVariant().prepare_config(ServingConfig(tokenizer_name="org/model"))
    assert config.max_input_tokens == 1024
    assert config.max_total_tokens == 2048


def test_prepare_config_keeps_operator_values() -> None:
    config = ServingConfig(tokenizer_name="org/model", max_input_tokens=10, max_total_tokens=20)
    assert TrtLlmVariant().prepare_config(config) == config


def test_connect_requires_fast_tokenizer(tmp_path: Path) -> None:
    config = ServingConfig(tokenizer_name="org/model", executor_worker=_worker(tmp_path))
    with pytest.raises(ValueError, match="Rust based tokenizer"):
        asyncio.run(TrtLlmVariant().connect(config, ExternalTokenizer("org/model")))


def test_connect_reports_static_capacity(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    started: list[list[str]] = []

    async def fake_start(self: TrtLlmBackend) -> None:
        started.append(self.worker_command())

    monkeypatch.setattr(backend_mod.TrtLlmBackend, "start", fake_start)
    worker = _worker(tmp_path)
    config = ServingConfig(
        tokenizer_name="org/model",
        model_id="org/model-trt",
        executor_worker=worker,
        max_batch_total_tokens=8192,
    )
    backend, capacity = asyncio.run(TrtLlmVariant().connect(config, _fast_tokenizer(tmp_path)))
    assert (capacity.max_input_tokens, capacity.max_total_tokens, capacity.max_batch_total_tokens) == (
        1024,
        2048,
        8192,
    )
    assert capacity.support_chunking is False
    assert started == [[str(worker), "--model-id", "org/model-trt", "--max-concurrent-requests", "128"]]
    assert backend.describe()["executor_worker"] == str(worker)


def test_worker_process_lifecycle(tmp_path: Path) -> None:
    backend = TrtLlmBackend(_fast_tokenizer(tmp_path), None, _worker(tmp_path), 4)

    async def run():
        before = await backend.health()
        await backend.start()
        during = await backend.health()
        await backend.shutdown()
        after = await backend.health()
        return before, during, after

    assert asyncio.run(run()) == (False, True, False)
