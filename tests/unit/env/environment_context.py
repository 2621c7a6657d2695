"""Unit tests for environment capture."""

from __future__ import annotations

from pathlib import Path

from inference_router.helpers.env import env_flag, load_environment_context


def test_empty_environment_defaults() -> None:
    env = load_environment_context({})
    assert env.hub_token is None
    assert env.cache_dir is None
    assert env.user_agent_origin is None
    assert env.offline is False
    assert env.tokenizer_output_dir == Path("out")


def test_token_priority_order() -> None:
    env = load_environment_context({"HF_TOKEN": "primary", "HUGGING_FACE_HUB_TOKEN": "secondary"})
    assert env.hub_token == "primary"


def test_token_falls_back_to_second_variable() -> None:
    env = load_environment_context({"HF_TOKEN": "", "HUGGING_FACE_HUB_TOKEN": "secondary"})
    assert env.hub_token == "secondary"


def test_cache_origin_and_output_dir() -> None:
    env = load_environment_context(
        {
            "HUGGINGFACE_HUB_CACHE": "/data/hub",
            "HF_HUB_USER_AGENT_ORIGIN": "router-ci",
            "TOKENIZER_OUTPUT_DIR": "/tmp/tok",
        }
    )
    assert env.cache_dir == Path("/data/hub")
    assert env.user_agent_origin == "router-ci"
    assert env.tokenizer_output_dir == Path("/tmp/tok")


def test_offline_only_for_exact_one() -> None:
    assert load_environment_context({"HF_HUB_OFFLINE": "1"}).offline is True
    assert load_environment_context({"HF_HUB_OFFLINE": "true"}).offline is False
    assert load_environment_context({"HF_HUB_OFFLINE": "0"}).offline is False


def test_env_flag_truthy_values() -> None:
    assert env_flag("X", False, {"X": "yes"}) is True
    assert env_flag("X", True, {"X": "off"}) is False
    assert env_flag("X", True, {}) is True
