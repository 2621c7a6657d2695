"""Unit tests for resource location policy."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from huggingface_hub import constants

import inference_router.hub.locator as locator_mod
from inference_router.hub import CachedRepo, LocalPath, RemoteRepo, locate
from inference_router.state import EnvironmentContext

_real_build_hub_api = locator_mod.build_hub_api


@pytest.fixture(autouse=True)
def _no_hub_client(monkeypatch: pytest.MonkeyPatch) -> list[EnvironmentContext]:
    built: list[EnvironmentContext] = []

    def fake_build(env: EnvironmentContext) -> object:
        built.append(env)
        return object()

    monkeypatch.setattr(locator_mod, "build_hub_api", fake_build)
    return built


def test_existing_directory_without_revision_is_local(tmp_path: Path, _no_hub_client) -> None:
    location = locate(str(tmp_path), None, EnvironmentContext())
    assert location == LocalPath(tmp_path)
    assert _no_hub_client == []


def test_existing_directory_with_revision_needs_hub(tmp_path: Path) -> None:
    location = locate(str(tmp_path), "v1", EnvironmentContext())
    assert isinstance(location, RemoteRepo)
    assert location.revision == "v1"


def test_unknown_identifier_online_is_remote(_no_hub_client) -> None:
    env = EnvironmentContext(hub_token="tok")
    location = locate("org/model", None, env)
    assert isinstance(location, RemoteRepo)
    assert location.repo_id == "org/model"
    assert location.revision == "main"
    assert _no_hub_client == [env]


def test_offline_uses_default_cache_and_warns(caplog: pytest.LogCaptureFixture, _no_hub_client) -> None:
    with caplog.at_level(logging.WARNING, logger="inference_router.hub.locator"):
        location = locate("org/model", None, EnvironmentContext(offline=True))
    assert location == CachedRepo("org/model", "main", Path(constants.HF_HUB_CACHE))
    assert "Offline mode active using cache defaults" in caplog.text
    assert _no_hub_client == []


def test_offline_uses_configured_cache(tmp_path: Path) -> None:
    location = locate("org/model", "v2", EnvironmentContext(offline=True, cache_dir=tmp_path))
    assert location == CachedRepo("org/model", "v2", tmp_path)


@pytest.mark.parametrize("revision", [None, "main", "v3"])
def test_offline_never_remote(tmp_path: Path, revision: str | None) -> None:
    env = EnvironmentContext(offline=True)
    for identifier in (str(tmp_path), "org/model", str(tmp_path / "missing")):
        assert not isinstance(locate(identifier, revision, env), RemoteRepo)


def test_location_choice_is_stable(tmp_path: Path) -> None:
    env = EnvironmentContext(offline=True)
    first = locate("org/model", None, env)
    second = locate("org/model", None, env)
    assert first == second
    assert type(locate(str(tmp_path), None, env)) is type(locate(str(tmp_path), None, env))


def test_build_hub_api_carries_token_and_origin() -> None:
    api = _real_build_hub_api(EnvironmentContext(hub_token="secret", user_agent_origin="router-ci"))
    assert api.token == "secret"
    assert api.library_name == "inference-router"
    assert api.user_agent == {"origin": "router-ci"}
