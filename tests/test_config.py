from __future__ import annotations

import pytest

from aixplain_client.config import (
    DEFAULT_BACKEND_URL,
    DEFAULT_MODELS_RUN_URL,
    Credentials,
    CredentialStore,
)
from aixplain_client.errors import MissingAPIKeyError
from aixplain_client.transport import build_headers

ENV_KEYS = (
    "TEAM_API_KEY",
    "AIXPLAIN_API_KEY",
    "PIPELINE_API_KEY",
    "MODEL_API_KEY",
    "HF_TOKEN",
    "BACKEND_URL",
    "MODELS_RUN_URL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_credentials_from_env_reads_keys_and_defaults_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEAM_API_KEY", "team")
    monkeypatch.setenv("HF_TOKEN", "hf")
    monkeypatch.setenv("AIXPLAIN_API_KEY", "   ")

    creds = Credentials.from_env()

    assert creds.team_api_key == "team"
    assert creds.hf_token == "hf"
    assert creds.aixplain_api_key is None
    assert creds.backend_url == DEFAULT_BACKEND_URL
    assert creds.models_run_url == DEFAULT_MODELS_RUN_URL


def test_credentials_from_env_overrides_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BACKEND_URL", "https://dev-platform.example.com")
    monkeypatch.setenv("MODELS_RUN_URL", "https://dev-models.example.com/execute/")

    creds = Credentials.from_env()

    assert creds.backend_url == "https://dev-platform.example.com"
    assert creds.models_run_url == "https://dev-models.example.com/execute/"
    assert not creds.has_api_key


def test_store_snapshot_survives_clear() -> None:
    store = CredentialStore(Credentials(team_api_key="team", model_api_key="model"))

    before = store.snapshot()
    store.clear()
    after = store.snapshot()

    assert before.team_api_key == "team"
    assert after.team_api_key is None
    assert after.model_api_key is None
    assert after.backend_url == before.backend_url


def test_store_set_replaces_fields_and_rejects_unknown_names() -> None:
    store = CredentialStore(Credentials())

    updated = store.set(aixplain_api_key="abc")
    assert updated.aixplain_api_key == "abc"
    assert store.snapshot().has_api_key

    with pytest.raises(ValueError, match="not_a_field"):
        store.set(not_a_field="x")


def test_store_reload_discards_values_set_in_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEAM_API_KEY", "from-env")
    store = CredentialStore(Credentials(team_api_key="from-code"))

    assert store.reload().team_api_key == "from-env"


def test_team_key_wins_over_aixplain_key() -> None:
    headers = build_headers(Credentials(team_api_key="team", aixplain_api_key="aix"))

    assert headers == {"Authorization": "Token team", "Content-Type": "application/json"}
    assert "x-aixplain-key" not in headers


def test_aixplain_key_header_when_no_team_key() -> None:
    headers = build_headers(Credentials(aixplain_api_key="aix"))

    assert headers["x-aixplain-key"] == "aix"
    assert "Authorization" not in headers


def test_missing_keys_is_a_configuration_error() -> None:
    with pytest.raises(MissingAPIKeyError):
        build_headers(Credentials())
