from __future__ import annotations

from aixplain_client import config
from aixplain_client.cli.deps import get_container, reset_container
from aixplain_client.config import NetworkSettings
from aixplain_client.container import build_container
from fake_platform import FakePlatform, team_store


def test_build_container_shares_collaborators() -> None:
    store = team_store()

    container = build_container(store, client=FakePlatform().client())

    assert container.store is store
    assert container.network == NetworkSettings()
    assert container.encoder is not None
    assert container.models.store is store
    assert container.agents.store is store
    assert container.team_agents.store is store
    assert container.pipelines.store is store


def test_build_container_defaults_to_the_module_store() -> None:
    container = build_container(network=NetworkSettings(timeout_seconds=3.0, max_retries=0))

    assert container.store is config.credentials
    assert container.transport.settings.max_retries == 0


def test_cli_container_is_cached_until_reset() -> None:
    reset_container()
    first = get_container()

    assert get_container() is first

    reset_container()
    assert get_container() is not first
    reset_container()
