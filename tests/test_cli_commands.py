from __future__ import annotations

from importlib import import_module
from pathlib import Path

import pytest
from typer.testing import CliRunner

from aixplain_client.cli.app import app
from aixplain_client.cli.deps import reset_container
from fake_platform import (
    BACKEND,
    BUCKET_URL,
    POLL,
    RUN,
    FakePlatform,
    Reply,
    agent_record,
    agent_result,
    container_for,
    model_record,
    team_store,
)

app_module = import_module("aixplain_client.cli.app")
runner = CliRunner()


def _use(monkeypatch: pytest.MonkeyPatch, platform: FakePlatform, **overrides: str | None) -> None:
    reset_container()
    container = container_for(platform, team_store(**overrides))
    monkeypatch.setattr(app_module, "get_container", lambda: container)


def test_show_settings_masks_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    _use(monkeypatch, FakePlatform(), team_api_key="abcdef123456")

    result = runner.invoke(app, ["show-settings"])

    assert result.exit_code == 0, result.output
    assert "abcd****" in result.output
    assert "abcdef123456" not in result.output
    assert "aiXplain Key:\t(not set)" in result.output
    assert BACKEND in result.output


def test_run_model_prints_output(monkeypatch: pytest.MonkeyPatch) -> None:
    poll_url = f"{POLL}/m1-req"
    platform = (
        FakePlatform()
        .on("GET", f"{BACKEND}/sdk/models/m1", Reply(200, model_record("m1")))
        .on("POST", f"{RUN}/m1", Reply(201, {"data": poll_url}))
        .on("GET", poll_url, Reply(200, {"completed": True, "data": "Bonjour"}))
    )
    _use(monkeypatch, platform)

    result = runner.invoke(app, ["run-model", "m1", "Hello"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Bonjour"


def test_run_agent_substitutes_content(monkeypatch: pytest.MonkeyPatch) -> None:
    poll_url = f"{BACKEND}/sdk/agents/a1/result/req-1"
    platform = (
        FakePlatform()
        .on("GET", f"{BACKEND}/sdk/agents/a1", Reply(200, agent_record("a1")))
        .on("POST", f"{BACKEND}/sdk/agents/a1/run", Reply(201, {"data": poll_url}))
        .on("GET", poll_url, Reply(200, agent_result("About 2.8 million", session_id="s-42")))
    )
    _use(monkeypatch, platform)

    result = runner.invoke(
        app, ["run-agent", "a1", "{{city}} population", "--content", "city=Rome"]
    )

    assert result.exit_code == 0, result.output
    assert "About 2.8 million" in result.output
    assert "Session: s-42" in result.output
    assert platform.json_body("POST", f"{BACKEND}/sdk/agents/a1/run")["query"] == "Rome population"


def test_run_agent_rejects_malformed_content(monkeypatch: pytest.MonkeyPatch) -> None:
    platform = FakePlatform()
    _use(monkeypatch, platform)

    result = runner.invoke(app, ["run-agent", "a1", "q", "--content", "no-equals-sign"])

    assert result.exit_code != 0
    assert platform.requests == []


def test_errors_exit_with_code_one(monkeypatch: pytest.MonkeyPatch) -> None:
    platform = FakePlatform()
    _use(monkeypatch, platform, team_api_key=None)

    result = runner.invoke(app, ["run-model", "m1", "Hello"])

    assert result.exit_code == 1
    assert "No API key was provided" in result.output
    assert platform.requests == []


def test_upload_prints_s3_uri(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("hello")
    presigned = f"{BUCKET_URL}/permanent/notes.txt"
    platform = (
        FakePlatform()
        .on("POST", f"{BACKEND}/sdk/file/upload-url", Reply(200, {"uploadUrl": presigned}))
        .on("PUT", presigned, Reply(200))
    )
    _use(monkeypatch, platform)

    result = runner.invoke(
        app, ["upload", str(source), "--permanent", "--tag", "lang=en", "--license", "MIT"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "s3://aixplain-uploads/permanent/notes.txt"
    body = platform.json_body("POST", f"{BACKEND}/sdk/file/upload-url")
    assert body["tags"] == "lang,en"
    assert body["license"] == "MIT"


def test_search_prints_one_line_per_hit(monkeypatch: pytest.MonkeyPatch) -> None:
    poll_url = f"{POLL}/idx-req"
    platform = (
        FakePlatform()
        .on("GET", f"{BACKEND}/sdk/models/idx", Reply(200, model_record("idx", function="search")))
        .on("POST", f"{RUN}/idx", Reply(201, {"data": poll_url}))
        .on(
            "GET",
            poll_url,
            Reply(
                200,
                {
                    "completed": True,
                    "status": "SUCCESS",
                    "details": [
                        {"score": 0.8, "data": "cats purr", "document": "d1"},
                        {"score": 0.5, "data": "dogs bark", "document": "d2"},
                    ],
                },
            ),
        )
    )
    _use(monkeypatch, platform)

    result = runner.invoke(app, ["search", "idx", "cats", "--top-k", "2", "--where", "lang=en"])

    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 2
    assert '"document": "d1"' in lines[0]
    body = platform.json_body("POST", f"{RUN}/idx")
    assert body["payload"]["top_k"] == 2
    assert body["filters"] == [{"field": "lang", "value": "en", "operator": "=="}]
