from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from aixplain_client.config import Credentials
from aixplain_client.domain import AssetKind, Record
from aixplain_client.execution import AgentRunParameters
from aixplain_client.inputs import (
    InputEncodingError,
    InvalidInputError,
    KeyValueInput,
    LocalFile,
    PayloadEncoder,
    RawRecord,
    RemoteURI,
    TextInput,
    TypeNotRecognizedError,
    as_input,
    substitute,
    url_input,
    validate_query,
)
from aixplain_client.transport import Transport
from aixplain_client.uploads import FileUploader
from fake_platform import BACKEND, BUCKET_URL, FAST_NETWORK, FakePlatform, Reply

CREDS = Credentials(team_api_key="team-key")
TEMP_URL = f"{BACKEND}/sdk/file/upload/temp-url"


def _encoder(platform: FakePlatform) -> PayloadEncoder:
    transport = Transport(client=platform.client(), settings=FAST_NETWORK)
    return PayloadEncoder(FileUploader(transport))


def _with_upload(platform: FakePlatform, key: str) -> FakePlatform:
    presigned = f"{BUCKET_URL}/{key}"
    return platform.on("POST", TEMP_URL, Reply(200, {"uploadUrl": presigned})).on(
        "PUT", presigned, Reply(200)
    )


def test_substitute_replaces_placeholder() -> None:
    assert substitute("{{city}} population", {"city": "Rome"}) == "Rome population"


def test_substitute_appends_when_placeholder_missing() -> None:
    assert substitute("population", {"city": "Rome"}) == "population Rome"


def test_substitute_appends_sequence_content() -> None:
    assert substitute("compare", ["a", "b"]) == "compare a b"


def test_validate_query_caps_content_items() -> None:
    validate_query("q", {"a": "1", "b": "2", "c": "3"})
    with pytest.raises(InvalidInputError):
        validate_query("q", {"a": "1", "b": "2", "c": "3", "d": "4"})


def test_validate_query_rejects_blank_query() -> None:
    with pytest.raises(InvalidInputError):
        validate_query("   ", None)


def test_as_input_coercions(tmp_path: Path) -> None:
    assert as_input("hi") == TextInput("hi")
    assert as_input(tmp_path) == LocalFile(tmp_path)
    assert as_input(b"raw") == RawRecord(b"raw")
    named = as_input({"text": "hi", "audio": tmp_path})
    assert isinstance(named, KeyValueInput)
    assert named.values["audio"] == LocalFile(tmp_path)


def test_as_input_rejects_unknown_types() -> None:
    with pytest.raises(TypeNotRecognizedError):
        as_input(42)
    with pytest.raises(TypeNotRecognizedError):
        as_input({"count": 3})


def test_url_input_classifies_schemes(tmp_path: Path) -> None:
    assert url_input("s3://bucket/key.wav") == RemoteURI("s3://bucket/key.wav")
    assert url_input("https://example.com/a.png") == RemoteURI("https://example.com/a.png")
    assert url_input(f"file://{tmp_path}/a.png") == LocalFile(tmp_path / "a.png")
    assert url_input("notes/a.txt") == LocalFile(Path("notes/a.txt"))


def test_text_for_model_uses_data_key() -> None:
    payload = asyncio.run(
        _encoder(FakePlatform()).encode(TextInput("hello"), AssetKind.MODEL, credentials=CREDS)
    )

    assert payload.json() == {"data": "hello"}
    assert payload.headers["Content-Type"] == "application/json"


def test_text_for_agent_uses_query_key_with_parameters_and_session() -> None:
    payload = asyncio.run(
        _encoder(FakePlatform()).encode(
            TextInput("hello"),
            AssetKind.AGENT,
            credentials=CREDS,
            parameters={"max_tokens": "2500"},
            session_id="sess-9",
        )
    )

    assert payload.json() == {"query": "hello", "max_tokens": "2500", "sessionId": "sess-9"}


def test_remote_uri_is_not_uploaded() -> None:
    platform = FakePlatform()

    payload = asyncio.run(
        _encoder(platform).encode(
            RemoteURI("s3://bucket/audio.wav"), AssetKind.MODEL, credentials=CREDS
        )
    )

    assert payload.json() == {"data": "s3://bucket/audio.wav"}
    assert platform.requests == []


def test_local_file_is_uploaded_and_replaced(tmp_path: Path) -> None:
    source = tmp_path / "speech.wav"
    source.write_bytes(b"RIFF")
    platform = _with_upload(FakePlatform(), "tmp/speech.wav")

    payload = asyncio.run(
        _encoder(platform).encode(LocalFile(source), AssetKind.MODEL, credentials=CREDS)
    )

    assert payload.json() == {"data": "s3://aixplain-uploads/tmp/speech.wav"}


def test_pipeline_dictionary_uses_node_records(tmp_path: Path) -> None:
    source = tmp_path / "my photo.png"
    source.write_bytes(b"\x89PNG")
    platform = _with_upload(FakePlatform(), "tmp/my%20photo.png")
    value = KeyValueInput(
        {
            "Text Input": "50%20off and 100%25",
            "Image": LocalFile(source),
            "Audio": RemoteURI("s3://b/my%20clip.wav"),
        }
    )

    payload = asyncio.run(_encoder(platform).encode(value, AssetKind.PIPELINE, credentials=CREDS))

    records = sorted(payload.json()["data"], key=lambda item: item["nodeId"])
    assert records == [
        {"nodeId": "Audio", "value": "s3://b/my clip.wav"},
        {"nodeId": "Image", "value": "s3://aixplain-uploads/tmp/my photo.png"},
        {"nodeId": "Text Input", "value": "50%20off and 100%25"},
    ]


def test_agent_dictionary_is_flat() -> None:
    value = KeyValueInput({"query": "translate", "language": "fr"})

    payload = asyncio.run(
        _encoder(FakePlatform()).encode(
            value, AssetKind.AGENT, credentials=CREDS, session_id="s1"
        )
    )

    assert payload.json() == {"query": "translate", "language": "fr", "sessionId": "s1"}


def test_agent_dictionary_values_win_over_run_parameters() -> None:
    value = KeyValueInput({"name": "Alice", "query": "hi"})

    payload = asyncio.run(
        _encoder(FakePlatform()).encode(
            value,
            AssetKind.AGENT,
            credentials=CREDS,
            parameters=AgentRunParameters().payload_fields(),
        )
    )

    body = payload.json()
    assert body["name"] == "Alice"
    assert body["query"] == "hi"
    assert body["max_iterations"] == "10"


def test_raw_records_pass_through() -> None:
    raw = RawRecord.from_records([Record.text("doc", id="d1")])

    payload = asyncio.run(_encoder(FakePlatform()).encode(raw, AssetKind.INDEX, credentials=CREDS))

    assert payload.content == raw.content
    assert payload.json() == [
        {"data": "doc", "dataType": "text", "document_id": "d1", "uri": "", "attributes": {}}
    ]


def test_encoding_never_mutates_caller_input() -> None:
    values = {"query": "translate", "language": "fr"}
    value = as_input(values)

    asyncio.run(
        _encoder(FakePlatform()).encode(
            value, AssetKind.AGENT, credentials=CREDS, parameters={"name": "x"}
        )
    )

    assert values == {"query": "translate", "language": "fr"}
    assert dict(value.values) == values


def test_unserialisable_parameters_raise_encoding_error() -> None:
    with pytest.raises(InputEncodingError):
        asyncio.run(
            _encoder(FakePlatform()).encode(
                TextInput("x"), AssetKind.MODEL, credentials=CREDS, parameters={"bad": object()}
            )
        )


def test_render_query_uploads_local_content(tmp_path: Path) -> None:
    source = tmp_path / "cat.png"
    source.write_bytes(b"\x89PNG")
    platform = _with_upload(FakePlatform(), "tmp/cat.png")

    query = asyncio.run(
        _encoder(platform).render_query(
            "Describe {{image}}", {"image": LocalFile(source)}, credentials=CREDS
        )
    )

    assert query == "Describe s3://aixplain-uploads/tmp/cat.png"


def test_render_query_rejects_too_much_content_without_network() -> None:
    platform = FakePlatform()
    content = {f"k{i}": LocalFile(Path(f"/missing/{i}.png")) for i in range(4)}

    with pytest.raises(InvalidInputError):
        asyncio.run(_encoder(platform).render_query("q", content, credentials=CREDS))

    assert platform.requests == []
