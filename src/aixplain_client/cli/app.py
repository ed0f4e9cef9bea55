"""Typer CLI wiring the aiXplain client."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import typer

from aixplain_client.domain import IndexFilter, IndexFieldOperator
from aixplain_client.errors import AiXplainError
from aixplain_client.execution import PollingTimeoutError

from .deps import get_container

app = typer.Typer(help="aiXplain client command-line interface")


def _mask(value: str | None) -> str:
    if not value:
        return "(not set)"
    return value[:4] + "****" if len(value) > 4 else "****"


def _parse_pairs(values: list[str], *, option: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"{option} expects KEY=VALUE, got {item!r}")
        pairs[key] = value
    return pairs


def _fail(exc: AiXplainError) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    if isinstance(exc, PollingTimeoutError):
        typer.echo(f"Resume polling at: {exc.handle.url}", err=True)
    return typer.Exit(code=1)


@app.callback()
def configure_logging(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved credentials and endpoints."""

    container = get_container()
    snapshot = container.store.snapshot()
    typer.echo("Backend URL:\t" + (snapshot.backend_url or "(not set)"))
    typer.echo("Models Run URL:\t" + (snapshot.models_run_url or "(not set)"))
    typer.echo("Team API Key:\t" + _mask(snapshot.team_api_key))
    typer.echo("aiXplain Key:\t" + _mask(snapshot.aixplain_api_key))
    typer.echo(f"Timeout:\t{container.network.timeout_seconds}s")
    typer.echo(f"Max Retries:\t{container.network.max_retries}")


@app.command("run-model")
def run_model(model_id: str, text: str) -> None:
    """Run a model on a text input and print its output."""

    container = get_container()

    async def _run() -> str:
        model = await container.models.get(model_id)
        output = await model.run(text)
        return output.output

    try:
        result = asyncio.run(_run())
    except AiXplainError as exc:
        raise _fail(exc) from exc
    typer.echo(result)


@app.command("run-agent")
def run_agent(
    agent_id: str,
    query: str,
    content: list[str] = typer.Option(
        [], "--content", "-c", help="KEY=VALUE substituted into {{KEY}}; repeatable"
    ),
    session_id: str | None = typer.Option(None, help="Continue an existing session"),
) -> None:
    """Run an agent query and print the answer."""

    container = get_container()
    pairs = _parse_pairs(content, option="--content")

    async def _run() -> tuple[str, str | None]:
        agent = await container.agents.get(agent_id)
        output = await agent.run_query(
            query, content=pairs or None, session_id=session_id
        )
        return output.data.output, output.data.session_id

    try:
        answer, session = asyncio.run(_run())
    except AiXplainError as exc:
        raise _fail(exc) from exc
    typer.echo(answer)
    if session:
        typer.echo(f"Session: {session}")


@app.command("upload")
def upload(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    permanent: bool = typer.Option(False, help="Store the file permanently"),
    tag: list[str] = typer.Option([], help="KEY=VALUE tag; repeatable"),
    license: str | None = typer.Option(None, help="License name for permanent uploads"),
) -> None:
    """Upload a local file and print its s3:// URI."""

    container = get_container()
    tags = _parse_pairs(tag, option="--tag")

    async def _run() -> str:
        return await container.uploader.upload_path(
            path,
            credentials=container.store.snapshot(),
            temporary=not permanent,
            tags=tags,
            license=license,
        )

    try:
        uri = asyncio.run(_run())
    except AiXplainError as exc:
        raise _fail(exc) from exc
    typer.echo(uri)


@app.command("search")
def search(
    index_id: str,
    query: str,
    top_k: int = typer.Option(10, min=1, help="Number of results"),
    where: list[str] = typer.Option([], help="FIELD=VALUE equality filter; repeatable"),
) -> None:
    """Search an index with a text query."""

    container = get_container()
    filters = [
        IndexFilter(field=key, operator=IndexFieldOperator.EQUALS, value=value)
        for key, value in _parse_pairs(where, option="--where").items()
    ]

    async def _run() -> list[dict[str, object]]:
        index = await container.indexes.get(index_id)
        output = await index.search(query, top_k=top_k, filters=filters)
        return [detail.model_dump() for detail in output.details]

    try:
        details = asyncio.run(_run())
    except AiXplainError as exc:
        raise _fail(exc) from exc
    if not details:
        typer.echo("No results")
        return
    for detail in details:
        typer.echo(json.dumps(detail, sort_keys=True))


__all__ = ["app"]
