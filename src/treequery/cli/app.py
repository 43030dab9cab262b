"""Typer CLI entrypoints."""

from __future__ import annotations

import json
from itertools import islice
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from treequery.config.settings import QuerySettings, load_settings
from treequery.core.bindings import Bindings
from treequery.core.errors import DocumentError
from treequery.core.pattern import Bind, Pattern, Record, eq
from treequery.core.search import search
from treequery.core.unify import unify
from treequery.logging_utils import configure_logging
from treequery.syntax import call_with_first_arg, sample_tree

app = typer.Typer(name="treequery", help="Structural search over JSON-like trees", add_completion=False)


def load_document(path: Path) -> Any:
    """Read a JSON document from ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(str(path), exc.strerror or str(exc)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(str(path), f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc


def parse_field(raw: str) -> tuple[str, Any]:
    """Split a KEY=VALUE option; VALUE is decoded as JSON when it can be."""
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        raise typer.BadParameter(f"expected KEY=VALUE, got {raw!r}", param_hint="--field")
    try:
        return key, json.loads(value)
    except json.JSONDecodeError:
        return key, value


def build_pattern(fields: list[tuple[str, Any]], bind: str) -> Pattern:
    return Bind(bind, Record({key: eq(value) for key, value in fields}))


def _load_settings(**overrides: Any) -> QuerySettings:
    try:
        return load_settings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="settings") from exc


def _print_match(console: Console, bindings: Bindings, name: str) -> None:
    console.print_json(data=bindings[name])


@app.command()
def demo(
    limit: Annotated[int | None, typer.Option("--limit", "-n", min=1, help="Stop after this many matches.")] = None,
) -> None:
    """Query the sample expression tree."""

    settings = _load_settings(limit=limit)
    configure_logging(profile=settings.log_profile)
    console = Console()
    tree = sample_tree()

    let_match = unify(tree, Bind("let", Record({"type": eq("Let")})))
    if let_match is not None:
        console.print(f"[bold]let[/bold] binds {let_match['let']['name']!r}")

    pattern = call_with_first_arg("x")
    logger.debug("demo.search pattern={} limit={}", pattern, settings.limit)
    for bindings in islice(search(tree, pattern), settings.limit):
        _print_match(console, bindings, "call")


@app.command()
def find(
    path: Annotated[Path, typer.Argument(help="JSON document to search.")],
    fields: Annotated[
        list[str] | None,
        typer.Option("--field", "-f", help="KEY=VALUE the node must carry (repeatable)."),
    ] = None,
    bind: Annotated[str | None, typer.Option("--bind", help="Name to bind matched nodes to.")] = None,
    limit: Annotated[int | None, typer.Option("--limit", "-n", min=1, help="Stop after this many matches.")] = None,
) -> None:
    """Print every node of a JSON document that carries the given fields."""

    settings = _load_settings(limit=limit, bind_name=bind)
    configure_logging(profile=settings.log_profile)
    constraints = [parse_field(raw) for raw in fields or []]

    try:
        document = load_document(path)
    except DocumentError as exc:
        raise typer.BadParameter(exc.reason, param_hint="PATH") from exc

    pattern = build_pattern(constraints, settings.bind_name)
    logger.debug("find.start path={} pattern={} limit={}", str(path), pattern, settings.limit)

    console = Console()
    found = 0
    for bindings in islice(search(document, pattern), settings.limit):
        _print_match(console, bindings, settings.bind_name)
        found += 1

    logger.debug("find.done path={} found={}", str(path), found)
    if not found:
        raise typer.Exit(code=1)
