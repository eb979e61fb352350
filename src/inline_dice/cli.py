from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple, TypedDict

import typer
import yaml

from .config import DiceConfig, load_config
from .models import DecorationSet, DiceToken, Document
from .pipeline import RollSession, decorate_document, process_corpus

app = typer.Typer(help="Inline dice notation CLI.", no_args_is_help=True)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs."),
) -> None:
    """Configure logging for every sub-command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def scan(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
) -> None:
    """List the dice tokens found in each document as JSON."""
    documents = _load_documents(input_path)
    results = process_corpus(documents)
    summary: List[ScanSummary] = [
        {"doc_id": doc_id, "tokens": [_token_dict(t) for t in tokens]}
        for doc_id, tokens in sorted(results.items())
    ]
    typer.echo(json.dumps({"documents": summary}, indent=2, ensure_ascii=False))


@app.command()
def decorate(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    visible_range: List[str] | None = typer.Option(
        None,
        "--range",
        "-r",
        help="Visible range as START:END (repeatable).",
    ),
    window_size: int | None = typer.Option(
        None, "--window-size", help="Tile documents into windows of N characters."
    ),
    stride: int | None = typer.Option(
        None, "--stride", help="Characters between window starts."
    ),
) -> None:
    """Emit the decoration ranges a live view would render, as JSON."""
    cfg = load_config(config)
    if window_size is not None:
        cfg.window_size = window_size
    if stride is not None:
        cfg.stride = stride
    ranges = [_parse_range(value) for value in visible_range or []] or None
    summary: List[DecorationSummary] = []
    for document in _load_documents(input_path):
        decorations = decorate_document(document, cfg, ranges)
        summary.append(
            {"doc_id": document.doc_id, "decorations": _decorations_list(decorations)}
        )
    typer.echo(json.dumps({"documents": summary}, indent=2, ensure_ascii=False))


@app.command()
def roll(
    formula: str = typer.Argument(..., help="Dice formula, e.g. 2d6+1."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for repeatable rolls."),
    as_json: bool = typer.Option(False, "--json", help="Print the notice as JSON."),
) -> None:
    """Roll a dice formula and print the notice a click would show."""
    cfg = load_config(config)
    if seed is not None:
        cfg.seed = seed
    notice = RollSession(cfg).roll(formula)
    if as_json:
        payload = {
            "text": notice.text,
            "css_class": notice.css_class,
            "duration_ms": notice.duration_ms,
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    typer.echo(notice.text)
    if notice.css_class:
        typer.echo(f"({notice.css_class})")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = DiceConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md"}


class TokenPayload(TypedDict):
    literal: str
    start: int
    end: int


class ScanSummary(TypedDict):
    doc_id: str
    tokens: List[TokenPayload]


class DecorationPayload(TypedDict):
    start: int
    end: int
    style_id: str
    attributes: Dict[str, str]


class DecorationSummary(TypedDict):
    doc_id: str
    decorations: List[DecorationPayload]


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [_document_from_file(file, str(file.relative_to(input_path))) for file in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text") from exc
    return Document(doc_id=doc_id, text=text)


def _parse_range(value: str) -> Tuple[int, int]:
    """Parse a START:END option value."""
    start_text, sep, end_text = value.partition(":")
    try:
        if not sep:
            raise ValueError(value)
        start, end = int(start_text), int(end_text)
    except ValueError as exc:
        raise typer.BadParameter(f"Expected START:END, got {value!r}") from exc
    if start < 0 or end < start:
        raise typer.BadParameter(f"Invalid range {value!r}")
    return start, end


def _token_dict(token: DiceToken) -> TokenPayload:
    return {
        "literal": token.literal,
        "start": token.start_offset,
        "end": token.end_offset,
    }


def _decorations_list(decorations: DecorationSet) -> List[DecorationPayload]:
    return [
        {
            "start": decoration.start,
            "end": decoration.end,
            "style_id": decoration.style_id,
            "attributes": decoration.attributes,
        }
        for decoration in decorations
    ]


if __name__ == "__main__":
    main()
