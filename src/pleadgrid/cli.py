"""Typer-based command line interface.

Commands
--------
``render``
    Render a pleading described by a YAML/JSON request file to PDF.
``overflow``
    Decide whether a narrative fits inline; print the decision as JSON and,
    when it overflows, store the full text as a pleading-paper attachment.
``attachment``
    Render a stored attachment to PDF.

Exit codes
----------
0 success
3 I/O error (missing input, unreadable store, filesystem issues)
4 configuration error
5 request validation error
6 rendering failed
"""

from __future__ import annotations

import json
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .io.pdf_writer import render_attachment, render_pleading, write_pdf
from .io.text import read_text
from .overflow import JsonFileStore, NarrativePayload, compute_overflow, load_attachment
from .render.request import PleadingRequest
from .utils.errors import ConfigurationError, RenderError, StorageError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

app = typer.Typer(
    name="pleadgrid",
    help="Pleading-paper layout tools. Use 'pleadgrid render' to produce a PDF.",
)

EXIT_IO = 3
EXIT_CONFIG = 4
EXIT_INVALID = 5
EXIT_RENDER = 6

NARRATIVE_FIELDS = ("facts", "recent", "necessity", "relief")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load_cfg(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))
    except (ValidationError, ValueError, yaml.YAMLError) as exc:
        _safe_exit(EXIT_CONFIG, str(exc).splitlines()[0])


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(read_text(path))
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))
    except yaml.YAMLError as exc:
        _safe_exit(EXIT_INVALID, f"{path}: {exc}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        _safe_exit(EXIT_INVALID, f"{path}: expected a mapping of field names to text")
    return data


def _store_for(store_dir: Path | None, cfg: ConfigModel) -> JsonFileStore | None:
    directory = store_dir or cfg.storage.directory
    return JsonFileStore(directory) if directory else None


def _write_output(out_path: Path, document: Any, verbose: bool) -> None:
    try:
        write_pdf(out_path, document)
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))
    if verbose:
        typer.echo(f"Wrote {document.page_count} page(s) to {out_path}", err=True)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main() -> None:
    """Entry point for the pleadgrid command group."""
    pass


@app.command()
def render(
    request_path: Path = typer.Option(  # noqa: B008
        ..., "--request", help="YAML or JSON file with caption fields and body_text"
    ),
    out_path: Path = typer.Option(..., "--out", help="Output PDF file"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Render a pleading request onto pleading paper."""

    configure_logging(verbose)
    cfg = _load_cfg(config_path)
    data = _read_mapping(request_path)
    try:
        request = PleadingRequest.model_validate(data)
    except ValidationError as exc:
        _safe_exit(EXIT_INVALID, str(exc))

    try:
        document = render_pleading(request, cfg)
    except ConfigurationError as exc:
        _safe_exit(EXIT_CONFIG, str(exc))
    except RenderError as exc:
        _safe_exit(EXIT_RENDER, str(exc))
    _write_output(out_path, document, verbose)


@app.command()
def overflow(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", help="YAML or JSON file with facts/recent/necessity/relief"
    ),
    store_dir: Optional[Path] = typer.Option(  # noqa: B008
        None, "--store", help="Attachment store directory (overrides config)"
    ),
    threshold: Optional[int] = typer.Option(  # noqa: B008
        None, "--threshold", min=0, help="Override the character threshold"
    ),
    attach: Optional[bool] = typer.Option(  # noqa: B008
        None, "--attach/--no-attach", help="Override whether the attachment is written"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Decide between inline text and summary plus attachment."""

    configure_logging(verbose)
    cfg = _load_cfg(config_path)
    settings = cfg.overflow.model_copy(deep=True)
    if threshold is not None:
        settings.threshold_chars = threshold
    if attach is not None:
        settings.auto_attach = attach

    data = _read_mapping(in_path)
    unknown = sorted(set(data) - set(NARRATIVE_FIELDS))
    if unknown:
        _safe_exit(EXIT_INVALID, f"unknown narrative fields: {', '.join(unknown)}")
    payload = NarrativePayload(**{k: str(v) for k, v in data.items() if v is not None})

    store = _store_for(store_dir, cfg)
    try:
        result = compute_overflow(payload, settings, store=store)
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))
    except ValueError as exc:
        if store is not None:
            _safe_exit(EXIT_CONFIG, str(exc))
        hint = f"pass --store, set {cfg.storage.directory_env} or use --no-attach"
        _safe_exit(EXIT_CONFIG, f"{exc}; {hint}")

    out = {"mc030_text": result.mc030_text, **asdict(result.decision)}
    typer.echo(json.dumps(out, indent=2, ensure_ascii=False))


@app.command()
def attachment(
    store_dir: Optional[Path] = typer.Option(  # noqa: B008
        None, "--store", help="Attachment store directory (overrides config)"
    ),
    out_path: Path = typer.Option(..., "--out", help="Output PDF file"),  # noqa: B008
    key: Optional[str] = typer.Option(  # noqa: B008
        None, "--key", help="Attachment key (defaults to overflow.attachment_key)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Render a stored pleading-paper attachment."""

    configure_logging(verbose)
    cfg = _load_cfg(config_path)
    store = _store_for(store_dir, cfg)
    if store is None:
        hint = f"pass --store or set {cfg.storage.directory_env}"
        _safe_exit(EXIT_CONFIG, f"no attachment store; {hint}")
    record_key = key or cfg.overflow.attachment_key

    try:
        payload = load_attachment(store, record_key)
    except (StorageError, OSError, ValueError) as exc:
        _safe_exit(EXIT_IO, str(exc))
    if payload is None:
        _safe_exit(EXIT_IO, f"no attachment stored under {record_key!r}")

    try:
        document = render_attachment(payload, cfg)
    except ConfigurationError as exc:
        _safe_exit(EXIT_CONFIG, str(exc))
    except RenderError as exc:
        _safe_exit(EXIT_RENDER, str(exc))
    _write_output(out_path, document, verbose)


__all__ = ["app"]
