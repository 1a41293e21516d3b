# Copyrighter - single-line copyright notice stamping for source trees
# Copyright (C) 2024-2026 Copyrighter Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .canonical import InvalidInputError, canonicalize
from .config import Settings
from .logging_config import setup_logging
from .models import FileReport, RunSummary
from .transformer import stamp_file
from .walker import iter_candidates

app = typer.Typer(
    add_completion=False,
    help="Check and add copyright headers (and footers) to source files.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"copyrighter {__version__}")
        raise typer.Exit()


def _emit(report: FileReport, json_output: bool) -> None:
    text = report.model_dump_json() if json_output else report.message()
    typer.echo(text, err=report.error is not None)


@app.command()
def stamp(
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to process.")],
    copyright_text: Annotated[str, typer.Option("--copyright", "-c", help="Copyright text to add (required).")],
    footer: Annotated[
        Optional[bool], typer.Option("--footer/--no-footer", help="Also stamp the last line of each file.")
    ] = None,
    marker: Annotated[Optional[str], typer.Option("--marker", help="Single-line comment prefix.")] = None,
    ext: Annotated[
        Optional[list[str]], typer.Option("--ext", help="Extension to include when walking directories; repeatable.")
    ] = None,
    check: Annotated[bool, typer.Option("--check", help="Report files that would change without writing.")] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Print one JSON report per file.")] = False,
    fail_on_error: Annotated[
        Optional[bool], typer.Option("--fail-on-error/--no-fail-on-error", help="Exit 1 if any file failed.")
    ] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level for diagnostics.")] = None,
    version: Annotated[
        bool, typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit.")
    ] = False,
):
    settings = Settings()

    logger = setup_logging(
        level=log_level or settings.log_level,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        json_format=settings.log_json_format,
    )

    marker = marker if marker is not None else settings.comment_marker
    footer = settings.footer if footer is None else footer
    fail_on_error = settings.fail_on_error if fail_on_error is None else fail_on_error
    extensions = ext if ext else settings.extensions

    try:
        canonical_line = canonicalize(copyright_text, marker=marker)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--copyright' / '--marker'") from exc

    logger.info(f"Stamping with {canonical_line!r} (footer={footer}, check={check})")

    summary = RunSummary()

    def on_error(path: Path, exc: OSError) -> None:
        report = FileReport.from_error(str(path), exc)
        summary.record_error()
        _emit(report, json_output)

    for path in iter_candidates(paths, extensions=extensions, skip_dirs=settings.skip_dirs, on_error=on_error):
        logger.debug(f"Processing file: {path}")
        try:
            result = stamp_file(path, canonical_line, footer=footer, marker=marker, dry_run=check)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug(f"Failed to process {path}: {exc}")
            report = FileReport.from_error(str(path), exc)
        else:
            report = FileReport.from_result(str(path), result, dry_run=check)
        summary.record(report)
        _emit(report, json_output)

    if not json_output:
        typer.echo(summary.message(dry_run=check), err=True)

    if check and summary.changed:
        raise typer.Exit(code=1)
    if fail_on_error and summary.errors:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
