# Copyrighter - single-line copyright notice stamping for source trees
# Copyright (C) 2024-2026 Copyrighter Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from .canonical import DEFAULT_MARKER
from .logging_config import get_logger

logger = get_logger(__name__)


class Outcome(str, Enum):
    UP_TO_DATE = "up_to_date"
    ADDED = "added"
    UPDATED = "updated"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class FileContent:
    """
    A file's text as a sequence of lines.

    The final newline is tracked separately instead of showing up as an extra
    empty line, so to_text() reproduces the original bytes exactly.
    """

    lines: tuple[str, ...]
    trailing_newline: bool = True
    newline: str = "\n"

    @classmethod
    def from_text(cls, text: str) -> FileContent:
        if not text:
            return cls(lines=(), trailing_newline=False)

        crlf = text.count("\r\n")
        newline = "\r\n" if crlf and crlf == text.count("\n") else "\n"

        trailing_newline = text.endswith(newline)
        if trailing_newline:
            text = text[: -len(newline)]
        return cls(lines=tuple(text.split(newline)), trailing_newline=trailing_newline, newline=newline)

    def to_text(self) -> str:
        if not self.lines:
            return ""
        body = self.newline.join(self.lines)
        return body + self.newline if self.trailing_newline else body


@dataclass(frozen=True)
class TransformResult:
    content: FileContent
    changed: bool
    header: Outcome
    footer: Outcome


def _is_comment(line: str, marker: str) -> bool:
    return line.startswith(marker)


def _stamp_header(lines: list[str], canonical_line: str, marker: str) -> Outcome:
    first = lines[0]
    if first == canonical_line:
        return Outcome.UP_TO_DATE

    if _is_comment(first, marker):
        lines[0] = canonical_line
        if len(lines) < 2 or lines[1] != "":
            lines.insert(1, "")
        return Outcome.UPDATED

    lines[0:0] = [canonical_line, ""]
    return Outcome.ADDED


def _stamp_footer(lines: list[str], canonical_line: str, marker: str) -> Outcome:
    last = lines[-1]
    if last == canonical_line:
        return Outcome.UP_TO_DATE

    if _is_comment(last, marker):
        lines[-1] = canonical_line
        if len(lines) < 2 or lines[-2] != "":
            lines.insert(len(lines) - 1, "")
        return Outcome.UPDATED

    lines.extend(["", canonical_line])
    return Outcome.ADDED


def transform(
    content: FileContent,
    canonical_line: str,
    footer: bool = True,
    marker: str = DEFAULT_MARKER,
) -> TransformResult:
    """
    Make the first (and, with footer=True, the last) line equal canonical_line.

    A first/last line that starts with `marker` but differs from the notice is
    replaced; any other line gets the notice inserted next to it, separated by
    one blank line. Updating an existing footer keeps the file's trailing
    newline state as it was, while adding a new footer always ends the file
    with a newline.
    """
    if not content.lines:
        lines = [canonical_line, ""]
        if footer:
            lines.append(canonical_line)
        return TransformResult(
            content=FileContent(lines=tuple(lines), trailing_newline=True, newline=content.newline),
            changed=True,
            header=Outcome.ADDED,
            footer=Outcome.ADDED if footer else Outcome.SKIPPED,
        )

    lines = list(content.lines)
    trailing_newline = content.trailing_newline

    header_outcome = _stamp_header(lines, canonical_line, marker)

    footer_outcome = Outcome.SKIPPED
    if footer:
        footer_outcome = _stamp_footer(lines, canonical_line, marker)
        if footer_outcome is Outcome.ADDED:
            trailing_newline = True

    changed = header_outcome is not Outcome.UP_TO_DATE or footer_outcome in (Outcome.ADDED, Outcome.UPDATED)
    if not changed:
        return TransformResult(content=content, changed=False, header=header_outcome, footer=footer_outcome)

    return TransformResult(
        content=FileContent(lines=tuple(lines), trailing_newline=trailing_newline, newline=content.newline),
        changed=True,
        header=header_outcome,
        footer=footer_outcome,
    )


def stamp_file(
    path: Union[str, Path],
    canonical_line: str,
    footer: bool = True,
    marker: str = DEFAULT_MARKER,
    dry_run: bool = False,
) -> TransformResult:
    """
    Read `path`, stamp it, and overwrite it when something changed.

    OSError and UnicodeDecodeError propagate to the caller. The new text is
    fully built before the file is opened for writing.
    """
    path = Path(path)
    # newline="" keeps "\r\n" intact so the file can be written back byte for byte.
    with open(path, "r", encoding="utf-8", newline="") as f:
        text = f.read()

    result = transform(FileContent.from_text(text), canonical_line, footer=footer, marker=marker)
    logger.debug(
        f"{path}: header={result.header.value} footer={result.footer.value} changed={result.changed}"
    )

    if result.changed and not dry_run:
        new_text = result.content.to_text()
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(new_text)
        logger.info(f"Rewrote {path}")

    return result
