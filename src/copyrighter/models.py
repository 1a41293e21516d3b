# Copyrighter - single-line copyright notice stamping for source trees
# Copyright (C) 2024-2026 Copyrighter Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Optional
from pydantic import BaseModel, Field

from .transformer import Outcome, TransformResult


class FileReport(BaseModel):
    path: str
    header: Optional[Outcome] = Field(default=None, description="Header outcome, unset on error")
    footer: Optional[Outcome] = Field(default=None, description="Footer outcome, unset on error")
    changed: bool = False
    error: Optional[str] = None
    dry_run: bool = False

    @classmethod
    def from_result(cls, path: str, result: TransformResult, dry_run: bool = False) -> "FileReport":
        return cls(
            path=path,
            header=result.header,
            footer=result.footer,
            changed=result.changed,
            dry_run=dry_run,
        )

    @classmethod
    def from_error(cls, path: str, exc: BaseException) -> "FileReport":
        return cls(path=path, error=f"{type(exc).__name__}: {exc}")

    def message(self) -> str:
        if self.error is not None:
            return f"Error processing file {self.path}: {self.error}"
        if not self.changed:
            return f"Copyright already up to date in: {self.path}"

        parts = []
        for label, outcome in (("header", self.header), ("footer", self.footer)):
            if outcome in (Outcome.ADDED, Outcome.UPDATED):
                parts.append(f"{label} {outcome.value}")
        if self.dry_run:
            return f"Would stamp ({', '.join(parts)}): {self.path}"
        return f"Copyright {', '.join(parts)} in: {self.path}"


class RunSummary(BaseModel):
    processed: int = 0
    changed: int = 0
    unchanged: int = 0
    errors: int = 0

    def record(self, report: FileReport) -> None:
        self.processed += 1
        if report.error is not None:
            self.errors += 1
        elif report.changed:
            self.changed += 1
        else:
            self.unchanged += 1

    def record_error(self) -> None:
        # Paths that could not be reached are not counted as processed files.
        self.errors += 1

    def message(self, dry_run: bool = False) -> str:
        verb = "would change" if dry_run else "changed"
        return (
            f"Processed {self.processed} files: {self.changed} {verb}, "
            f"{self.unchanged} up to date, {self.errors} errors."
        )
