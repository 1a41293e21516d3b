# Copyrighter - single-line copyright notice stamping for source trees
# Copyright (C) 2024-2026 Copyrighter Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from dataclasses import dataclass, field
from typing import Optional


def _get_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}

def _get_csv_list(value: str) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    # NOTE: use default_factory so env vars are read when Settings() is instantiated,
    # not at import time (important for tests and predictable runtime behavior).
    comment_marker: str = field(default_factory=lambda: os.getenv("COPYRIGHTER_MARKER", "//"))
    footer: bool = field(default_factory=lambda: _get_bool(os.getenv("COPYRIGHTER_FOOTER"), True))
    # Applies to directory walks only; files named on the command line are always processed.
    extensions: list[str] = field(
        default_factory=lambda: _get_csv_list(os.getenv("COPYRIGHTER_EXTENSIONS", ".go"))
    )
    skip_dirs: list[str] = field(
        default_factory=lambda: _get_csv_list(
            os.getenv("COPYRIGHTER_SKIP_DIRS", ".git,.hg,.svn,node_modules,vendor")
        )
    )
    # Per-file failures leave the exit code at 0 unless this is set.
    fail_on_error: bool = field(default_factory=lambda: _get_bool(os.getenv("COPYRIGHTER_FAIL_ON_ERROR"), False))

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)
    log_max_bytes: int = field(default_factory=lambda: int(os.getenv("LOG_MAX_BYTES", "10485760")))
    log_backup_count: int = field(default_factory=lambda: int(os.getenv("LOG_BACKUP_COUNT", "3")))
    log_json_format: bool = field(default_factory=lambda: _get_bool(os.getenv("LOG_JSON_FORMAT"), False))
