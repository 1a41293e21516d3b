# Copyrighter - single-line copyright notice stamping for source trees
# Copyright (C) 2024-2026 Copyrighter Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Union

from .logging_config import get_logger

logger = get_logger(__name__)

ErrorCallback = Callable[[Path, OSError], None]


class PathNotFoundError(FileNotFoundError):
    pass


def normalize_extensions(values: Iterable[str]) -> tuple[str, ...]:
    normalized = []
    for value in values:
        value = value.strip().lower()
        if not value:
            continue
        if not value.startswith("."):
            value = f".{value}"
        if value not in normalized:
            normalized.append(value)
    return tuple(normalized)


def is_supported(path: Path, extensions: tuple[str, ...]) -> bool:
    if not extensions:
        return True
    return path.suffix.lower() in extensions


def _walk_directory(
    root: Path,
    extensions: tuple[str, ...],
    skip_dirs: frozenset[str],
    on_error: Optional[ErrorCallback],
) -> Iterator[Path]:
    def _onerror(exc: OSError) -> None:
        failed = Path(exc.filename) if exc.filename else root
        logger.warning(f"Error accessing path {failed}: {exc}")
        if on_error is not None:
            on_error(failed, exc)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_onerror):
        # Prune in place so os.walk never descends into skipped directories.
        for name in list(dirnames):
            if name in skip_dirs:
                logger.debug(f"Skipping directory: {Path(dirpath) / name}")
                dirnames.remove(name)
        dirnames.sort()

        for filename in sorted(filenames):
            file_path = Path(dirpath) / filename
            if not file_path.is_file():
                continue
            if not is_supported(file_path, extensions):
                logger.debug(f"Skipping unsupported file: {file_path}")
                continue
            yield file_path


def iter_candidates(
    paths: Iterable[Union[str, Path]],
    extensions: Iterable[str] = (),
    skip_dirs: Iterable[str] = (),
    on_error: Optional[ErrorCallback] = None,
) -> Iterator[Path]:
    """
    Yield every file that should be stamped.

    Files named directly are yielded regardless of extension. Directories are
    walked recursively in sorted order, filtered by `extensions` (empty means
    every file) and pruned of `skip_dirs`. Missing paths and traversal errors
    are handed to `on_error` and the walk moves on.
    """
    exts = normalize_extensions(extensions)
    skipped = frozenset(skip_dirs)

    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            yield from _walk_directory(path, exts, skipped, on_error)
        elif path.is_file():
            yield path
        elif path.exists():
            logger.debug(f"Skipping non-regular file: {path}")
        else:
            exc = PathNotFoundError(2, "No such file or directory", str(path))
            logger.warning(f"Path not found: {path}")
            if on_error is not None:
                on_error(path, exc)
