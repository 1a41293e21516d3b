# Copyrighter - single-line copyright notice stamping for source trees
# Copyright (C) 2024-2026 Copyrighter Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

DEFAULT_MARKER = "//"


class InvalidInputError(ValueError):
    pass


def canonicalize(copyright_text: str, marker: str = DEFAULT_MARKER) -> str:
    """
    Build the single comment line used both to detect and to insert the notice.

    Text that already begins with the marker is kept as-is (after trimming), so
    canonicalize(canonicalize(text)) == canonicalize(text).
    """
    if not marker or not marker.strip():
        raise InvalidInputError("comment marker must not be empty")
    if "\n" in marker or "\r" in marker:
        raise InvalidInputError("comment marker must be a single line")
    trimmed = copyright_text.strip()
    if not trimmed:
        # A blank notice would be indistinguishable from the blank separator lines.
        raise InvalidInputError("copyright text must not be empty")
    if "\n" in trimmed or "\r" in trimmed:
        # The notice is matched line by line, so it has to stay one physical line.
        raise InvalidInputError("copyright text must be a single line")
    if trimmed.startswith(marker):
        return trimmed
    return f"{marker} {trimmed}"
