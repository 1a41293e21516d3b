# Copyrighter - single-line copyright notice stamping for source trees
# Copyright (C) 2024-2026 Copyrighter Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import pytest

from copyrighter.transformer import FileContent, Outcome, transform

L = "// NOTICE"


def run(text: str, footer: bool = True, marker: str = "//"):
    result = transform(FileContent.from_text(text), L, footer=footer, marker=marker)
    return result, result.content.to_text()


CORPUS = [
    "",
    "\n",
    "\n\n\n",
    "   \n\n\t\n",
    "package main\nfunc main() {}\n",
    "package main\nfunc main() {}",
    "// Old notice\npackage main\n",
    "// Old notice\n\npackage main\n",
    "// Old notice",
    "// a\n// b\n",
    "#!/usr/bin/env bash\necho hi\n",
    "package main // π\nfunc main() {} // 你好\n",
    "// NOTICE\n\npackage main\n\n// NOTICE\n",
    "// NOTICE\n\npackage main\n\n// stale footer",
    "// NOTICE\npackage main\n// stale footer\n",
    "// NOTICE\n",
    "// NOTICE",
    "package main\r\nfunc main() {}\r\n",
    "// Old\r\npackage main\r\n// old footer",
]


def test_from_text_round_trips():
    for text in CORPUS + ["mixed\r\nendings\n", "a\r\n\nb"]:
        assert FileContent.from_text(text).to_text() == text


def test_from_text_tracks_trailing_newline():
    assert FileContent.from_text("a\nb\n") == FileContent(lines=("a", "b"), trailing_newline=True)
    assert FileContent.from_text("a\nb") == FileContent(lines=("a", "b"), trailing_newline=False)
    assert FileContent.from_text("").lines == ()


def test_from_text_detects_crlf_only_when_consistent():
    assert FileContent.from_text("a\r\nb\r\n").newline == "\r\n"
    assert FileContent.from_text("a\r\nb\n").newline == "\n"


def test_adds_header_and_footer_to_code():
    result, text = run("package main\nfunc main() {}\n")
    assert text == "// NOTICE\n\npackage main\nfunc main() {}\n\n// NOTICE\n"
    assert result.changed is True
    assert result.header is Outcome.ADDED
    assert result.footer is Outcome.ADDED


def test_already_stamped_file_is_unchanged():
    stamped = "// NOTICE\n\npackage main\nfunc main() {}\n\n// NOTICE\n"
    source = FileContent.from_text(stamped)
    result = transform(source, L)
    assert result.changed is False
    assert result.content == source
    assert result.content.to_text() == stamped
    assert result.header is Outcome.UP_TO_DATE
    assert result.footer is Outcome.UP_TO_DATE


def test_empty_file_with_footer():
    result, text = run("")
    assert text == L + "\n\n" + L + "\n"
    assert result.header is Outcome.ADDED
    assert result.footer is Outcome.ADDED


def test_empty_file_header_only():
    result, text = run("", footer=False)
    assert text == L + "\n\n"
    assert result.footer is Outcome.SKIPPED


def test_replaces_stale_header_and_inserts_blank_line():
    result, text = run("// Old notice\npackage main\n", footer=False)
    assert text == "// NOTICE\n\npackage main\n"
    assert result.header is Outcome.UPDATED


def test_replaces_stale_header_without_duplicating_blank_line():
    _, text = run("// Old notice\n\npackage main\n", footer=False)
    assert text == "// NOTICE\n\npackage main\n"


def test_any_comment_is_a_replaceable_header():
    _, text = run("// Just a comment\npackage main\n", footer=False)
    assert text.startswith(L + "\n\npackage main")
    assert "Just a comment" not in text


def test_shebang_is_not_treated_as_comment():
    _, text = run("#!/usr/bin/env bash\necho hi\n", footer=False)
    assert text == "// NOTICE\n\n#!/usr/bin/env bash\necho hi\n"


def test_marker_controls_comment_detection():
    result = transform(FileContent.from_text("# old\nx = 1\n"), "# NOTICE", footer=False, marker="#")
    assert result.content.to_text() == "# NOTICE\n\nx = 1\n"
    assert result.header is Outcome.UPDATED


def test_header_only_preserves_missing_trailing_newline():
    _, text = run("package main", footer=False)
    assert text == "// NOTICE\n\npackage main"


def test_new_footer_always_ends_with_newline():
    _, text = run("// NOTICE\n\npackage main")
    assert text == "// NOTICE\n\npackage main\n\n// NOTICE\n"


def test_updated_footer_keeps_missing_trailing_newline():
    result, text = run("// NOTICE\n\npackage main\n\n// stale footer")
    assert text == "// NOTICE\n\npackage main\n\n// NOTICE"
    assert result.footer is Outcome.UPDATED
    assert result.header is Outcome.UP_TO_DATE


def test_updated_footer_keeps_trailing_newline():
    _, text = run("// NOTICE\n\npackage main\n\n// stale footer\n")
    assert text == "// NOTICE\n\npackage main\n\n// NOTICE\n"


def test_updated_footer_gets_blank_line_before_it():
    _, text = run("// NOTICE\npackage main\n// stale footer\n")
    assert text == "// NOTICE\npackage main\n\n// NOTICE\n"


def test_header_up_to_date_without_blank_line_is_left_alone():
    result, text = run("// NOTICE\npackage main\n", footer=False)
    assert result.changed is False
    assert text == "// NOTICE\npackage main\n"


def test_single_notice_line_counts_as_header_and_footer():
    result, _ = run("// NOTICE")
    assert result.changed is False


def test_crlf_file_keeps_crlf():
    _, text = run("package main\r\nfunc main() {}\r\n")
    assert text == "// NOTICE\r\n\r\npackage main\r\nfunc main() {}\r\n\r\n// NOTICE\r\n"


@pytest.mark.parametrize("footer", [True, False])
@pytest.mark.parametrize("text", CORPUS)
def test_second_pass_is_a_no_op(text, footer):
    first, first_text = run(text, footer=footer)
    second = transform(first.content, L, footer=footer)
    assert second.changed is False
    assert second.content.to_text() == first_text


@pytest.mark.parametrize("text", CORPUS)
def test_starts_and_ends_with_notice(text):
    result, _ = run(text)
    assert result.content.lines[0] == L
    assert result.content.lines[-1] == L


def test_body_between_header_and_footer_is_preserved():
    body = ["package main", "", "// inner comment", "func main() {", "\tprintln(1)", "}"]
    text = "// Old notice\n" + "\n".join(body) + "\n// old footer\n"
    result, _ = run(text)
    lines = list(result.content.lines)
    assert lines[0] == L and lines[-1] == L
    assert lines[2:-2] == body
