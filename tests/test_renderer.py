"""Tests for centered rendering, including end-to-end scenarios at 20 columns."""

import io
from unittest.mock import Mock

import pytest

from cntr.parser import parse_document
from cntr.renderer import CenteredRenderer, center_line, compute_padding, render_document
from cntr.width import display_width


def create_mock_probe(columns=20):
    """Create a probe that reports a fixed terminal width."""
    probe = Mock()
    probe.columns = Mock(return_value=columns)
    return probe


def render_bytes(data, columns=20):
    out = io.BytesIO()
    CenteredRenderer(out, probe=create_mock_probe(columns)).render(parse_document(data))
    return out.getvalue()


def test_single_short_line():
    assert render_bytes(b"hi\n") == b" " * 9 + b"hi\n"


def test_two_paragraphs():
    expected = b" " * 9 + b"hi\n" + b"\n" + b" " * 7 + b"world\n"
    assert render_bytes(b"hi\n\nworld\n") == expected


def test_lines_within_paragraph_and_separator():
    expected = (
        b" " * 9 + b"a\n"
        + b" " * 9 + b"b\n"
        + b"\n"
        + b" " * 9 + b"c\n"
    )
    assert render_bytes(b"a\nb\n\nc\n") == expected


def test_outer_blank_lines_collapse():
    assert render_bytes(b"\n\nhi\n\n\n") == b" " * 9 + b"hi\n"


def test_wide_glyphs_center_by_columns():
    data = "日本\n".encode("utf-8")
    assert render_bytes(data) == b" " * 8 + "日本\n".encode("utf-8")


def test_line_wider_than_terminal_is_left_aligned():
    data = b"This line is wider than twenty columns\n"
    assert render_bytes(data) == data


def test_empty_document_renders_nothing():
    assert render_bytes(b"") == b""
    assert render_bytes(b"\n\n\n") == b""


def test_no_trailing_blank_line_after_last_paragraph():
    output = render_bytes(b"a\n\nb\n\n\n\n")
    assert output.endswith(b"b\n")
    assert not output.endswith(b"\n\n")


def test_line_bytes_pass_through_verbatim():
    data = b"caf\xe9\t!\n"
    output = render_bytes(data)
    assert output.lstrip(b" ") == data


def test_probe_is_queried_once_per_render():
    probe = create_mock_probe(40)
    out = io.BytesIO()
    CenteredRenderer(out, probe=probe).render(parse_document(b"a\nb\n\nc\nd\n\ne\n"))
    assert probe.columns.call_count == 1


def test_explicit_columns_skip_the_probe():
    probe = create_mock_probe(80)
    out = io.BytesIO()
    CenteredRenderer(out, probe=probe).render(parse_document(b"hi"), columns=20)
    probe.columns.assert_not_called()
    assert out.getvalue() == b" " * 9 + b"hi\n"


def test_render_document_with_columns():
    out = io.BytesIO()
    render_document(parse_document(b"abcd\n"), out, columns=10)
    assert out.getvalue() == b"   abcd\n"


@pytest.mark.parametrize("width,columns,expected", [
    (2, 20, 9),
    (5, 20, 7),
    (0, 20, 10),
    (20, 20, 0),
    (21, 20, 0),
    (38, 20, 0),
    (1, 2, 0),
    (0, 1, 0),
    (3, 80, 38),
])
def test_compute_padding(width, columns, expected):
    assert compute_padding(width, columns) == expected


def test_center_line_has_no_newline():
    assert center_line(b"xy", 6) == b"  xy"


def test_zero_width_line_is_centered_like_any_other():
    # A line made only of combining marks measures zero columns
    line = "\u0301".encode("utf-8")
    assert display_width(line) == 0
    assert center_line(line, 20) == b" " * 10 + line


LINES = [
    b"",
    b"a",
    b"hi",
    b"odd",
    b"even",
    "日本語".encode("utf-8"),
    "ｆｕｌｌ".encode("utf-8"),
    "\u0301".encode("utf-8"),
    b"\xff\xfe",
    b"x" * 19,
    b"x" * 20,
    b"x" * 45,
]


@pytest.mark.parametrize("columns", [1, 7, 20, 21, 80, 132])
@pytest.mark.parametrize("line", LINES)
def test_padding_bound_and_symmetry(line, columns):
    centered = center_line(line, columns)
    pad = len(centered) - len(line)
    assert centered[pad:] == line
    assert centered[:pad] == b" " * pad
    assert pad >= 0
    width = display_width(line)
    if width <= columns:
        assert pad + width <= columns
        assert pad == (columns - width) // 2
    else:
        assert pad == 0
