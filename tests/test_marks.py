"""Tests for combining mark detection."""

import pytest

from glyphfix.text.marks import COMBINING_MACRON, is_combining_mark


@pytest.mark.parametrize(
    "code_point",
    [0x0300, 0x0301, 0x036F, 0x1AB0, 0x1AFF, 0x1DC0, 0x20D0, 0xFE20, 0xFE2F],
)
def test_combining_ranges(code_point):
    assert is_combining_mark(chr(code_point))


def test_macron():
    assert COMBINING_MACRON == "\N{COMBINING MACRON}"
    assert is_combining_mark(COMBINING_MACRON)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "a",
        " ",
        chr(0x0370),
        chr(0x206F),
        "\N{COMBINING ACUTE ACCENT}\N{COMBINING ACUTE ACCENT}",
        "e\N{COMBINING ACUTE ACCENT}",
    ],
)
def test_not_a_single_mark(text):
    assert not is_combining_mark(text)
