import pytest

from swearfilter.safety.whitespace import WhitespaceSettings, sanitize_whitespace


def test_tab_becomes_space():
    assert sanitize_whitespace("a\tb") == "a b"


def test_zero_width_space_is_removed():
    assert sanitize_whitespace("he\u200bllo") == "hello"


def test_leading_and_trailing_whitespace_is_trimmed():
    assert sanitize_whitespace("  hello \u3000") == "hello"


@pytest.mark.parametrize(
    "text",
    ["foo  bar", "foo\t\tbar", "foo\u00a0\u00a0bar", "foo \n bar", "foo \u200b bar"],
)
def test_whitespace_runs_are_deleted_not_collapsed(text):
    # Runs of two or more are removed entirely and the neighbouring words fuse.
    # This matches the established filter behaviour; do not change it to " ".
    assert sanitize_whitespace(text) == "foobar"


def test_single_spaces_survive():
    assert sanitize_whitespace("h e l l o") == "h e l l o"


def test_vertical_tab_is_not_whitespace():
    assert sanitize_whitespace("a\v\vb") == "a\v\vb"


def test_steps_can_be_disabled():
    settings = WhitespaceSettings(convert_tabs=False, strip_zero_width=False, collapse_runs=False)

    assert sanitize_whitespace(" a\tb\u200b  c ", settings) == " a\tb\u200b  c "


def test_tab_kept_when_conversion_disabled():
    settings = WhitespaceSettings(convert_tabs=False)

    assert sanitize_whitespace("a\tb", settings) == "a\tb"
    assert sanitize_whitespace("a\t\tb", settings) == "ab"
