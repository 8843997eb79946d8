import re

import pytest

from bucketkit.exclude import (
    create_excludes_from_wildcard,
    is_url_excluded,
    wildcard_to_regexp,
)


@pytest.mark.parametrize(
    "pattern, wanted",
    [
        ("main*", "^main.*$"),
        ("*.txt", "^.*\\.txt$"),
        ("?_main*.txt", "^._main.*\\.txt$"),
    ],
)
def test_wildcard_to_regexp(pattern, wanted):
    assert wildcard_to_regexp(pattern) == wanted


def test_regex_metacharacters_are_literal():
    compiled = re.compile(wildcard_to_regexp("a+(b)"))
    assert compiled.fullmatch("a+(b)")
    assert not compiled.fullmatch("aab")


def test_create_excludes_skips_empty_patterns():
    patterns = create_excludes_from_wildcard(["", "*.txt", ""])
    assert [p.pattern for p in patterns] == [wildcard_to_regexp("*.txt")]


def test_create_excludes_empty_input():
    assert create_excludes_from_wildcard([]) == []


def test_no_patterns_never_excludes():
    assert is_url_excluded([], "anything.txt", "") is False


def test_excluded_relative_to_prefix():
    patterns = create_excludes_from_wildcard(["main*"])
    assert is_url_excluded(patterns, "dir/main.py", "dir")
    assert is_url_excluded(patterns, "dir/main.py", "dir/")
    assert not is_url_excluded(patterns, "dir/a/main.py", "dir")


def test_star_spans_directories():
    patterns = create_excludes_from_wildcard(["*.txt"])
    assert is_url_excluded(patterns, "a/file.txt", "")
    assert not is_url_excluded(patterns, "a/file.py", "")


def test_question_mark_matches_single_character():
    patterns = create_excludes_from_wildcard(["?.md"])
    assert is_url_excluded(patterns, "a.md", "")
    assert not is_url_excluded(patterns, "ab.md", "")


def test_any_of_several_patterns():
    patterns = create_excludes_from_wildcard(["*.txt", "*.gz"])
    assert is_url_excluded(patterns, "x.gz", "")
    assert is_url_excluded(patterns, "x.txt", "")
    assert not is_url_excluded(patterns, "readme.md", "")