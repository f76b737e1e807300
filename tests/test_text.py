"""Unit tests for the word, line and search scanners."""
import pytest

from exampleapp.text import count_lines, find_first, scan_words


def test_scan_words_returns_one_entry_per_token():
    """Test that N whitespace-delimited tokens give N words in order."""
    text = "the quick  brown\tfox\njumps over\n\nthe lazy dog"
    words = scan_words(text)
    assert words == text.split()
    assert len(words) == 9


def test_scan_words_keeps_duplicates():
    """Test that repeated words are listed every time they occur."""
    assert scan_words("echo echo echo") == ["echo", "echo", "echo"]


def test_scan_words_strips_punctuation():
    """Test that punctuation separates words and is not part of them."""
    words = scan_words("Hello, world! (Really?) Yes; done.")
    assert words == ["Hello", "world", "Really", "Yes", "done"]


def test_scan_words_joins_apostrophes_and_hyphens():
    """Test that inner apostrophes and hyphens stay inside a word."""
    words = scan_words("It's a well-known fact, don’t you think -- 'quoted'")
    assert words == ["It's", "a", "well-known", "fact", "don’t", "you", "think", "quoted"]


def test_scan_words_handles_unicode_and_digits():
    """Test that non-ASCII letters and digits count as word characters."""
    assert scan_words("naïve café 42 snake_case") == ["naïve", "café", "42", "snake_case"]


def test_scan_words_empty_text():
    """Test that an empty or punctuation-only buffer has no words."""
    assert scan_words("") == []
    assert scan_words(" ... --- !!! ") == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("a", 1),
        ("a\n", 1),
        ("a\nb", 2),
        ("a\nb\n", 2),
        ("\n", 1),
        ("\n\n", 2),
        ("a\r\nb\r\nc", 3),
        ("a\rb", 2),
        ("a\u2029b", 2),
    ],
)
def test_count_lines(text, expected):
    """Test that line counting follows the iterator convention."""
    assert count_lines(text) == expected


def test_count_lines_separator_count_plus_one():
    """Test that L newlines without a trailing one give L + 1 lines."""
    text = "\n".join(f"line {index}" for index in range(25))
    assert text.count("\n") == 24
    assert count_lines(text) == 25


def test_find_first_is_case_insensitive():
    """Test that the first match ignores case and spans the query."""
    text = "Hello World"
    assert find_first(text, "world") == (6, 11)
    assert text[6:11] == "World"


def test_find_first_returns_first_match_only():
    """Test that only the earliest occurrence is reported."""
    assert find_first("ab xx AB", "ab") == (0, 2)


def test_find_first_treats_query_literally():
    """Test that regex metacharacters in the query are matched verbatim."""
    assert find_first("axb a.b", "a.b") == (4, 7)
    assert find_first("price (USD)", "(usd)") == (6, 11)


def test_find_first_missing_or_empty_query():
    """Test that an absent or empty query finds nothing."""
    assert find_first("Hello World", "planet") is None
    assert find_first("Hello World", "") is None
    assert find_first("", "x") is None
