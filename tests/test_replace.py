import pytest
from ac_textmatch import (
    InvalidArgumentError,
    MatchMode,
    StringComparison,
    TextMatcher,
)

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua. "
)
LOREM_WITH_JEDI = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod "
    "tempor incididunt ut labore et dolore magna Jedi."
)


def test_replace_invalid():
    """
    Missing text or replacement is rejected before any work is done.
    """
    matcher = TextMatcher(["a"])

    with pytest.raises(InvalidArgumentError) as exc_info:
        matcher.replace(None, "x")
    assert exc_info.value.param == "text"

    with pytest.raises(InvalidArgumentError) as exc_info:
        matcher.replace("abc", None)
    assert exc_info.value.param == "replacement"

    with pytest.raises(InvalidArgumentError):
        matcher.replace("abc", 42)


def test_replace_simple():
    matcher = TextMatcher(["a"])
    assert matcher.replace("banana", "x") == "bxnxnx"


def test_replace_provider():
    """
    The provider is called once per match with the match itself.
    """
    matcher = TextMatcher(["Jedi"])
    result = matcher.replace(LOREM_WITH_JEDI, lambda m: f"[{m.value}]")

    assert "[Jedi]" in result
    assert result.endswith("magna [Jedi].")


def test_replace_provider_none_is_empty():
    matcher = TextMatcher(["na"])
    assert matcher.replace("banana", lambda m: None) == "ba"


def test_replace_overlapping_constant():
    """
    Overlapping matches are skipped once an earlier one has been applied.
    """
    matcher = TextMatcher(["a", "aa"])
    assert matcher.replace("aa", "-") == "--"


def test_replace_leftmost_wins():
    """
    Among matches sharing a start, the first one found wins.
    """
    matcher = TextMatcher(["abc", "bcd", "ab"])
    # ab (0-1) is found before abc (0-2); bcd (1-3) then overlaps it.
    assert matcher.replace("abcd", lambda m: m.value.upper()) == "ABcd"


def test_replace_by_pattern():
    """
    Positional replacements are chosen by the pattern that matched.
    """
    matcher = TextMatcher(["Lorem", "elit", "magna"])
    result = matcher.replace(LOREM, ["EPIC", "TRUE", "REPLACEMENT"])

    assert "EPIC" in result and "Lorem" not in result
    assert "TRUE" in result and "elit" not in result
    assert "REPLACEMENT" in result and "magna" not in result


def test_replace_by_pattern_overlapping():
    matcher = TextMatcher(["a", "aa"])
    assert matcher.replace("aa", ["-", "="]) == "--"


def test_replace_by_pattern_ignores_match_mode():
    """
    Positional replacements use plain substring matches even in exact mode.
    """
    matcher = TextMatcher(["cat"], match_mode=MatchMode.EXACT_MATCH)

    assert matcher.replace("concatenate cat", "dog") == "concatenate dog"
    assert matcher.replace("concatenate cat", ["dog"]) == "condogenate dog"


def test_replace_by_pattern_invalid():
    matcher = TextMatcher(["a", "b"])

    with pytest.raises(ValueError) as exc_info:
        matcher.replace("ab", ["x"])
    assert isinstance(exc_info.value, InvalidArgumentError)
    assert exc_info.value.param == "replacements"

    with pytest.raises(InvalidArgumentError) as exc_info:
        matcher.replace("ab", ("x", None))
    assert exc_info.value.param == "replacements[1]"


def test_replace_nothing_to_do():
    """
    No patterns or no matches return the text unchanged.
    """
    assert TextMatcher([]).replace("banana", "x") == "banana"
    assert TextMatcher([]).replace("banana", []) == "banana"
    assert TextMatcher(["z"]).replace("banana", "x") == "banana"


def test_replace_ignore_case():
    matcher = TextMatcher(["jedi"], StringComparison.CURRENT_CULTURE_IGNORE_CASE)
    replaced = matcher.replace(LOREM_WITH_JEDI, "[X]")

    assert "[X]" in replaced
    assert "Jedi" not in replaced
