from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Optional, Union

from .automaton import Automaton, compile_automaton
from .errors import InvalidArgumentError
from .filters import is_exact_match
from .match import Match, MatchMode, StringComparison
from .normalize import get_fold
from .replace import (
    check_replacements,
    replace_by_pattern,
    replace_constant,
    replace_with_provider,
)
from .settings import get_settings
from .util import ensure_not_none, to_patterns

logger = logging.getLogger(__name__)

Replacement = Union[str, Callable[[Match], Optional[str]], Sequence[str]]


class MatchSequence:
    """
    Lazy view of the matches of one text. Every iteration rescans the text,
    so the sequence can be consumed any number of times.
    """

    def __init__(self, matcher: TextMatcher, text: str):
        self._matcher = matcher
        self._text = text

    def __iter__(self) -> Iterator[Match]:
        return self._matcher._iter_matches(self._text)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return next(iter(self), None) is not None

    def __repr__(self) -> str:
        return f"MatchSequence({list(self)!r})"


class TextMatcher:
    """
    Finds and replaces every occurrence of a fixed set of patterns.

    The automaton is compiled once in the constructor and never changes, so a
    matcher can be shared freely between threads.
    """

    def __init__(
        self,
        patterns: Iterable[str],
        comparison: Optional[StringComparison] = None,
        match_mode: Optional[MatchMode] = None,
    ):
        """
        :param patterns: Strings to look for; the position of each one is its
            identifier.
        :param comparison: Character equality rules. Defaults to the
            ``default_comparison`` setting.
        :param match_mode: Fuzzy substring or whole-word exact matching.
            Defaults to the ``default_match_mode`` setting.
        """
        self._patterns = to_patterns(patterns)

        settings = get_settings()
        self._comparison = StringComparison(
            comparison if comparison is not None else settings.default_comparison
        )
        self._match_mode = MatchMode(
            match_mode if match_mode is not None else settings.default_match_mode
        )
        self._fold = get_fold(self._comparison)
        self._automaton = compile_automaton([self._fold(p) for p in self._patterns])
        logger.debug(
            "TextMatcher ready: comparison=%s, match_mode=%s",
            self._comparison.value,
            self._match_mode.value,
        )

    @property
    def patterns(self) -> tuple[str, ...]:
        return self._patterns

    @property
    def comparison(self) -> StringComparison:
        return self._comparison

    @property
    def match_mode(self) -> MatchMode:
        return self._match_mode

    @property
    def automaton(self) -> Automaton:
        return self._automaton

    def _iter_raw(self, text: str) -> Iterator[tuple[int, int, int]]:
        automaton = self._automaton
        for end, pattern_id in automaton.scan(self._fold(text)):
            yield automaton.start_of(end, pattern_id), end, pattern_id

    def _iter_matches(self, text: str) -> Iterator[Match]:
        exact = self._match_mode is MatchMode.EXACT_MATCH
        for start, end, pattern_id in self._iter_raw(text):
            if exact and not is_exact_match(text, start, end, self._patterns[pattern_id]):
                continue
            yield Match(start, end, text[start : end + 1])

    def find(
        self, text: str, on_match: Optional[Callable[[Match], None]] = None
    ) -> Optional[MatchSequence]:
        """
        Find every occurrence of every pattern in ``text``.

        Matches are ordered by end index; matches sharing an end index come
        longest pattern first. Overlapping and nested matches are all reported.
        :param text: Text to search.
        :param on_match: Optional callback. When given, it is called once per
            match, in order, and nothing is returned.
        :return: Restartable sequence of matches, or None with a callback.
        """
        ensure_not_none(text, "text")
        if on_match is None:
            return MatchSequence(self, text)

        if not callable(on_match):
            raise InvalidArgumentError("on_match", "must be callable")
        for match in self._iter_matches(text):
            on_match(match)
        return None

    def find_all(self, texts: Iterable[str]) -> dict[str, MatchSequence]:
        """
        Run ``find`` over several texts.
        :param texts: Texts to search. Equal texts share one entry.
        :return: Mapping of text -> its matches.
        """
        ensure_not_none(texts, "texts")
        results: dict[str, MatchSequence] = {}
        for text in texts:
            results[text] = self.find(text)
        return results

    def search(self, text: str) -> list[Match]:
        """
        Eager form of ``find``.
        :param text: Text to search.
        :return: List of matches.
        """
        ensure_not_none(text, "text")
        return list(self._iter_matches(text))

    def search_many(self, texts: Iterable[str]) -> list[list[Match]]:
        """
        Search several texts, keeping one result per input (duplicates
        included), in input order.
        """
        ensure_not_none(texts, "texts")
        return [self.search(text) for text in texts]

    def replace(self, text: str, replacement: Replacement) -> str:
        """
        Replace matches in ``text``, leftmost match first; matches overlapping
        an already replaced one are skipped.

        ``replacement`` may be:

        * a string, used for every match;
        * a callable taking the ``Match`` and returning its replacement
          (``None`` counts as an empty string);
        * a sequence of strings, one per pattern. Each match is replaced by
          the entry of the pattern that produced it. This form ignores the
          match mode and always uses plain substring matches.
        :param text: Text to rewrite.
        :param replacement: Constant, provider or per-pattern replacements.
        :return: Rewritten text.
        """
        ensure_not_none(text, "text")
        ensure_not_none(replacement, "replacement")

        if isinstance(replacement, str):
            return replace_constant(text, self._iter_matches(text), replacement)
        if callable(replacement):
            return replace_with_provider(text, self._iter_matches(text), replacement)
        if isinstance(replacement, Sequence):
            replacements = check_replacements(replacement, len(self._patterns))
            return replace_by_pattern(text, self._iter_raw(text), replacements)

        raise InvalidArgumentError(
            "replacement",
            f"expected str, callable or sequence of str, got {type(replacement).__name__}",
        )


def search_in_text(
    patterns: Iterable[str],
    text: str,
    comparison: Optional[StringComparison] = None,
    match_mode: Optional[MatchMode] = None,
) -> list[Match]:
    """
    Search a single text with a throwaway matcher.
    :param patterns: Strings to find in text.
    :param text: Text to search.
    :param comparison: Character equality rules.
    :param match_mode: Fuzzy or exact matching.
    :return: List of matches.
    """
    return TextMatcher(patterns, comparison, match_mode).search(text)


def search_in_texts(
    patterns: Iterable[str],
    texts: Iterable[str],
    comparison: Optional[StringComparison] = None,
    match_mode: Optional[MatchMode] = None,
) -> list[list[Match]]:
    """
    Search several texts with one matcher. Results are aligned with ``texts``.
    """
    return TextMatcher(patterns, comparison, match_mode).search_many(texts)
