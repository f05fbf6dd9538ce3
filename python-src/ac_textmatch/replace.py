import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Optional, TypeVar

from .errors import InvalidArgumentError
from .match import Match

logger = logging.getLogger(__name__)

T = TypeVar("T")


def replace_spans(
    text: str,
    spans: Iterable[tuple[int, int, T]],
    substitute: Callable[[T], Optional[str]],
) -> str:
    """
    Rebuild ``text`` with one substitution per non-overlapping span.

    Spans are taken in ascending start order; spans sharing a start keep the
    order they were discovered in. A span starting before the end of an
    already replaced span is skipped entirely.
    :param text: Original text.
    :param spans: ``(start_index, end_index, payload)`` triples, both indices
        inclusive.
    :param substitute: Called with the payload of each applied span; ``None``
        is treated as an empty string.
    :return: Text with substitutions applied.
    """
    ordered = sorted(spans, key=lambda span: span[0])
    if not ordered:
        return text

    parts: list[str] = []
    cursor = 0
    skipped = 0
    for start, end, payload in ordered:
        if start < cursor:
            skipped += 1
            continue
        parts.append(text[cursor:start])
        replacement = substitute(payload)
        parts.append(replacement if replacement is not None else "")
        cursor = end + 1
    parts.append(text[cursor:])

    logger.debug(
        "Applied %d replacements, skipped %d overlapping",
        len(ordered) - skipped,
        skipped,
    )
    return "".join(parts)


def replace_constant(text: str, matches: Iterable[Match], replacement: str) -> str:
    return replace_spans(
        text,
        ((m.start_index, m.end_index, m) for m in matches),
        lambda _: replacement,
    )


def replace_with_provider(
    text: str,
    matches: Iterable[Match],
    provider: Callable[[Match], Optional[str]],
) -> str:
    return replace_spans(
        text, ((m.start_index, m.end_index, m) for m in matches), provider
    )


def check_replacements(replacements: Sequence[str], pattern_count: int) -> tuple[str, ...]:
    """
    Validate a positional replacement list against the pattern set.
    :param replacements: One replacement per pattern, in pattern order.
    :param pattern_count: Number of patterns the matcher was built with.
    :return: The replacements as a tuple.
    """
    result = tuple(replacements)
    if len(result) != pattern_count:
        raise InvalidArgumentError(
            "replacements",
            f"expected {pattern_count} replacements, got {len(result)}",
        )
    for index, replacement in enumerate(result):
        if replacement is None:
            raise InvalidArgumentError(f"replacements[{index}]")
    return result


def replace_by_pattern(
    text: str,
    spans: Iterable[tuple[int, int, int]],
    replacements: Sequence[str],
) -> str:
    """
    Substitute each span with the replacement of the pattern that produced it.
    :param text: Original text.
    :param spans: ``(start_index, end_index, pattern_id)`` triples.
    :param replacements: Validated replacement per pattern identifier.
    """
    return replace_spans(text, spans, replacements.__getitem__)
