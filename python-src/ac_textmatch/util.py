from collections.abc import Iterable
from typing import Any

from .errors import InvalidArgumentError


def ensure_not_none(value: Any, param: str) -> None:
    """
    Fail fast when a required argument is missing.
    :param value: Argument received by the caller.
    :param param: Name of the parameter, reported in the error.
    """
    if value is None:
        raise InvalidArgumentError(param)


def to_patterns(patterns: Iterable[str]) -> tuple[str, ...]:
    """
    Materialise the pattern source once so identifiers stay stable even when
    the caller hands in a generator.
    :param patterns: Strings to find in text, in identifier order.
    :return: Tuple of patterns; index i is the identifier of pattern i.
    """
    ensure_not_none(patterns, "patterns")
    result = tuple(patterns)
    for index, pattern in enumerate(result):
        if pattern is None:
            raise InvalidArgumentError(f"patterns[{index}]")
    return result
