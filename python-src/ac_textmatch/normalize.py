from collections.abc import Callable

from .match import StringComparison

Fold = Callable[[str], str]


def _identity(text: str) -> str:
    return text


def _fold_char(char: str) -> str:
    upper = char.upper()
    # "ß".upper() == "SS"; such characters stay as they are to keep offsets.
    return upper if len(upper) == 1 else char


def _upper_fold(text: str) -> str:
    upper = text.upper()
    if len(upper) == len(text):
        return upper
    return "".join(_fold_char(char) for char in text)


def get_fold(comparison: StringComparison) -> Fold:
    """
    Return the per-character transform for a comparison mode. Every fold keeps
    the string length so folded offsets line up with the original text.
    :param comparison: Comparison mode the matcher was built with.
    :return: Callable mapping a string to its folded form.
    """
    comparison = StringComparison(comparison)
    if comparison.ignore_case:
        return _upper_fold
    return _identity


def normalize_string(text: str, comparison: StringComparison) -> str:
    """
    Fold a string the same way patterns and scanned texts are folded.
    :param text: String to fold.
    :param comparison: Comparison mode to apply.
    :return: Folded string of the same length.
    """
    return get_fold(comparison)(text)
