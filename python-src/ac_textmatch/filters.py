def is_word_char(char: str) -> bool:
    """
    Word characters are letters, digits and the underscore.
    """
    return char.isalnum() or char == "_"


def is_isolated(text: str, start_index: int, end_index: int) -> bool:
    """
    Check that a span of ``text`` is not glued to adjacent word characters.
    :param text: Original text.
    :param start_index: First index of the span (inclusive).
    :param end_index: Last index of the span (inclusive).
    :return: True if the characters on both sides, when present, are not word
        characters.
    """
    if start_index > 0 and is_word_char(text[start_index - 1]):
        return False
    if end_index + 1 < len(text) and is_word_char(text[end_index + 1]):
        return False
    return True


def is_exact_match(text: str, start_index: int, end_index: int, pattern: str) -> bool:
    """
    Whole-token, case-exact check applied to candidates in exact-match mode.
    :param text: Original (unfolded) text.
    :param start_index: First index of the candidate (inclusive).
    :param end_index: Last index of the candidate (inclusive).
    :param pattern: Original (unfolded) pattern the candidate was found for.
    """
    if not is_isolated(text, start_index, end_index):
        return False
    return text[start_index : end_index + 1] == pattern
