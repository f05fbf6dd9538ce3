from dataclasses import dataclass
from enum import Enum


class StringComparison(str, Enum):
    """
    Character equality rules used when building and scanning the automaton.
    """

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal_ignore_case"
    CURRENT_CULTURE = "current_culture"
    CURRENT_CULTURE_IGNORE_CASE = "current_culture_ignore_case"
    INVARIANT_CULTURE = "invariant_culture"
    INVARIANT_CULTURE_IGNORE_CASE = "invariant_culture_ignore_case"

    @property
    def ignore_case(self) -> bool:
        return self.value.endswith("_ignore_case")


class MatchMode(str, Enum):
    FUZZY = "fuzzy"
    EXACT_MATCH = "exact_match"


@dataclass(frozen=True)
class Match:
    """
    A single occurrence of a pattern in a text.

    Both indices are inclusive and refer to the original text. ``value`` is the
    text as it appears there, not the folded form used for matching.
    """

    start_index: int
    end_index: int
    value: str
