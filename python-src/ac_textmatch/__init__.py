"""
Aho-Corasick multi-pattern search and replace.
"""

import logging

from .automaton import Automaton, build_failure_links, build_trie, compile_automaton
from .errors import InvalidArgumentError
from .match import Match, MatchMode, StringComparison
from .matcher import MatchSequence, TextMatcher, search_in_text, search_in_texts
from .normalize import normalize_string
from .settings import MatcherSettings, get_settings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "search_in_text",
    "search_in_texts",
    "normalize_string",
    "compile_automaton",
    "build_trie",
    "build_failure_links",
    "get_settings",
    "Automaton",
    "InvalidArgumentError",
    "Match",
    "MatchMode",
    "MatchSequence",
    "MatcherSettings",
    "StringComparison",
    "TextMatcher",
]
