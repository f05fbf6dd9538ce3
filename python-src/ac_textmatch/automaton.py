"""
Aho-Corasick automaton: trie construction, failure links and the scan loop.

Nodes live in an arena of parallel tables indexed by node id; the root is
node 0 and failure links are plain ids into the same tables.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .util import ensure_not_none

logger = logging.getLogger(__name__)

ROOT = 0


@dataclass
class TrieTables:
    """Mutable arena used while the automaton is being built."""

    children: list[dict[str, int]]
    fail: list[int]
    outputs: list[list[int]]

    @classmethod
    def empty(cls) -> TrieTables:
        return cls(children=[{}], fail=[ROOT], outputs=[[]])

    def add_node(self) -> int:
        self.children.append({})
        self.fail.append(ROOT)
        self.outputs.append([])
        return len(self.children) - 1


def build_trie(patterns: Sequence[str]) -> TrieTables:
    """
    Insert every pattern into a prefix trie.
    :param patterns: Folded patterns; the index of each is its identifier.
    :return: Arena with goto edges and each node's own terminal identifiers.
    """
    ensure_not_none(patterns, "patterns")
    tables = TrieTables.empty()

    for pattern_id, pattern in enumerate(patterns):
        state = ROOT
        for char in pattern:
            nxt = tables.children[state].get(char)
            if nxt is None:
                nxt = tables.add_node()
                tables.children[state][char] = nxt
            state = nxt
        tables.outputs[state].append(pattern_id)

    return tables


def build_failure_links(tables: TrieTables) -> None:
    """
    Compute failure links breadth-first and close every node's terminal list
    over its failure chain, own identifiers first.
    :param tables: Arena returned by ``build_trie``; updated in place.
    """
    ensure_not_none(tables, "tables")
    children, fail, outputs = tables.children, tables.fail, tables.outputs

    fail[ROOT] = ROOT
    queue: deque[int] = deque()
    for child in children[ROOT].values():
        fail[child] = ROOT
        outputs[child].extend(outputs[ROOT])
        queue.append(child)

    while queue:
        current = queue.popleft()
        for char, child in children[current].items():
            queue.append(child)
            state = fail[current]
            while state != ROOT and char not in children[state]:
                state = fail[state]
            target = children[state].get(char, ROOT)
            fail[child] = target
            outputs[child].extend(outputs[target])


@dataclass(frozen=True, eq=False)
class Automaton:
    """
    Compiled, read-only automaton. Safe to share between threads.
    """

    children: tuple[dict[str, int], ...]
    fail: tuple[int, ...]
    outputs: tuple[tuple[int, ...], ...]
    pattern_lengths: tuple[int, ...]

    @property
    def node_count(self) -> int:
        return len(self.children)

    @property
    def pattern_count(self) -> int:
        return len(self.pattern_lengths)

    def scan(self, text: str) -> Iterator[tuple[int, int]]:
        """
        Walk the automaton over ``text`` one character at a time.
        :param text: Folded text to scan.
        :return: Iterator of ``(end_index, pattern_id)`` pairs, ordered by end
            index and, within one end index, most specific pattern first.
        """
        if not self.pattern_lengths:
            return

        children, fail, outputs = self.children, self.fail, self.outputs
        state = ROOT
        for index, char in enumerate(text):
            while state != ROOT and char not in children[state]:
                state = fail[state]
            state = children[state].get(char, ROOT)
            for pattern_id in outputs[state]:
                yield index, pattern_id

    def start_of(self, end_index: int, pattern_id: int) -> int:
        return end_index - self.pattern_lengths[pattern_id] + 1


def compile_automaton(patterns: Sequence[str]) -> Automaton:
    """
    Build the trie and failure links for a set of folded patterns.
    :param patterns: Folded patterns in identifier order.
    :return: Immutable automaton.
    """
    tables = build_trie(patterns)
    build_failure_links(tables)
    automaton = Automaton(
        children=tuple(tables.children),
        fail=tuple(tables.fail),
        outputs=tuple(tuple(out) for out in tables.outputs),
        pattern_lengths=tuple(len(p) for p in patterns),
    )
    logger.debug(
        "Compiled automaton: %d patterns, %d nodes",
        automaton.pattern_count,
        automaton.node_count,
    )
    return automaton
