"""Aho-Corasick automaton and two puzzles built on a trie of words."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

_ROOT = 0
_NONE = -1


@dataclass(slots=True)
class _Node:
    children: dict[str, int] = field(default_factory=dict)
    fail: int = _ROOT
    output: int = _NONE
    word: str | None = None


class AhoCorasick:
    """Finds every occurrence of a set of words in a text in one pass."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._nodes = [_Node()]
        self._built = True
        for word in words:
            self.add(word)

    def add(self, word: str) -> None:
        """Insert a non-empty word into the dictionary."""
        if not word:
            raise ValueError("words must not be empty")
        current = _ROOT
        for char in word:
            child = self._nodes[current].children.get(char)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(_Node())
                self._nodes[current].children[char] = child
            current = child
        self._nodes[current].word = word
        self._built = False

    def build(self) -> None:
        """Compute the suffix links and the links to the nearest word ends."""
        nodes = self._nodes
        root = nodes[_ROOT]
        root.fail = _ROOT
        root.output = _NONE
        pending: deque[int] = deque()
        for child in root.children.values():
            nodes[child].fail = _ROOT
            nodes[child].output = _NONE
            pending.append(child)
        while pending:
            parent = pending.popleft()
            for char, child in nodes[parent].children.items():
                link = nodes[parent].fail
                while link != _ROOT and char not in nodes[link].children:
                    link = nodes[link].fail
                target = nodes[link].children.get(char, _ROOT)
                node = nodes[child]
                node.fail = target
                if target != _ROOT and nodes[target].word is not None:
                    node.output = target
                else:
                    node.output = nodes[target].output
                pending.append(child)
        self._built = True

    def matches(self, text: str) -> Iterator[tuple[int, str]]:
        """Yield ``(start, word)`` for every occurrence of a word in text.

        Occurrences are reported in order of their last character.
        """
        if not self._built:
            self.build()
        nodes = self._nodes
        state = _ROOT
        for index, char in enumerate(text):
            while state != _ROOT and char not in nodes[state].children:
                state = nodes[state].fail
            state = nodes[state].children.get(char, _ROOT)
            hit = state if nodes[state].word is not None else nodes[state].output
            while hit != _NONE and hit != _ROOT:
                word = nodes[hit].word
                yield index - len(word) + 1, word
                hit = nodes[hit].output


def split_into_prefixes(text: str, target: str) -> list[str] | None:
    """Split target into pieces that are all prefixes of text, or return None.

    Longer pieces are tried first at every position, so the split returned is
    the first one found by a depth-first search in that order.
    """
    if not target:
        return []
    automaton = AhoCorasick(text[:length] for length in range(1, len(text) + 1))
    size = len(target)
    longest = [0] * size
    for start, word in automaton.matches(target):
        longest[start] = max(longest[start], len(word))

    dead: set[int] = set()
    pieces: list[int] = []
    stack = [(0, longest[0])]
    while stack:
        position, length = stack[-1]
        if position == size:
            return [text[:piece] for piece in pieces]
        if length == 0:
            dead.add(position)
            stack.pop()
            if pieces:
                pieces.pop()
            continue
        stack[-1] = (position, length - 1)
        following = position + length
        if following in dead:
            continue
        pieces.append(length)
        stack.append((following, longest[following] if following < size else 0))
    return None


def prefix_owned_counts(
    entries: Iterable[tuple[str, str]], length: int
) -> list[tuple[str, int]]:
    """Count the numbers of a given length that each owner's prefix claims.

    Each entry is ``(prefix, owner)``. A number of ``length`` decimal digits
    belongs to the owner of the longest registered prefix it starts with.
    Owners whose prefix is longer than ``length`` come first with 0, in input
    order; the rest follow sorted by owner, each with the count for the last
    prefix given to it.
    """
    too_long: list[tuple[str, int]] = []
    owner_prefix: dict[str, str] = {}
    registered: set[str] = set()
    for prefix, owner in entries:
        if len(prefix) > length:
            too_long.append((owner, 0))
            continue
        registered.add(prefix)
        owner_prefix[owner] = prefix

    claimed = {prefix: 10 ** (length - len(prefix)) for prefix in registered}
    for prefix in registered:
        for cut in range(len(prefix) - 1, -1, -1):
            ancestor = prefix[:cut]
            if ancestor in registered:
                claimed[ancestor] -= 10 ** (length - len(prefix))
                break
    return too_long + [
        (owner, claimed[owner_prefix[owner]]) for owner in sorted(owner_prefix)
    ]