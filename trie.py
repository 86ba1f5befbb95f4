# trie.py
# Prefix tree over 'a'..'z'. Nodes live in a flat arena, node 0 is the root,
# and each node keeps one child slot per letter holding an arena index.

import time
from typing import Iterable, Iterator, List, Optional, Dict

from colorama import Fore
from utils import (
    ALPHA_SIZE, FIRST_LETTER, LAST_LETTER, UNSET,
    letter_index, index_letter, log_with_time, vlog,
)


class InvalidInputError(ValueError):
    """Raised when a word is not a string made only of lowercase ASCII letters."""

    def __init__(self, word, reason=None):
        self.word = word
        if reason is None:
            reason = _describe_invalid(word)
        super().__init__(f"invalid word {word!r}: {reason}")


def _describe_invalid(word) -> str:
    if not isinstance(word, str):
        return f"expected str, got {type(word).__name__}"
    for pos, ch in enumerate(word):
        if not (FIRST_LETTER <= ch <= LAST_LETTER):
            return f"character {ch!r} at position {pos} is outside '{FIRST_LETTER}'..'{LAST_LETTER}'"
    return "unknown"


class TrieNode:
    """One character position. ``children[i]`` is the arena index of the child
    for letter ``i`` or None while that slot is unset."""

    __slots__ = ("char", "term", "children")

    def __init__(self, char: str = UNSET):
        self.char = char
        self.term = False
        self.children: List[Optional[int]] = [None] * ALPHA_SIZE

    def has_children(self) -> bool:
        return any(c is not None for c in self.children)

    def __repr__(self):
        return f"TrieNode({self.char!r}, term={self.term})"


class Trie:
    """
    Lowercase trie with the API we want:
      - Trie.build(words) -> Trie
      - insert(str) -> Trie (chainable)
      - is_word(str) -> bool
      - get_words() -> sorted List[str]
      - iter_words() -> lazy Iterator[str], same order
    Internals:
      _nodes: List[TrieNode]; node 0 is the root and never marks a word.
    Not thread safe: wrap the whole trie in a lock if writers are shared.
    """

    __slots__ = ("_nodes", "_word_count")

    def __init__(self):
        self._nodes: List[TrieNode] = [TrieNode(UNSET)]  # root at 0
        self._word_count = 0

    # ---------- Public API ----------
    @classmethod
    def build(cls, words: Iterable[str]) -> "Trie":
        """
        Build a trie from the given words. Every word is validated before the
        first insert, so an invalid entry raises and nothing is built.
        """
        t0 = time.time()
        words = list(words)
        for w in words:
            if not cls.is_lowercase_only(w):
                raise InvalidInputError(w)
        trie = cls()
        for w in words:
            trie._add(w)
        vlog(f"Trie built ({len(trie)} words, {trie.node_count} nodes)", t0)
        return trie

    def insert(self, word: str) -> "Trie":
        """Add ``word``; returns self so calls can be chained."""
        if not self.is_lowercase_only(word):
            raise InvalidInputError(word)
        self._add(word)
        return self

    def is_word(self, word: str) -> bool:
        """True if ``word`` was inserted as a complete word."""
        if not self.is_lowercase_only(word):
            raise InvalidInputError(word)
        idx = self._walk(word)
        return (idx is not None) and self._nodes[idx].term

    def get_words(self) -> List[str]:
        return list(self.iter_words())

    def iter_words(self) -> Iterator[str]:
        """
        Yield every stored word in lexicographic order.
        Depth-first over an explicit stack; each entry carries its own path,
        so siblings never share a buffer.
        """
        nodes = self._nodes
        stack = [(0, UNSET)]
        while stack:
            idx, path = stack.pop()
            node = nodes[idx]
            if node.term:
                yield path
            # pushed in reverse so 'a' is popped first
            for i in range(ALPHA_SIZE - 1, -1, -1):
                child = node.children[i]
                if child is not None:
                    stack.append((child, path + index_letter(i)))

    @staticmethod
    def is_lowercase_only(s) -> bool:
        """True if ``s`` is a str of 'a'..'z' only (the empty string qualifies)."""
        if not isinstance(s, str):
            return False
        return all(FIRST_LETTER <= ch <= LAST_LETTER for ch in s)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def summary(self) -> Dict[str, int]:
        max_depth = 0
        stack = [(0, 0)]
        while stack:
            idx, depth = stack.pop()
            max_depth = max(max_depth, depth)
            for child in self._nodes[idx].children:
                if child is not None:
                    stack.append((child, depth + 1))
        return {"words": self._word_count, "nodes": len(self._nodes), "max_depth": max_depth}

    def print_summary(self):
        s = self.summary()
        log_with_time(f"[TRIE SUMMARY] Words: {s['words']}", color=Fore.CYAN)
        log_with_time(f"[TRIE SUMMARY] Nodes (incl. root): {s['nodes']}", color=Fore.CYAN)
        log_with_time(f"[TRIE SUMMARY] Longest word: {s['max_depth']}", color=Fore.CYAN)

    def __contains__(self, word) -> bool:
        if not self.is_lowercase_only(word):
            return False
        return self.is_word(word)

    def __iter__(self) -> Iterator[str]:
        return self.iter_words()

    def __len__(self) -> int:
        return self._word_count

    def __repr__(self):
        return f"Trie(words={self._word_count}, nodes={len(self._nodes)})"

    # ---------- Helpers ----------
    def _add(self, word: str):
        """Insert an already validated word. Empty words are a no-op."""
        if not word:
            return
        nodes = self._nodes
        cur = 0
        for ch in word:
            slots = nodes[cur].children
            i = letter_index(ch)
            nxt = slots[i]
            if nxt is None:
                nodes.append(TrieNode(ch))
                nxt = len(nodes) - 1
                slots[i] = nxt
            cur = nxt
        if not nodes[cur].term:
            nodes[cur].term = True
            self._word_count += 1

    def _walk(self, s: str) -> Optional[int]:
        """Return node index after consuming s, or None if no such path."""
        idx = 0
        nodes = self._nodes
        for ch in s:
            nxt = nodes[idx].children[letter_index(ch)]
            if nxt is None:
                return None
            idx = nxt
        return idx
