"""String algorithms: multi-pattern search, edit distance, KMP, prefixes and LCS."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from .structures import Trie


class AhoCorasick:
    """Aho-Corasick automaton over characters from ``lowest`` to ``highest``."""

    def __init__(
        self, patterns: Iterable[str], lowest: str = "a", highest: str = "z"
    ) -> None:
        self.patterns = list(patterns)
        self.lowest = lowest
        self.highest = highest
        self._goto: list[dict[str, int]] = [{}]
        self._fail: list[int] = [0]
        self._out: list[list[int]] = [[]]
        for index, word in enumerate(self.patterns):
            state = 0
            for char in word:
                self._check(char)
                nxt = self._goto[state].get(char)
                if nxt is None:
                    nxt = len(self._goto)
                    self._goto[state][char] = nxt
                    self._goto.append({})
                    self._fail.append(0)
                    self._out.append([])
                state = nxt
            self._out[state].append(index)
        queue = deque(self._goto[0].values())
        while queue:
            current = queue.popleft()
            for char, child in self._goto[current].items():
                fail = self._fail[current]
                while char not in self._goto[fail] and fail != 0:
                    fail = self._fail[fail]
                fail = self._goto[fail].get(char, 0)
                self._fail[child] = fail
                present = set(self._out[child])
                self._out[child].extend(v for v in self._out[fail] if v not in present)
                queue.append(child)

    def _check(self, char: str) -> None:
        if not self.lowest <= char <= self.highest:
            raise ValueError(f"character {char!r} is outside the alphabet")

    def next_state(self, state: int, char: str) -> int:
        """State reached from ``state`` on input ``char``."""
        self._check(char)
        while char not in self._goto[state] and state != 0:
            state = self._fail[state]
        return self._goto[state].get(char, 0)

    def find(self, text: str) -> list[list[int]]:
        """Start positions of every occurrence of each pattern, per pattern."""
        found: list[list[int]] = [[] for _ in self.patterns]
        state = 0
        for i, char in enumerate(text):
            state = self.next_state(state, char)
            for j in self._out[state]:
                found[j].append(i - len(self.patterns[j]) + 1)
        return found


def edit_distance(src: str, dst: str) -> int:
    """Levenshtein distance between two strings."""
    previous = list(range(len(dst) + 1))
    for i, a in enumerate(src, start=1):
        current = [i]
        for j, b in enumerate(dst, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def kmp_table(pattern: str) -> list[int]:
    """Knuth-Morris-Pratt failure table of length ``len(pattern) + 1``."""
    table = [-1] * (len(pattern) + 1)
    if not pattern:
        return table
    pos, cnd = 1, 0
    while pos < len(pattern):
        if pattern[pos] == pattern[cnd]:
            table[pos] = table[cnd]
        else:
            table[pos] = cnd
            while cnd >= 0 and pattern[pos] != pattern[cnd]:
                cnd = table[cnd]
        pos += 1
        cnd += 1
    table[pos] = cnd
    return table


def kmp(text: str, pattern: str) -> int:
    """First index of ``pattern`` in ``text``, or -1 if it does not occur."""
    if not pattern:
        return 0
    table = kmp_table(pattern)
    j = k = 0
    while j < len(text):
        if pattern[k] == text[j]:
            j += 1
            k += 1
            if k == len(pattern):
                return j - k
        else:
            k = table[k]
            if k < 0:
                j += 1
                k += 1
    return -1


def shortest_prefix(text: str, words: Iterable[str]) -> int | None:
    """Length of the shortest non-empty word that is a prefix of ``text``.

    Words must use the letters ``a`` to ``z``. Returns None if no word matches.
    """
    trie = Trie()
    for word in words:
        trie.insert(word)
    base = ord(trie.base)
    node = 0
    for length, char in enumerate(text, start=1):
        index = ord(char) - base
        if not 0 <= index < trie.size:
            return None
        node = trie.children[node][index]
        if node < 0:
            return None
        if trie.leaves[node]:
            return length
    return None


def longest_common_subsequence(a: Sequence[str], b: Sequence[str]) -> str:
    """One longest common subsequence of two strings."""
    # Each cell holds (length, position of the last matched pair or None).
    rows = [[(0, None)] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            best = (0, None)
            if rows[i - 1][j][0] > best[0]:
                best = rows[i - 1][j]
            if rows[i][j - 1][0] > best[0]:
                best = rows[i][j - 1]
            if rows[i - 1][j - 1][0] + 1 > best[0] and a[i - 1] == b[j - 1]:
                best = (rows[i - 1][j - 1][0] + 1, (i - 1, j - 1))
            rows[i][j] = best
    chars = []
    link = rows[len(a)][len(b)][1]
    while link is not None:
        i, j = link
        chars.append(a[i])
        link = rows[i][j][1]
    return "".join(reversed(chars))