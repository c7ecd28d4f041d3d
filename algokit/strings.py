"""String algorithms: palindromes, subsequences, supersequences, windows, brackets."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator

_BRACKETS = {")": "(", "]": "[", "}": "{"}
_DIGITS = frozenset("0123456789")


def _lcs_length(a: str, b: str) -> int:
    previous = [0] * (len(b) + 1)
    for char_a in a:
        current = [0]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_palindromic_subsequence(s: str) -> int:
    """Return the length of the longest palindromic subsequence of ``s``."""
    n = len(s)
    if n == 0:
        return 0
    below = [0] * n
    for i in reversed(range(n)):
        row = [0] * n
        row[i] = 1
        for j in range(i + 1, n):
            if s[i] == s[j]:
                row[j] = below[j - 1] + 2
            else:
                row[j] = max(below[j], row[j - 1])
        below = row
    return below[n - 1]


def longest_palindromic_substring(s: str) -> str:
    """Return the longest palindromic substring, the earliest centre winning ties.

    When no palindrome of length two or more exists the first character is returned.
    """
    if len(s) <= 1:
        return s
    best_start, best_length = 0, 0
    for centre in range(1, len(s)):
        for low, high in ((centre - 1, centre + 1), (centre - 1, centre)):
            while low >= 0 and high < len(s) and s[low] == s[high]:
                if high - low + 1 > best_length:
                    best_start, best_length = low, high - low + 1
                low -= 1
                high += 1
    if best_length == 0:
        return s[0]
    return s[best_start:best_start + best_length]


def min_insert_delete(a: str, b: str) -> int:
    """Return the fewest insertions and deletions that turn ``a`` into ``b``."""
    return len(a) + len(b) - 2 * _lcs_length(a, b)


def shortest_supersequence_length(x: str, y: str) -> int:
    """Return the length of the shortest string having both inputs as subsequences."""
    return len(x) + len(y) - _lcs_length(x, y)


def longest_repeating_subsequence(s: str) -> int:
    """Return the length of the longest subsequence occurring twice at distinct positions."""
    n = len(s)
    previous = [0] * (n + 1)
    for i in range(1, n + 1):
        current = [0] * (n + 1)
        for j in range(1, n + 1):
            if s[i - 1] == s[j - 1] and i != j:
                current[j] = previous[j - 1] + 1
            else:
                current[j] = max(previous[j], current[j - 1])
        previous = current
    return previous[n]


def shortest_common_supersequence(a: str, b: str) -> str:
    """Return a shortest string that has both ``a`` and ``b`` as subsequences."""
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        table[i][0] = i
    for j in range(n + 1):
        table[0][j] = j
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(table[i - 1][j], table[i][j - 1])

    reversed_chars: list[str] = []
    i, j = m, n
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            reversed_chars.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] <= table[i][j - 1]:
            reversed_chars.append(a[i - 1])
            i -= 1
        else:
            reversed_chars.append(b[j - 1])
            j -= 1
    reversed_chars.extend(reversed(a[:i]))
    reversed_chars.extend(reversed(b[:j]))
    return "".join(reversed(reversed_chars))


def min_insertions_palindrome(s: str) -> int:
    """Return the fewest character insertions that make ``s`` a palindrome."""
    return len(s) - longest_palindromic_subsequence(s)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def count_matching_subsequences(s: str, words: Iterable[str]) -> int:
    """Count the words (with repetition) that are subsequences of ``s``."""
    waiting: defaultdict[str, list[Iterator[str]]] = defaultdict(list)
    matched = 0
    for word in words:
        cursor = iter(word)
        first = next(cursor, None)
        if first is None:
            matched += 1
        else:
            waiting[first].append(cursor)
    for char in s:
        for cursor in waiting.pop(char, []):
            following = next(cursor, None)
            if following is None:
                matched += 1
            else:
                waiting[following].append(cursor)
    return matched


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` containing every character of ``t``.

    Repeated characters of ``t`` must be matched as often; "" when there is none.
    """
    if not t:
        return ""
    need = Counter(t)
    missing = len(t)
    best_start, best_length = 0, None
    left = 0
    for right, char in enumerate(s):
        if need[char] > 0:
            missing -= 1
        need[char] -= 1
        while missing == 0:
            width = right + 1 - left
            if best_length is None or width < best_length:
                best_start, best_length = left, width
            need[s[left]] += 1
            if need[s[left]] > 0:
                missing += 1
            left += 1
    if best_length is None:
        return ""
    return s[best_start:best_start + best_length]


def is_valid_brackets(s: str) -> bool:
    """Tell whether ``s`` is a well nested string of (), [] and {} only."""
    opened: list[str] = []
    for char in s:
        if char in "([{":
            opened.append(char)
        elif opened and _BRACKETS.get(char) == opened[-1]:
            opened.pop()
        else:
            return False
    return not opened


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group words made of the same letters, groups in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in words:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def min_partitions(n: str) -> int:
    """Return how many deci-binary numbers at least are needed to sum to decimal ``n``."""
    if not n or not set(n) <= _DIGITS:
        raise ValueError(f"expected a non-empty string of decimal digits, got {n!r}")
    return int(max(n))