"""Substring search: KMP, Rabin-Karp, and repeated string matching."""

from __future__ import annotations

_BASE = 131
_MASK = (1 << 64) - 1


def build_lps(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table for pattern."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> int:
    """Return the first index of pattern in text, or -1, using KMP."""
    if not pattern:
        return 0
    lps = build_lps(pattern)
    j = 0
    for i, char in enumerate(text):
        while j > 0 and char != pattern[j]:
            j = lps[j - 1]
        if char == pattern[j]:
            j += 1
        if j == len(pattern):
            return i - j + 1
    return -1


def rabin_karp_search(haystack: str, needle: str) -> int:
    """Return the first index of needle in haystack, or -1, using a rolling hash."""
    size_t, size_p = len(haystack), len(needle)
    if size_p > size_t:
        return -1

    hash_p = hash_w = 0
    pow_b = 1
    for i in range(size_p):
        hash_p = (hash_p * _BASE + ord(needle[i])) & _MASK
        hash_w = (hash_w * _BASE + ord(haystack[i])) & _MASK
        if i < size_p - 1:
            pow_b = (pow_b * _BASE) & _MASK

    if hash_p == hash_w and haystack[:size_p] == needle:
        return 0

    for i in range(size_p, size_t):
        hash_w = (hash_w - ord(haystack[i - size_p]) * pow_b) & _MASK
        hash_w = (hash_w * _BASE + ord(haystack[i])) & _MASK
        start = i - size_p + 1
        if hash_w == hash_p and haystack[start:start + size_p] == needle:
            return start
    return -1


def repeated_string_match(a: str, b: str) -> int:
    """Return the fewest repetitions of a that contain b, or -1 if none do."""
    if not a:
        raise ValueError("a must not be empty")
    times = (len(a) + len(b) - 1) // len(a)
    text = a * max(times, 1)
    if kmp_search(text, b) >= 0:
        return times
    if kmp_search(text + a, b) >= 0:
        return times + 1
    return -1


def main(argv: list[str] | None = None) -> int:
    """Run the sample searches and print their results."""
    pattern = "ababaca"
    print("LPS:", ", ".join(map(str, build_lps(pattern))))
    print("KMP match:", kmp_search("bacbabababababaca", pattern))
    print("Rabin-Karp match:", rabin_karp_search("abcdefg", "bcd"))
    print("Repeated match:", repeated_string_match("a", "aa"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())