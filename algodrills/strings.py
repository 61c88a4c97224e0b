"""String drills: anagrams, prefixes, parsing, permutations, rotations and numerals."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def is_anagram(a: str, b: str) -> bool:
    """Return True if the two strings hold the same characters the same number of times."""
    return len(a) == len(b) and sorted(a) == sorted(b)


def _lcs_length(first: str, second: str) -> int:
    previous = [0] * (len(second) + 1)
    for ch in first:
        current = [0]
        for j, other in enumerate(second, start=1):
            if ch == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def min_insertions(text: str) -> int:
    """Return the fewest characters to insert to make the text a palindrome."""
    return len(text) - _lcs_length(text, text[::-1])


def atoi(text: str) -> int:
    """Parse an optionally negative decimal integer made only of digits.

    Raises ValueError on any other character. An empty string, or a lone
    minus sign, reads as 0.
    """
    sign = 1
    digits = text
    if digits.startswith("-"):
        sign = -1
        digits = digits[1:]
    value = 0
    for ch in digits:
        if not "0" <= ch <= "9":
            raise ValueError(f"invalid character {ch!r} in {text!r}")
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def strstr(text: str, pattern: str) -> int | None:
    """Return the index of the first occurrence of pattern in text, or None."""
    if not text:
        return None
    index = text.find(pattern)
    return None if index < 0 else index


def longest_common_prefix(words: Sequence[str]) -> str:
    """Return the longest prefix shared by all words; empty if there is none."""
    if not words:
        return ""
    shortest = min(words, key=len)
    for i, ch in enumerate(shortest):
        if any(word[i] != ch for word in words):
            return shortest[:i]
    return shortest


def longest_common_prefix_or_marker(words: Sequence[str]) -> str:
    """Return the longest prefix shared by all words, or "-1" if even the first characters differ.

    If the shortest word is empty the result is the empty string.
    """
    if not words:
        raise ValueError("words must not be empty")
    shortest = min(len(word) for word in words)
    first = words[0]
    for i in range(shortest):
        if any(word[i] != first[i] for word in words[1:]):
            return "-1" if i == 0 else first[:i]
    return first[:shortest]


def longest_distinct_substring(text: str) -> int:
    """Return the length of the longest run of characters with no repeats."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, ch in enumerate(text):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best


def permutations(text: str) -> Iterator[str]:
    """Yield every distinct permutation of the text in lexicographic order."""
    chars = sorted(text)
    while True:
        yield "".join(chars)
        pivot = len(chars) - 2
        while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
            pivot -= 1
        if pivot < 0:
            return
        successor = len(chars) - 1
        while chars[successor] <= chars[pivot]:
            successor -= 1
        chars[pivot], chars[successor] = chars[successor], chars[pivot]
        chars[pivot + 1:] = reversed(chars[pivot + 1:])


def remove_duplicates(text: str) -> str:
    """Keep only the first occurrence of each character."""
    return "".join(dict.fromkeys(text))


def reverse_words(text: str) -> str:
    """Reverse the order of the dot-separated words."""
    return ".".join(reversed(text.split(".")))


def roman_to_decimal(numeral: str) -> int:
    """Return the value of a Roman numeral; an empty numeral is 0."""
    total = 0
    previous = 0
    for ch in numeral:
        try:
            value = _ROMAN[ch]
        except KeyError:
            raise ValueError(f"invalid Roman digit {ch!r}") from None
        if previous and value > previous:
            total += value - 2 * previous
        else:
            total += value
        previous = value
    return total


def is_rotated(first: str, second: str) -> bool:
    """Return True if ``first`` is ``second`` rotated two places left or right."""
    if len(first) != len(second):
        return False
    if len(second) < 2:
        return first == second
    left = second[2:] + second[:2]
    right = second[-2:] + second[:-2]
    return first in (left, right)