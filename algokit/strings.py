"""String routines: brackets, prefixes, encodings and character counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import groupby, product, zip_longest

_KEYPAD = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}
_VOWELS = frozenset("aeiou")
_EVEN_DIGITS = "02468"
_CLOSERS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_CLOSERS.values())
_REMOVABLE = {"B": "A", "D": "C"}
_MAX_RUN = 9


def remove_outer_parentheses(s: str) -> str:
    """Drop the outermost pair of every primitive group in a bracket string."""
    kept: list[str] = []
    depth = 0
    for ch in s:
        if ch == "(":
            if depth > 0:
                kept.append(ch)
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth > 0:
                kept.append(ch)
    return "".join(kept)


def longest_common_prefix(words: Sequence[str]) -> str:
    """Longest prefix shared by every string in ``words``."""
    if not words:
        raise ValueError("words must not be empty")
    first, last = min(words), max(words)
    prefix: list[str] = []
    for a, b in zip(first, last):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)


def letter_combinations(digits: str) -> list[str]:
    """All letter strings a phone keypad can spell from ``digits``."""
    if not digits:
        return []
    try:
        groups = [_KEYPAD[d] for d in digits]
    except KeyError as exc:
        raise ValueError(f"not a keypad digit: {exc.args[0]!r}") from None
    return ["".join(letters) for letters in product(*groups)]


def largest_odd_number(num: str) -> str:
    """Longest prefix of the digit string ``num`` that ends in an odd digit."""
    return num.rstrip(_EVEN_DIGITS)


def count_vowels(word: str) -> int:
    """Total number of vowels summed over every substring of ``word``."""
    n = len(word)
    return sum((n - i) * (i + 1) for i, ch in enumerate(word) if ch in _VOWELS)


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and sorted(s) == sorted(t)


def is_circular_sentence(sentence: str) -> bool:
    """Whether each word ends with the letter the next word starts with, wrapping round."""
    if not sentence:
        raise ValueError("sentence must not be empty")
    if sentence[0] != sentence[-1]:
        return False
    return all(
        before == after
        for before, ch, after in zip(sentence, sentence[1:], sentence[2:])
        if ch == " "
    )


def min_length(s: str) -> int:
    """Length left after repeatedly removing every "AB" and "CD" substring."""
    stack: list[str] = []
    for ch in s:
        if stack and _REMOVABLE.get(ch) == stack[-1]:
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def min_changes(s: str) -> int:
    """Fewest flips that make every aligned pair of characters equal."""
    return sum(a != b for a, b in zip(s[::2], s[1::2]))


def score_of_string(s: str) -> int:
    """Sum of absolute code-point differences between adjacent characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in zip(s, s[1:]))


def compressed_string(word: str) -> str:
    """Run-length encoding with runs of at most nine, count before character."""
    parts: list[str] = []
    for ch, run in groupby(word):
        length = sum(1 for _ in run)
        full, rest = divmod(length, _MAX_RUN)
        parts.extend(f"{_MAX_RUN}{ch}" for _ in range(full))
        if rest:
            parts.append(f"{rest}{ch}")
    return "".join(parts)


def count_k_constraint_substrings(s: str, k: int) -> int:
    """Number of substrings holding at most ``k`` zeros or at most ``k`` ones."""
    count = 0
    for start in range(len(s)):
        zeros = ones = 0
        for ch in s[start:]:
            if ch == "0":
                zeros += 1
            else:
                ones += 1
            if zeros <= k or ones <= k:
                count += 1
            else:
                break
    return count


def _binary(digits: str) -> str:
    value = int(digits)
    return format(value, "b") if value else ""


def convert_date_to_binary(date: str) -> str:
    """Rewrite a "YYYY-MM-DD" date with each field in binary."""
    return "-".join(_binary(part) for part in (date[0:4], date[5:7], date[8:10]))


def _shift(ch: str) -> str:
    return "a" if ch == "z" else chr(ord(ch) + 1)


def kth_character(k: int) -> str:
    """The ``k``-th character of the word grown by appending its shifted copy."""
    if k < 1:
        raise ValueError("k must be at least 1")
    word = "a"
    while len(word) < k:
        word += "".join(_shift(ch) for ch in word)
    return word[k - 1]


def first_uniq_char(s: str) -> int:
    """Index of the first character that occurs once, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def add_binary(a: str, b: str) -> str:
    """Sum of two binary digit strings, as a binary digit string."""
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, bit = divmod(carry + int(x) + int(y), 2)
        digits.append(str(bit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def rotate_string(s: str, goal: str) -> bool:
    """Whether ``goal`` is some rotation of ``s``."""
    return len(s) == len(goal) and goal in s + s


def is_valid_parentheses(s: str) -> bool:
    """Whether the brackets ``()[]{}`` in ``s`` are properly nested and closed."""
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack or stack.pop() != _CLOSERS.get(ch):
            return False
    return not stack


def check_valid_string(s: str) -> bool:
    """Whether ``s`` can be balanced when each "*" stands for "(", ")" or nothing."""
    low = high = 0
    for ch in s:
        if ch == "(":
            low += 1
            high += 1
        elif ch == ")":
            low -= 1
            high -= 1
        else:
            low -= 1
            high += 1
        if high < 0:
            return False
        low = max(low, 0)
    return low == 0