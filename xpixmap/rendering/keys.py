from __future__ import annotations

from typing import List

KEY_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def key_length(color_count: int) -> int:
    """Return the smallest key length L with len(KEY_ALPHABET) ** L >= color_count."""
    base = len(KEY_ALPHABET)
    length = 1
    capacity = base
    while capacity < color_count:
        length += 1
        capacity *= base
    return length


def color_keys(color_count: int) -> List[str]:
    """Generate ``color_count`` distinct fixed-width keys in lexicographic order."""
    length = key_length(color_count)
    base = len(KEY_ALPHABET)
    digits = [0] * length
    keys: List[str] = []
    while len(keys) < color_count:
        keys.append("".join(KEY_ALPHABET[d] for d in digits))
        pos = length - 1
        while pos >= 0:
            digits[pos] += 1
            if digits[pos] < base:
                break
            digits[pos] = 0
            pos -= 1
    return keys
