"""
letters.py

Required-letter filtering over a list of candidate words.

Each word is encoded once as a 26-bit letter-presence mask:

    bit 0 = 'a', bit 1 = 'b', ..., bit 25 = 'z'

A word contains every required letter exactly when

    word_mask & required_mask == required_mask

so the whole candidate list is checked with a single vectorised numpy
comparison. Only presence matters, not how often a letter occurs.
"""

import numpy as np


def letter_mask(letters) -> int:
    """Encode the lowercase ASCII letters of ``letters`` as a bitmask."""
    mask = 0
    for c in letters:
        offset = ord(c) - 97
        if 0 <= offset < 26:
            mask |= 1 << offset
    return mask


def word_masks(words: list[str]) -> np.ndarray:
    """One uint32 letter mask per word, in input order."""
    return np.fromiter(
        (letter_mask(word) for word in words), dtype=np.uint32, count=len(words)
    )


def filter_required(words: list[str], required) -> list[str]:
    """
    Keep the words that contain every required letter at least once.

    An empty ``required`` keeps everything. Input order is preserved.
    """
    words = list(words)
    if not required or not words:
        return words

    required_mask = np.uint32(letter_mask(required))
    keep = (word_masks(words) & required_mask) == required_mask
    return [word for word, ok in zip(words, keep) if ok]
