"""
constraints.py

Turns the raw comma-separated flag values into the immutable search
constraints used by the generator.

Parsing is permissive: any token that is not a single lowercase letter
(or, for known positions, a 1-based digit followed by a letter) is skipped
instead of failing the run. A malformed token simply contributes nothing.
"""

import re
from dataclasses import dataclass
from string import ascii_lowercase


ALPHABET = tuple(ascii_lowercase)
KNOWN_TOKEN = re.compile(r"[0-9][a-z]")


@dataclass(frozen=True)
class Constraints:
    word_length: int
    excluded: frozenset
    alphabet: tuple
    required: tuple
    positions: tuple

    @property
    def known(self) -> dict:
        """Fixed slots as a 0-based {position: letter} mapping."""
        return {i: c for i, c in enumerate(self.positions) if c is not None}

    def free_positions(self) -> list:
        return [i for i, c in enumerate(self.positions) if c is None]


def _tokens(text):
    if not text:
        return []
    return [token.strip() for token in text.lower().split(",")]


def _is_letter(token):
    return len(token) == 1 and token in ascii_lowercase


def parse_excluded(text) -> frozenset:
    return frozenset(token for token in _tokens(text) if _is_letter(token))


def parse_included(text, excluded=frozenset()) -> tuple:
    """
    Required letters in first-seen order, duplicates dropped.

    A letter that is also excluded is never required: exclusion wins.
    """
    required = []
    for token in _tokens(text):
        if _is_letter(token) and token not in excluded and token not in required:
            required.append(token)
    return tuple(required)


def parse_known(text, word_length) -> dict:
    """
    Parse "1m,2o,3u" style tokens into a 0-based {position: letter} dict.

    Tokens must be one digit in 1..word_length followed by one letter.
    When a position is given twice the later token wins. A list with more
    tokens than the word has letters is ignored as a whole.
    """
    tokens = _tokens(text)
    if not tokens or len(tokens) > word_length:
        return {}

    known = {}
    for token in tokens:
        if not KNOWN_TOKEN.fullmatch(token):
            continue
        position = int(token[0]) - 1
        if 0 <= position < word_length:
            known[position] = token[1]
    return known


def allowed_alphabet(excluded) -> tuple:
    return tuple(c for c in ALPHABET if c not in excluded)


def build_constraints(word_length, exclude="", include="", known="") -> Constraints:
    if word_length < 0:
        raise ValueError(f"word length must not be negative: {word_length}")

    excluded = parse_excluded(exclude)
    known_positions = parse_known(known, word_length)
    positions = tuple(known_positions.get(i) for i in range(word_length))

    return Constraints(
        word_length=word_length,
        excluded=excluded,
        alphabet=allowed_alphabet(excluded),
        required=parse_included(include, excluded),
        positions=positions,
    )
