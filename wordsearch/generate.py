"""
generate.py

Depth-first candidate generation.

Words are built left to right. A fixed position contributes its one known
letter; a free position branches once per allowed letter, in alphabetical
order. A string that reaches the target length is kept when it is a
dictionary word, so results come out in a fixed, reproducible order.

Optimizations included:

1. Prefix pruning
   Every prefix of every dictionary word of the target length is indexed.
   A partial string outside that index cannot grow into a dictionary word,
   so its whole subtree is skipped. Results and their order are the same
   as the exhaustive search.

2. Parallel first branch
   The branches of the first free position are independent, so they can be
   handed to a process pool, one task per letter. Results are collected in
   branch order, which keeps the output identical to the serial search.
"""

import multiprocessing as mp

from tqdm import tqdm


_WORKER_STATE = {}


def build_prefix_index(dictionary, word_length) -> frozenset:
    """All prefixes (including "" and the word itself) of words of ``word_length``."""
    prefixes = set()
    for word in dictionary:
        if len(word) != word_length:
            continue
        for end in range(word_length + 1):
            prefixes.add(word[:end])
    return frozenset(prefixes)


def _extend(current, constraints, dictionary, prefixes):
    if prefixes is not None and current not in prefixes:
        return []

    position = len(current)
    if position >= constraints.word_length:
        return [current] if current in dictionary else []

    fixed = constraints.positions[position]
    letters = (fixed,) if fixed is not None else constraints.alphabet

    found = []
    for c in letters:
        found.extend(_extend(current + c, constraints, dictionary, prefixes))
    return found


def generate_candidates(constraints, dictionary, prune=True) -> list[str]:
    """Every dictionary word matching the positional constraints and alphabet."""
    prefixes = build_prefix_index(dictionary, constraints.word_length) if prune else None
    return _extend("", constraints, dictionary, prefixes)


def split_branches(constraints):
    """
    Starting strings for the top-level branches of the search.

    The fixed letters before the first free position form a common stem;
    each allowed letter appended to it is one branch. Returns an empty list
    when no position is free.
    """
    stem = []
    for c in constraints.positions:
        if c is None:
            return ["".join(stem) + letter for letter in constraints.alphabet]
        stem.append(c)
    return []


def _init_worker(constraints, dictionary, prefixes):
    _WORKER_STATE["constraints"] = constraints
    _WORKER_STATE["dictionary"] = dictionary
    _WORKER_STATE["prefixes"] = prefixes


def _worker_branch(branch):
    return _extend(
        branch,
        _WORKER_STATE["constraints"],
        _WORKER_STATE["dictionary"],
        _WORKER_STATE["prefixes"],
    )


def search(constraints, dictionary, workers=1, prune=True, progress=False) -> list[str]:
    """
    Run the full generation, optionally in parallel and with a progress bar.

    ``workers`` greater than one spreads the first free position's branches
    over that many processes. The result is the same list, in the same order,
    as ``generate_candidates``.
    """
    prefixes = build_prefix_index(dictionary, constraints.word_length) if prune else None
    branches = split_branches(constraints)

    if not branches:
        return _extend("", constraints, dictionary, prefixes)

    found = []
    if workers <= 1:
        for branch in tqdm(branches, desc="First letter", disable=not progress):
            found.extend(_extend(branch, constraints, dictionary, prefixes))
        return found

    start_methods = mp.get_all_start_methods()
    start_method = "fork" if "fork" in start_methods else "spawn"
    ctx = mp.get_context(start_method)

    with ctx.Pool(
        processes=min(workers, len(branches)),
        initializer=_init_worker,
        initargs=(constraints, dictionary, prefixes),
    ) as pool:
        results = pool.imap(_worker_branch, branches, chunksize=1)
        for words in tqdm(
            results, total=len(branches), desc="First letter", disable=not progress
        ):
            found.extend(words)

    return found
