"""
wordle_solver.py

Command-line app for solving Wordle problems.

Lists every dictionary word of the requested length that fits what is
known so far:

--exclude m,s,e: letters known not to be in the word (free positions only)
--include m,s,e: letters known to be in the word, position unknown
--known 1m,2o,3u: letters known to sit at a given 1-based position

Optional:
--save: write the solutions to solutions.txt instead of printing them.
--debug: print the parsed constraints before searching.
--workers N: search the first free letter's branches in N processes.
--no-prune: brute force every string instead of pruning by dictionary prefix.
--progress: show a progress bar over the first free letter's branches.
"""

import argparse

from tqdm import tqdm

from wordsearch.constraints import build_constraints
from wordsearch.generate import search
from wordsearch.letters import filter_required
from wordsearch.words import DictionaryError, load_dictionary


DEFAULT_DICTIONARY = "freebsd_words.txt"
DEFAULT_LENGTH = 5
SOLUTIONS_FILE = "solutions.txt"


def _non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def _positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def print_constraints(constraints):
    """Debug trace of the parsed constraints."""
    print("Letters to exclude:")
    for c in sorted(constraints.excluded):
        print(c)
    print()

    print("Valid letters:")
    for c in constraints.alphabet:
        print(c)
    print()

    print("Required letters:")
    for c in constraints.required:
        print(c)
    print()

    print("Known letters:")
    for position, letter in constraints.known.items():
        print(f"{position + 1} = {letter}")
    print()


def save_solutions(words, path=SOLUTIONS_FILE):
    with open(path, "w", encoding="utf-8") as handle:
        for word in words:
            handle.write(word + "\n")


def solve(
    dictionary_file,
    constraints,
    save=False,
    workers=1,
    prune=True,
    progress=False,
):
    """
    Load the dictionary, search, filter by required letters and emit results.

    Returns the list of solutions. Raises DictionaryError before any search
    or output when the dictionary cannot be loaded.
    """
    dictionary = load_dictionary(dictionary_file)

    words = search(
        constraints, dictionary, workers=workers, prune=prune, progress=progress
    )
    words = filter_required(words, constraints.required)

    if save:
        save_solutions(words)
        if progress:
            tqdm.write(f"Saved {len(words)} solution(s) to {SOLUTIONS_FILE}.")
    else:
        for word in words:
            print(word)

    return words


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Command-line app for solving Wordle problems."
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print intermediate results to ensure the application is running correctly.",
    )
    parser.add_argument(
        "--dict",
        dest="dictionary",
        type=str,
        default=DEFAULT_DICTIONARY,
        help="Text file from which to read in English-language words, one per line "
        f"(default: {DEFAULT_DICTIONARY}).",
    )
    parser.add_argument(
        "--length",
        type=_non_negative_int,
        default=DEFAULT_LENGTH,
        help=f"The length of the word to be found (default: {DEFAULT_LENGTH}).",
    )
    parser.add_argument(
        "--exclude",
        type=str,
        default="",
        help="Letters known to not be in the word, separated by commas. "
        "For example: --exclude m,s,e",
    )
    parser.add_argument(
        "--include",
        type=str,
        default="",
        help="Letters known to be in the word but whose positions are unknown, "
        "separated by commas. For example: --include m,s,e",
    )
    parser.add_argument(
        "--known",
        type=str,
        default="",
        help="Known positions and letters, separated by commas. "
        "For example: --known 1m,2o,3u",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help=f"Save the potential solutions in {SOLUTIONS_FILE}.",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=1,
        help="Worker processes for the first free letter's branches (default: 1).",
    )
    parser.add_argument(
        "--no-prune",
        dest="prune",
        action="store_false",
        help="Try every letter combination instead of pruning by dictionary prefix.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar over the first free letter's branches.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    constraints = build_constraints(
        args.length,
        exclude=args.exclude,
        include=args.include,
        known=args.known,
    )

    if args.debug:
        print_constraints(constraints)

    try:
        solve(
            args.dictionary,
            constraints,
            save=args.save,
            workers=args.workers,
            prune=args.prune,
            progress=args.progress,
        )
    except DictionaryError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
