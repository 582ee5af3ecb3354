"""
words.py

Handles locating and loading the dictionary word list.
No numpy here, just clean text handling.
"""

from pathlib import Path


DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class DictionaryError(ValueError):
    """Raised when the dictionary file cannot be read or holds no words."""


def resolve_dictionary_path(path):
    """
    Return the dictionary path to read.

    The path is used as given when it exists. A relative path that does not
    exist is also looked up in the data directory next to this source tree,
    so the default word list is found even when Python is launched from a
    different current working directory.
    """
    path = Path(path)
    if path.exists() or path.is_absolute():
        return path

    bundled = DATA_DIR / path
    if bundled.exists():
        return bundled
    return path


def load_word_list(path):
    """
    Load a newline-separated word list, lowercased, in file order.

    Trailing whitespace is stripped; a blank line becomes the empty word.
    """
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip().lower() for line in f]


def load_dictionary(path):
    """
    Returns:
        dictionary: frozenset of lowercase words read from ``path``

    Raises DictionaryError when the file is missing, unreadable or empty.
    """
    path = resolve_dictionary_path(path)
    try:
        words = load_word_list(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryError(
            f"Failed to read in words from the text file: {path}"
        ) from exc

    if not words:
        raise DictionaryError(f"Failed to read in words from the text file: {path}")

    return frozenset(words)
