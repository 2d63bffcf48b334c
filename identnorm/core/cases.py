"""
Case conversion primitives for generated identifiers.

Two independent snake case paths live here:

* the standard path (``to_snake_case`` and friends) splits words the way
  the ``heck`` crate does, so every uppercase letter that starts a new
  lowercase tail opens a word ("IDs" -> "i_ds");
* the rustc path (``rustc_snake_case``) mirrors the lint rules of the Rust
  compiler, which keep acronym runs together ("IDs" -> "ids").

The two must not be merged: callers pick one with the ``nonstandard`` flag.
"""

from typing import List

import regex

# Character modes used by the standard word splitter
_BOUNDARY = 0
_LOWER = 1
_UPPER = 2


# Alphabetic (letters, letter-like marks and symbols) or any numeric category
_ALNUM_RUN = regex.compile(r"[\p{Alphabetic}\p{N}]+")


def _alnum_chunks(text: str) -> List[str]:
    """Split on every non-alphanumeric character, dropping empty chunks."""
    return _ALNUM_RUN.findall(text)


def split_words(text: str) -> List[str]:
    """
    Split ``text`` into words using the standard boundary rules.

    A boundary is inserted after a lowercase character followed by an
    uppercase one, and before the last letter of an uppercase run when a
    lowercase letter follows it. Digits keep the mode of the character
    before them.

    >>> split_words("HTTPServer_v2")
    ['HTTP', 'Server', 'v2']
    """
    words = []
    for chunk in _alnum_chunks(text):
        init = 0
        mode = _BOUNDARY
        last = len(chunk) - 1
        for i, ch in enumerate(chunk):
            if i == last:
                words.append(chunk[init:])
                break

            nxt = chunk[i + 1]
            if ch.islower():
                next_mode = _LOWER
            elif ch.isupper():
                next_mode = _UPPER
            else:
                next_mode = mode

            if next_mode == _LOWER and nxt.isupper():
                words.append(chunk[init : i + 1])
                init = i + 1
                mode = _BOUNDARY
            elif mode == _UPPER and ch.isupper() and nxt.islower():
                words.append(chunk[init:i])
                init = i
                mode = _BOUNDARY
            else:
                mode = next_mode
    return words


def _lower(word: str) -> str:
    """Lowercase per character; a word-final capital sigma becomes final sigma."""
    last = len(word) - 1
    return "".join(
        "\u03c2" if ch == "\u03a3" and i == last else ch.lower()
        for i, ch in enumerate(word)
    )


def _capitalize(word: str) -> str:
    return word[:1].upper() + _lower(word[1:])


def to_upper_camel_case(text: str) -> str:
    """Convert to UpperCamelCase."""
    return "".join(_capitalize(word) for word in split_words(text))


def to_snake_case(text: str) -> str:
    """Convert to snake_case with the standard splitter."""
    return "_".join(_lower(word) for word in split_words(text))


def to_shouty_snake_case(text: str) -> str:
    """Convert to SHOUTY_SNAKE_CASE with the standard splitter."""
    return "_".join(word.upper() for word in split_words(text))


def rustc_snake_case(text: str) -> str:
    """
    Convert to snake_case following the Rust compiler's own rules.

    Leading underscores are kept (one empty word each), the rest is split on
    ``_`` and then at lower-to-upper transitions only, so a run of capitals
    stays in one word.

    >>> rustc_snake_case("IDs")
    'ids'
    >>> rustc_snake_case("_UserIDs")
    '_user_ids'
    """
    words = []

    stripped = text.lstrip("_")
    words.extend("" for _ in range(len(text) - len(stripped)))

    for segment in stripped.split("_"):
        if not segment:
            continue
        last_upper = False
        buf = ""
        for ch in segment:
            if buf and buf != "'" and ch.isupper() and not last_upper:
                words.append(buf)
                buf = ""
            last_upper = ch.isupper()
            buf += ch.lower()
        words.append(buf)

    return "_".join(words)


def upper_camel(text: str) -> str:
    """UpperCamelCase conversion used for type-like names."""
    return to_upper_camel_case(text)


def snake(text: str, nonstandard: bool = False) -> str:
    """snake_case conversion; ``nonstandard`` selects the rustc splitter."""
    if nonstandard:
        return rustc_snake_case(text)
    return to_snake_case(text)


def shouty_snake(text: str, nonstandard: bool = False) -> str:
    """
    SHOUTY_SNAKE_CASE conversion.

    The nonstandard path upper-cases the rustc snake case result rather than
    splitting on its own.
    """
    if nonstandard:
        return rustc_snake_case(text).upper()
    return to_shouty_snake_case(text)
