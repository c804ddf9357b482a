"""
Case folding functions used for case-insensitive comparison and hashing.
"""

import string
import typing


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def unicode_fold(text: str) -> str:
    """
    Fold a string using full Unicode case folding.

    "Café" and "CAFÉ" fold to the same string, as do "Straße" and "STRASSE".
    """
    return text.casefold()


def ascii_fold(text: str) -> str:
    """
    Fold a string by lowercasing only the ASCII letters A-Z.

    All other characters are left untouched, so "Café" and "CAFÉ" do not match.
    """
    return text.translate(_ASCII_LOWER)


FOLDERS = {
    "unicode": unicode_fold,
    "ascii": ascii_fold,
} # type: typing.Dict[str, typing.Callable[[str], str]]


def get_folder(name: str) -> typing.Callable[[str], str]:
    """
    Get a fold function by name ("unicode" or "ascii").

    Raises ValueError if the name is unknown.
    """
    try:
        return FOLDERS[name]
    except KeyError as e:
        raise ValueError(f"Unknown fold mode: {name}") from e
