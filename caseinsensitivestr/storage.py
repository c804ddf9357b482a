"""
Internal storage backends for CaseInsensitiveString.

A backend only decides how the original text is held in memory. It never
changes comparison, hashing or any other visible behaviour.
"""

import typing


class StrStorage:
    """
    Keeps the text as a plain str.
    """

    name = "str"

    @staticmethod
    def encode(text: str) -> str:
        return text

    @staticmethod
    def decode(raw: str) -> str:
        return raw


class CompactStorage:
    """
    Keeps the text as UTF-8 encoded bytes.

    Lone surrogates are kept with surrogatepass, so any str the plain backend
    accepts round trips unchanged.

    A bytes object has a smaller header than a str, which adds up for large
    numbers of short, mostly ASCII strings.
    """

    name = "compact"

    @staticmethod
    def encode(text: str) -> bytes:
        return text.encode("utf-8", "surrogatepass")

    @staticmethod
    def decode(raw: bytes) -> str:
        return raw.decode("utf-8", "surrogatepass")


BACKENDS = {
    StrStorage.name: StrStorage,
    CompactStorage.name: CompactStorage,
} # type: typing.Dict[str, type]


def get_storage(name: str) -> type:
    """
    Get a storage backend by name ("str" or "compact").

    Raises ValueError if the name is unknown.
    """
    try:
        return BACKENDS[name]
    except KeyError as e:
        raise ValueError(f"Unknown storage backend: {name}") from e
