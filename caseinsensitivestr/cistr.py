"""
A string that compares and hashes case-insensitively but keeps its original case.
"""

import functools
import logging
import typing
from . import config, folding, storage


logger = logging.getLogger("caseinsensitivestr")

_BYTES_TYPES = (bytes, bytearray, memoryview)


def _text_of(value: typing.Any) -> typing.Optional[str]:
    """
    Get the original text of a CaseInsensitiveString or str.

    Returns None for any other type.
    """
    if isinstance(value, CaseInsensitiveString):
        return value.text
    if isinstance(value, str):
        return value
    return None


def _decode(data: bytes, errors: str) -> str:
    """
    Decode UTF-8 bytes.

    With errors="strict" invalid input raises UnicodeDecodeError; otherwise it is
    handled according to errors (U+FFFD substitution for "replace").
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        if errors == "strict":
            raise
        logger.debug(f"Invalid UTF-8 at position {e.start} while building a CaseInsensitiveString, using errors='{errors}'")
        return data.decode("utf-8", errors)


@functools.total_ordering
class CaseInsensitiveString:
    """
    A string with case-insensitive equality, ordering and hashing.

    The original case is kept for str(), formatting, iteration, indexing and
    serialization. Folding is only applied when comparing or hashing.

    Instances can be compared with other CaseInsensitiveStrings and with plain
    strs. Note that hash(CaseInsensitiveString("a")) != hash("A"), so sets and
    dicts should hold wrapped keys (see CaseInsensitiveDict).

    Public str methods that are not defined here (e.g. startswith() or split())
    are forwarded to the original text and return plain strs.
    """

    __slots__ = ("_value",)

    _fold = staticmethod(folding.get_folder(config.settings.fold))
    _storage = storage.get_storage(config.settings.storage)

    def __init__(self, value: typing.Union[str, bytes, "CaseInsensitiveString"] = "", errors: str = "replace"):
        if isinstance(value, CaseInsensitiveString):
            text = value.text
        elif isinstance(value, str):
            text = value
        elif isinstance(value, _BYTES_TYPES):
            text = _decode(bytes(value), errors)
        else:
            raise TypeError(f"CaseInsensitiveString() argument must be str, bytes or CaseInsensitiveString, not {type(value).__name__}")
        self._value = self._storage.encode(text)

    @property
    def text(self) -> str:
        """
        The original, unfolded text.
        """
        return self._storage.decode(self._value)

    @property
    def inner(self) -> typing.Union[str, bytes]:
        """
        The raw stored value: a str, or UTF-8 bytes with the compact backend.
        """
        return self._value

    def into_string(self) -> str:
        return self.text

    def as_bytes(self) -> bytes:
        """
        Get the original text encoded as UTF-8.
        """
        return self.text.encode("utf-8")

    def folded(self) -> str:
        """
        Get the folded form used for comparison and hashing.
        """
        return self._fold(self.text)

    def remove(self, idx: int) -> "CaseInsensitiveString":
        """
        Return a copy with the character at idx removed.

        Negative indices count from the end. Raises IndexError if idx is out of range.
        """
        text = self.text
        if not -len(text) <= idx < len(text):
            raise IndexError("remove index out of range")
        if idx < 0:
            idx += len(text)
        return type(self)(text[:idx] + text[idx + 1:])

    def __eq__(self, other):
        other_text = _text_of(other)
        if other_text is None:
            return NotImplemented
        return self._fold(self.text) == self._fold(other_text)

    def __lt__(self, other):
        other_text = _text_of(other)
        if other_text is None:
            return NotImplemented
        return self._fold(self.text) < self._fold(other_text)

    def __hash__(self):
        return hash(self._fold(self.text))

    def __add__(self, other):
        other_text = _text_of(other)
        if other_text is None:
            return NotImplemented
        return type(self)(self.text + other_text)

    def __radd__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return type(self)(other + self.text)

    def __len__(self):
        return len(self.text)

    def __iter__(self):
        return iter(self.text)

    def __getitem__(self, key):
        return self.text[key]

    def __contains__(self, item):
        item_text = _text_of(item)
        if item_text is None:
            raise TypeError(f"'in <CaseInsensitiveString>' requires string as left operand, not {type(item).__name__}")
        return item_text in self.text

    def __str__(self):
        return self.text

    def __format__(self, format_spec):
        return format(self.text, format_spec)

    def __repr__(self):
        return f"{type(self).__name__}({self.text!r})"

    def __reduce__(self):
        return (type(self), (self.text,))

    def __getattr__(self, name):
        # Only reached for names not found normally; private names are never forwarded
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        # Read the slot directly; going through self.text would land back here if it is unset
        try:
            value = object.__getattribute__(self, "_value")
        except AttributeError:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'") from None
        return getattr(self._storage.decode(value), name)
