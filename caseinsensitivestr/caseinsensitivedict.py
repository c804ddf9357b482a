"""
A case-insensitive dictionary that keeps the original case of the keys.

From https://stackoverflow.com/a/30221547/5745575.
"""
import typing
from collections.abc import ItemsView, KeysView
from .cistr import CaseInsensitiveString


_MISSING = object()


def _is_key(key: typing.Any) -> bool:
    return isinstance(key, (str, CaseInsensitiveString))


def _wrap_new_key(key: typing.Any) -> CaseInsensitiveString:
    """
    Wrap a key that is about to be stored.

    Raises TypeError for anything but str or CaseInsensitiveString keys.
    """
    if not _is_key(key):
        raise TypeError(f"CaseInsensitiveDict keys must be str or CaseInsensitiveString, not {type(key).__name__}")
    return CaseInsensitiveString(key)


class CaseInsensitiveDict(dict):
    """
    A simple case-insensitive dictionary that keeps the original case of the key.

    When a key is set again with a different case, the value is updated but the
    case of the first insertion is kept.
    """
    def __init__(self, d: typing.Mapping[str, typing.Any] = None, **kwargs):
        super().__init__()
        self.update(d, **kwargs)

    def __setitem__(self, key, value):
        return super().__setitem__(_wrap_new_key(key), value)

    def __getitem__(self, key):
        if not _is_key(key):
            raise KeyError(key)
        return super().__getitem__(CaseInsensitiveString(key))

    def __contains__(self, key):
        if not _is_key(key):
            return False
        return super().__contains__(CaseInsensitiveString(key))

    def __delitem__(self, key):
        if not _is_key(key):
            raise KeyError(key)
        return super().__delitem__(CaseInsensitiveString(key))

    def __iter__(self):
        return (k.text for k in super().__iter__())

    def __repr__(self):
        return f"{type(self).__name__}({self.to_dict()!r})"

    def pop(self, k, d=_MISSING):
        if not _is_key(k):
            if d is _MISSING:
                raise KeyError(k)
            return d
        if d is _MISSING:
            return super().pop(CaseInsensitiveString(k))
        return super().pop(CaseInsensitiveString(k), d)

    def get(self, key, default=None):
        if not _is_key(key):
            return default
        return super().get(CaseInsensitiveString(key), default)

    def setdefault(self, key, default=None):
        return super().setdefault(_wrap_new_key(key), default)

    def update(self, d: typing.Union[typing.Mapping[str, typing.Any], typing.Iterable[typing.Tuple[str, typing.Any]]] = None, **kwargs): # pylint: disable=arguments-differ
        if d is not None:
            pairs = d.items() if hasattr(d, "items") else d
            for k, v in pairs:
                self.__setitem__(k, v)
        for k, v in kwargs.items():
            self.__setitem__(k, v)

    def copy(self):
        return type(self)(self)

    def to_dict(self):
        return {k: v for k, v in self.items()}

    def keys(self):
        return KeysView(self)

    def items(self):
        return ItemsView(self)
