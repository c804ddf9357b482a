"""
Settings read from the environment when the package is imported.

CISTR_FOLD selects the case folding ("unicode" or "ascii") and CISTR_STORAGE
selects the storage backend ("str" or "compact"). Both are fixed for the life
of the process, since changing them would change the hashes of existing keys.
"""

import logging
import os
import typing
from . import folding, storage


logger = logging.getLogger("caseinsensitivestr")

FOLD_VAR = "CISTR_FOLD"
STORAGE_VAR = "CISTR_STORAGE"

DEFAULT_FOLD = "unicode"
DEFAULT_STORAGE = "str"


class Settings:
    """
    The selected fold mode and storage backend.
    """

    __slots__ = ("fold", "storage")

    def __init__(self, fold: str = DEFAULT_FOLD, storage: str = DEFAULT_STORAGE): # pylint: disable=redefined-outer-name
        self.fold = fold
        self.storage = storage

    def __repr__(self):
        return f"Settings(fold={self.fold!r}, storage={self.storage!r})"


def _choice(environ: typing.Mapping[str, str], field: str, choices: typing.Iterable[str], default: str) -> str:
    """
    Read one field from the environment, validating it against the choices.

    Invalid values are logged and replaced by the default.
    """
    value = environ.get(field)
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    choices = sorted(choices)
    if value not in choices:
        logger.warning(f"Error: Field '{field}' must be one of {choices}, got '{value}'. Defaulting to '{default}'.")
        return default
    return value


def load_settings(environ: typing.Mapping[str, str] = None) -> Settings:
    """
    Build the settings from a mapping of environment variables.

    If no mapping is given, os.environ is used.
    """
    if environ is None:
        environ = os.environ
    result = Settings(_choice(environ, FOLD_VAR, folding.FOLDERS, DEFAULT_FOLD),
                      _choice(environ, STORAGE_VAR, storage.BACKENDS, DEFAULT_STORAGE))
    logger.debug(f"Using {result}")
    return result


settings = load_settings()
