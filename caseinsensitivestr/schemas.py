"""
This module contains marshmallow fields for case-insensitive strings and dicts.

Both fields serialize to the original text, so a dump followed by a load gives
back exactly the same casing.
"""

import typing
from marshmallow import fields, ValidationError
from .caseinsensitivedict import CaseInsensitiveDict
from .cistr import CaseInsensitiveString


class CaseInsensitiveStringField(fields.Field):
    """
    A field containing a CaseInsensitiveString.

    The field will be serialized and deserialized as a plain JSON string in its
    original case.
    """

    def _serialize(self, value: typing.Union[str, CaseInsensitiveString], attr: str, obj: typing.Any, **kwargs): # pylint: disable=unused-argument
        return None if value is None else str(value)

    def _deserialize(self, value: typing.Any, attr: str, data: typing.Any, **kwargs): # pylint: disable=unused-argument
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValidationError("Not a valid string.")
        return CaseInsensitiveString(value)


class CaseInsensitiveDictField(fields.Dict):
    """
    A field containing a CaseInsensitiveDict.

    Keys are deserialized as CaseInsensitiveStrings, so keys that only differ in
    case end up as a single entry (the last value wins). Values can be given a
    field with the values argument, like fields.Dict.
    """

    def __init__(self, values: fields.Field = None, **kwargs):
        super().__init__(keys=CaseInsensitiveStringField(), values=values, **kwargs)

    def _deserialize(self, value: typing.Any, attr: str, data: typing.Any, **kwargs):
        result = super()._deserialize(value, attr, data, **kwargs)
        return None if result is None else CaseInsensitiveDict(result)
