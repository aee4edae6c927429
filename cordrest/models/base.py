from __future__ import annotations

import datetime
from typing import Any, Callable, Mapping, Optional, Sequence, Type, TypeVar

import attr

__all__ = ("Model", "Snowflake")

Snowflake = Any
""" Discord IDs, sent as strings but ints are accepted everywhere """

M = TypeVar("M", bound="Model")


class Model:
    """Mixin for the attrs classes that mirror discord's JSON objects,
    the attribute names are the JSON keys.
    """

    @classmethod
    def from_json(cls: Type[M], data: Mapping[str, Any]) -> M:
        """Build the model from a decoded JSON object, keys that the
        model does not know about are ignored.
        """

        if isinstance(data, cls):
            return data

        names = {field.name for field in attr.fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})

    def to_json(self) -> Mapping[str, Any]:
        """Serialize the model back into a JSON object, fields that
        are `None` are left out.
        """

        return attr.asdict(
            self,
            filter=lambda _, value: value is not None,
            value_serializer=_serialize,
        )


def _serialize(_: Any, __: Any, value: Any) -> Any:
    if isinstance(value, datetime.datetime):
        return value.isoformat()
    return value


def model(cls: Type[M]) -> Callable[[Any], Optional[M]]:
    """Converter for a nested object"""

    def convert(value: Any) -> Optional[M]:
        if value is None:
            return None
        return cls.from_json(value)

    return convert


def models(cls: Type[M]) -> Callable[[Any], Optional[Sequence[M]]]:
    """Converter for a list of nested objects"""

    def convert(value: Any) -> Optional[Sequence[M]]:
        if value is None:
            return None
        return [cls.from_json(item) for item in value]

    return convert


def iso_timestamp(value: Any) -> Optional[datetime.datetime]:
    """Converter for ISO8601 timestamps"""

    if value is None or isinstance(value, datetime.datetime):
        return value
    # older interpreters reject the Z suffix
    return datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
