from __future__ import annotations

import copy
import json as jsonlib
from typing import Any, Mapping, MutableMapping, MutableSequence, Optional, Sequence

import aiohttp
import attr

__all__ = ("MISSING", "JSONBuilder", "JSONArrayBuilder", "ParamsBuilder", "FormBuilder")


class _MissingSentinel:
    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _MissingSentinel()
""" Marks an argument that was not supplied, `None` is a real value
for some fields (e.g. resetting a nickname).
"""


def _to_json(value: Any) -> Any:
    if hasattr(value, "to_json"):
        return value.to_json()
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    return value


@attr.define(init=False)
class JSONBuilder:
    """Represents a JSON object"""

    inner: MutableMapping[str, Any] = attr.field(init=False)
    """ The inner representation of the JSON """

    def __init__(self, **kwargs: Any):
        self.inner = {}

        for key, value in kwargs.items():
            self.add(key, value)

    def add(self, key: str, value: Any) -> JSONBuilder:
        """Add a key to the JSON mapping

        Parameters
        ----------
        key : builtins.str
            The key.
        value : typing.Any
            The value that the key represents. (Will implicitly
            call `to_json` if the type supports it, also for the
            items of a list).

        Returns
        -------
        cordrest.rest.builders.JSONBuilder
            The builder object, can be used for chaining.
        """

        self.inner[key] = _to_json(value)
        return self

    def add_optional(self, key: str, value: Any) -> JSONBuilder:
        """Same as `add` but skips the key when the value is
        `cordrest.rest.builders.MISSING`.
        """

        if value is not MISSING:
            self.add(key, value)

        return self

    def build(self) -> Mapping[str, Any]:
        """Builds the JSON object into a mapping. (This makes
        a deepcopy of the underlying object).

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
        """

        return copy.deepcopy(self.inner)

    def __bool__(self) -> bool:
        return bool(self.inner)


@attr.define(init=False)
class JSONArrayBuilder:
    """Represents a JSON array, for the few endpoints whose body
    is a list rather than an object.
    """

    inner: MutableSequence[Any] = attr.field(init=False)
    """ The inner representation of the JSON """

    def __init__(self, *items: Any):
        self.inner = []

        for item in items:
            self.append(item)

    def append(self, value: Any) -> JSONArrayBuilder:
        """Append an item (`to_json` is called if the type supports it)"""

        self.inner.append(_to_json(value))
        return self

    def build(self) -> Sequence[Any]:
        return copy.deepcopy(self.inner)


@attr.define(init=False)
class ParamsBuilder:
    """Represents the parameters of the query string, values are
    passed through verbatim (aiohttp does the encoding).
    """

    inner: MutableMapping[str, str] = attr.field(init=False)
    """ The inner representation of the parameters """

    def __init__(self, **kwargs: Any):
        self.inner = {}

        for key, value in kwargs.items():
            self.add(key, value)

    def add(self, key: str, value: Any) -> ParamsBuilder:
        """Add a parameter to the parameters

        Parameters
        ----------
        key : builtins.str
            The key.
        value : typing.Any
            The value that the key represents, booleans are sent
            as ``true``/``false``.

        Returns
        -------
        cordrest.rest.builders.ParamsBuilder
            The builder object, can be used for chaining.
        """

        if isinstance(value, bool):
            value = "true" if value else "false"

        self.inner[key] = str(value)

        return self

    def add_optional(self, key: str, value: Any) -> ParamsBuilder:
        """Same as `add` but skips `MISSING`, `None` and empty strings."""

        if value is not MISSING and value is not None and value != "":
            self.add(key, value)

        return self

    def build(self) -> Mapping[str, str]:
        """Build the parameters into a mapping.

        Returns
        -------
        typing.Mapping[builtins.str, builtins.str]
            The mapping referring to the parameters.
        """

        return dict(self.inner)

    def __bool__(self) -> bool:
        return bool(self.inner)


@attr.define(init=False)
class FormBuilder:
    """Represents a multipart form"""

    fields: MutableSequence[Mapping[str, Any]] = attr.field(init=False)
    """ The raw fields that the form contains """

    def __init__(self):
        self.fields = []

    def add_field(
        self,
        name: str,
        value: Any,
        content_type: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> FormBuilder:
        """Adds an field to the form.

        Parameters
        ----------
        name : builtins.str
            The name of the field.
        value : typing.Any
            The value of the field (can be bytes!)
        content_type : typing.Optional[builtins.str]
            The content-type of the value, defaults to
            `application/octet-stream`.
        filename : typing.Optional[builtins.str]
            The filename of the field.

        Returns
        -------
        cordrest.rest.builders.FormBuilder
            The builder object, can be used for chaining.
        """

        if content_type is None:
            content_type = "application/octet-stream"

        self.fields.append(
            dict(
                name=name,
                value=value,
                content_type=content_type,
                filename=filename,
            )
        )
        return self

    def add_json(self, json: Mapping[str, Any]) -> FormBuilder:
        """Shortcut for adding the `payload_json` field to a
        form.

        Parameters
        ----------
        json : typing.Mapping[builtins.str, typing.Any]
            The JSON data that you want to attach.

        Returns
        -------
        cordrest.rest.builders.FormBuilder
            The builder object, can be used for chaining.
        """

        self.add_field(
            name="payload_json",
            value=jsonlib.dumps(json),
            content_type="application/json",
        )

        return self

    def add_file(self, name: str, file: Any) -> FormBuilder:
        """Shortcut for attaching a `cordrest.models.File`, the
        content is read completely into memory.
        """

        return self.add_field(name=name, value=file.read(), filename=file.name)

    def build(self) -> aiohttp.FormData:
        """Builds the form into an aiohttp.FormData object

        Returns
        -------
        aiohttp.FormData
            The form object.
        """

        form = aiohttp.FormData()
        for field in self.fields:
            form.add_field(**field)

        return form
