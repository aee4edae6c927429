from typing import Any, List, Type, TypeVar

import attr

from ..models.base import Model
from ..rest.client import RESTClient
from ..rest.response import Response

__all__ = ("Resource",)

M = TypeVar("M", bound=Model)


@attr.define
class Resource:
    """Base for the endpoint wrappers, each one only talks to the
    shared `cordrest.rest.client.RESTClient`.
    """

    rest: RESTClient = attr.field()
    """ The client every request goes through """

    @staticmethod
    def _one(cls: Type[M], response: Response) -> M:
        return cls.from_json(response.json())

    @staticmethod
    def _many(cls: Type[M], response: Response) -> List[M]:
        return [cls.from_json(item) for item in response.json()]

    @staticmethod
    def _emoji(emoji: Any) -> str:
        if hasattr(emoji, "path"):
            return emoji.path
        return str(emoji)
