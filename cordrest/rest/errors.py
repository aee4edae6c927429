from typing import Any, Dict, List, Optional, Tuple, Type, Union

import attr

__all__ = (
    "ClientException",
    "HTTPException",
    "Forbidden",
    "NotFound",
    "RateLimited",
    "ServerError",
    "exception_for",
)


class ItemsList(list):
    def items(self):
        for n, item in enumerate(self):
            yield str(n), item


def flatten(
    d: Union[Dict[str, Any], ItemsList], path: Optional[str] = None
) -> List[Tuple[str, Tuple[str, str]]]:
    if path is None:
        path = ""

    items: List[Tuple[str, Tuple[str, str]]] = []
    for k, v in d.items():
        if k == "_errors":
            for item in v:
                items.append((path[1:], (item["message"], item["code"])))
        elif isinstance(v, dict):
            items.extend(flatten(v, path + ":" + k))
        elif isinstance(v, list):
            items.extend(flatten(ItemsList(v), path + ":" + k))
    return items


class ClientException(Exception):
    """Base class for HTTP client exceptions"""


@attr.define(init=False, repr=False)
class HTTPException(ClientException):
    """Base class for errors that were encountered when making
    a HTTP request through the client. The status code and response
    data is included.
    """

    code: int = attr.field()
    """ The HTTP status code """

    data: Union[str, Dict[str, Any]] = attr.field()
    """ The body of the response, decoded when it was JSON """

    def __init__(self, code: int, data: Union[str, Dict[str, Any]]):
        self.code = code
        self.data = data

        super().__init__(repr(self))

    @property
    def message(self) -> Optional[str]:
        """Error message sent by discord"""

        if isinstance(self.data, dict):
            return self.data.get("message")
        return None

    @property
    def errno(self) -> Optional[int]:
        """The JSON error code discord attaches to the message"""

        if isinstance(self.data, dict):
            return self.data.get("code")
        return None

    @property
    def errors(self) -> Optional[str]:
        """Returns the prettified error messages, discord nests them
        by the path of the offending field.
        """

        if isinstance(self.data, dict):
            if "errors" not in self.data:
                return None

            text = "\n".join(
                f"{item} ({code}): {message}"
                for item, (message, code) in flatten(self.data["errors"])
            )
            return text.strip()
        else:
            return self.data

    def __repr__(self) -> str:
        text = f"{self.code} {self.message} ({self.errno})"
        errors = self.errors
        if errors:
            text += f"\n{errors}"
        return text


class Forbidden(HTTPException):
    """Raised for a 403, the token lacks the permissions"""


class NotFound(HTTPException):
    """Raised for a 404"""


class RateLimited(HTTPException):
    """Raised for a 429. The bucket already knows when it resets,
    the next request through the same client waits for it.
    """

    @property
    def retry_after(self) -> float:
        """Seconds until the limit resets"""

        if isinstance(self.data, dict):
            return float(self.data.get("retry_after", 0))
        return 0.0

    @property
    def is_global(self) -> bool:
        """Whether the limit applies to every route"""

        if isinstance(self.data, dict):
            return bool(self.data.get("global", False))
        return False


class ServerError(HTTPException):
    """Raised for any 5xx status code"""


_BY_STATUS: Dict[int, Type[HTTPException]] = {
    403: Forbidden,
    404: NotFound,
    429: RateLimited,
}


def exception_for(code: int, data: Union[str, Dict[str, Any]]) -> HTTPException:
    """Pick the exception class that matches the status code"""

    if code >= 500:
        return ServerError(code, data)
    return _BY_STATUS.get(code, HTTPException)(code, data)
