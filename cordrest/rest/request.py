from typing import Any, Mapping, Optional, Union

import attr

from .builders import FormBuilder, JSONArrayBuilder, JSONBuilder, ParamsBuilder
from .route import Route

__all__ = ("Request",)


@attr.define(kw_only=True)
class Request:
    """Represents a HTTP request that has not been sent
    yet, pass it to `cordrest.rest.client.RESTClient.send`.
    """

    route: Route = attr.field()
    """ The route to request to """

    json: Optional[Union[JSONBuilder, JSONArrayBuilder]] = attr.field(default=None)
    """ JSON body of the request """

    form: Optional[FormBuilder] = attr.field(default=None)
    """ Multipart body of the request, takes priority over `json` """

    params: Optional[ParamsBuilder] = attr.field(default=None)
    """ The query string """

    reason: Optional[str] = attr.field(default=None)
    """ Sent as the `X-Audit-Log-Reason` header """

    headers: Optional[Mapping[str, Any]] = attr.field(default=None)
    """ Extra headers """

    @property
    def bucket(self) -> str:
        return self.route.bucket
