import json as jsonlib
import logging
from typing import Any, Final, Mapping, MutableMapping, Optional, Union

import aiohttp
import attr

from .. import __version__
from .builders import FormBuilder, JSONArrayBuilder, JSONBuilder, ParamsBuilder
from .errors import RateLimited, exception_for
from .ratelimit import RateLimiter
from .request import Request
from .response import Response
from .route import BASE_URL, Route

__all__ = ("RESTClient",)

_log = logging.getLogger(__name__)

USER_AGENT: Final[
    str
] = f"DiscordBot (https://github.com/cordrest/cordrest, {__version__})"


@attr.define(kw_only=True)
class RESTClient:
    """Client that handles HTTP request to discord's REST API,
    this does not create a session itself and needs one passed to
    it.
    """

    session: aiohttp.ClientSession = attr.field()
    """ The actual session that the client uses for its HTTP
    requests, try not to use directly as that may mess up the
    ratelimit handling :)
    """

    token: str = attr.field(repr=False)
    """ The token that the client will use for authorization,
    it is important to note that you should not share this with
    anyone!
    """

    token_type: str = attr.field(default="Bot")
    """ The authorization scheme, `Bot` or `Bearer` """

    user_agent: str = attr.field(default=USER_AGENT)
    """ The user agent that you want to use for your HTTP client
    (recommended to use this format `DiscordBot ($url, $versionNumber)`)
    """

    base_url: str = attr.field(default=BASE_URL)
    """ Versioned API root every route is resolved against """

    ratelimiter: RateLimiter = attr.field(factory=RateLimiter)
    """ Per route bucket tracker shared by every request """

    async def request(
        self,
        *,
        route: Route,
        json: Optional[Union[JSONBuilder, JSONArrayBuilder]] = None,
        form: Optional[FormBuilder] = None,
        params: Optional[ParamsBuilder] = None,
        reason: Optional[str] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ) -> Response:
        """Makes a HTTP request to the provided `Route`.

        Parameters
        ----------
        route : cordrest.rest.route.Route
            The route to request to.
        json : typing.Optional[cordrest.rest.builders.JSONBuilder]
            JSON body of the request.
        form : typing.Optional[cordrest.rest.builders.FormBuilder]
            The form to attach to the request.
        params : typing.Optional[cordrest.rest.builders.ParamsBuilder]
            The request parameters.
        reason : typing.Optional[str]
            The reason for the request - if the endpoint supports the
            `X-Audit-Log-Reason` header.
        headers : typing.Optional[typing.Mapping[builtins.str, typing.Any]]
            Extra headers for the request, the authorization and
            content headers are always overwritten.

        Raises
        ------
        cordrest.rest.errors.HTTPException
            Oh no! Something went wrong with the request, the
            exception (or one of its subclasses) carries the status
            code and whatever discord sent back.
        cordrest.rest.errors.RateLimited
            Discord answered with a 429, the bucket will wait for the
            reset before its next request but this one is not retried.
        aiohttp.ClientError
            The request never got an answer.

        Returns
        -------
        cordrest.rest.response.Response
            The corresponding response object denoting what
            discord sent back to us.
        """

        request_headers: MutableMapping[str, str] = {}
        if headers is not None:
            request_headers.update(headers)

        request_headers["Authorization"] = f"{self.token_type} {self.token}"
        request_headers["User-Agent"] = self.user_agent

        kwargs: MutableMapping[str, Any] = {"headers": request_headers}

        # aiohttp sets the multipart content-type (with its boundary) itself
        if form is not None:
            kwargs["data"] = form.build()
        elif json is not None:
            request_headers["Content-Type"] = "application/json"
            kwargs["json"] = json.build()

        if params is not None:
            kwargs["params"] = params.build()

        if reason is not None:
            request_headers["X-Audit-Log-Reason"] = reason

        url = route.url(self.base_url)
        limiter = self.ratelimiter

        async with limiter.acquire(route.bucket) as bucket:
            async with self.session.request(route.method, url, **kwargs) as response:
                text = await response.text(encoding="utf-8")
                _log.debug("%s %s has returned %s", route.method, url, response.status)

                bucket.update(response.headers, limiter.clock())

                if 200 <= response.status < 300:
                    return Response(
                        response.status,
                        data=text,
                        content_type=response.headers.get("Content-Type", ""),
                    )

                try:
                    data = jsonlib.loads(text)
                except jsonlib.JSONDecodeError:
                    data = text

                exc = exception_for(response.status, data)

                if isinstance(exc, RateLimited):
                    _log.warning(
                        "%s %s is ratelimited (bucket %s), retry after %.2fs",
                        route.method,
                        url,
                        route.bucket,
                        exc.retry_after,
                    )
                    if exc.is_global:
                        limiter.set_global(exc.retry_after)
                    else:
                        bucket.block(exc.retry_after, limiter.clock())

                raise exc

    def build_request(
        self,
        *,
        route: Route,
        json: Optional[Union[JSONBuilder, JSONArrayBuilder]] = None,
        form: Optional[FormBuilder] = None,
        params: Optional[ParamsBuilder] = None,
        reason: Optional[str] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ) -> Request:
        """See the documentation for cordrest.rest.client.RESTClient.request
        for information on the parameters.

        Returns
        -------
        cordrest.rest.request.Request
            A request object that can be sent later (and inspect
            the parameters).
        """

        return Request(
            route=route,
            json=json,
            form=form,
            params=params,
            reason=reason,
            headers=headers,
        )

    async def send(self, request: Request) -> Response:
        """Send a request made with `build_request`"""

        return await self.request(
            route=request.route,
            json=request.json,
            form=request.form,
            params=request.params,
            reason=request.reason,
            headers=request.headers,
        )
