from typing import Any, Dict, Final, FrozenSet, Mapping, final
from urllib import parse

import attr

__all__ = ("Route", "BASE_URL", "MAJOR_PARAMETERS")

BASE_URL: Final[str] = "https://discord.com/api/v10"

MAJOR_PARAMETERS: Final[FrozenSet[str]] = frozenset(
    ("channel_id", "guild_id", "webhook_id")
)
""" Parameters that discord keeps in the ratelimit bucket, every other
parameter is collapsed into its placeholder.
"""


def _quote(value: Any) -> str:
    return parse.quote(str(value), safe="")


@final
@attr.define(init=False)
class Route:
    """Container class for routes that the http client will interact with
    contains data about the path, major parameters and the interpolated
    route.
    """

    method: str = attr.field()
    """ HTTP method the request will take """

    path: str = attr.field()
    """ The path of the Route (not interpolated with the parameters) """

    params: Dict[str, Any] = attr.field()
    """ The parameters that the route will take """

    def __init__(self, method: str, path: str, **params: Any):
        self.method = method.upper()
        self.path = path

        self.params = dict(sorted(params.items()))

    @property
    def endpoint(self) -> str:
        """The interpolated path of the route, every parameter is
        percent-encoded so emoji and invite codes are safe to use.
        """
        return self.path.format_map(
            {key: _quote(value) for key, value in self.params.items()}
        )

    @property
    def major_params(self) -> Mapping[str, str]:
        """The parameters that identify the top-level resource"""
        return {
            key: _quote(value)
            for key, value in self.params.items()
            if key in MAJOR_PARAMETERS
        }

    @property
    def bucket(self) -> str:
        """The ratelimit bucket that the route would fall into, as per the
        discord api docs (https://discord.com/developers/docs/topics/rate-limits)

        Only the major parameters are interpolated, so
        ``DELETE /channels/1/messages/{message_id}`` is shared by every
        message in channel 1.
        """
        path = self.path
        for key, value in self.major_params.items():
            path = path.replace("{" + key + "}", value)

        return f"{self.method} {path}"

    def url(self, base_url: str = BASE_URL) -> str:
        """The full URL of the route relative to ``base_url``"""
        return base_url.rstrip("/") + self.endpoint
