from typing import Any

import aiohttp
import attr

from .resources import Channels, Guilds, Invites, Messages, Reactions
from .rest import RESTClient

__all__ = ("API",)


@attr.define
class API:
    """Groups the endpoint wrappers around a single `RESTClient`

    .. code-block:: python

        async with aiohttp.ClientSession() as session:
            api = API.from_token(session, token)
            channel = await api.channels.get(channel_id)
            await api.messages.create(channel.id, content="hello")
    """

    rest: RESTClient = attr.field()
    """ The client every wrapper sends its requests through """

    channels: Channels = attr.field(init=False)
    messages: Messages = attr.field(init=False)
    reactions: Reactions = attr.field(init=False)
    guilds: Guilds = attr.field(init=False)
    invites: Invites = attr.field(init=False)

    def __attrs_post_init__(self):
        self.channels = Channels(self.rest)
        self.messages = Messages(self.rest)
        self.reactions = Reactions(self.rest)
        self.guilds = Guilds(self.rest)
        self.invites = Invites(self.rest)

    @classmethod
    def from_token(
        cls, session: aiohttp.ClientSession, token: str, **kwargs: Any
    ) -> "API":
        """Build the REST client too, `kwargs` are passed to
        `cordrest.rest.client.RESTClient` (e.g. `token_type`).
        """

        return cls(RESTClient(session=session, token=token, **kwargs))
