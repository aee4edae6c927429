from typing import Any, List, Optional, Sequence

import attr

from ..models.base import Snowflake
from ..models.channel import Channel, Overwrite
from ..models.invite import Invite
from ..models.message import Message
from ..rest.builders import MISSING, JSONBuilder
from ..rest.route import Route
from .base import Resource

__all__ = ("Channels",)


@attr.define
class Channels(Resource):
    """Endpoints under ``/channels/{channel_id}``"""

    async def get(self, channel_id: Snowflake) -> Channel:
        """Fetch a channel by its ID.

        Parameters
        ----------
        channel_id : cordrest.models.base.Snowflake
            The ID of the channel.

        Returns
        -------
        cordrest.models.channel.Channel
        """

        response = await self.rest.request(
            route=Route("GET", "/channels/{channel_id}", channel_id=channel_id)
        )
        return self._one(Channel, response)

    async def modify(
        self,
        channel_id: Snowflake,
        *,
        name: str = MISSING,
        position: Optional[int] = MISSING,
        topic: Optional[str] = MISSING,
        nsfw: Optional[bool] = MISSING,
        bitrate: Optional[int] = MISSING,
        user_limit: Optional[int] = MISSING,
        rate_limit_per_user: Optional[int] = MISSING,
        parent_id: Optional[Snowflake] = MISSING,
        permission_overwrites: Optional[Sequence[Overwrite]] = MISSING,
        reason: Optional[str] = None,
    ) -> Channel:
        """Update a channel's settings, only the arguments that are
        passed are sent.

        Parameters
        ----------
        channel_id : cordrest.models.base.Snowflake
            The ID of the channel.
        name : builtins.str
            1-100 character channel name.
        position : typing.Optional[builtins.int]
            The position in the channel list.
        topic : typing.Optional[builtins.str]
            0-1024 character topic (text channels).
        nsfw : typing.Optional[builtins.bool]
            Whether the channel is age restricted.
        bitrate : typing.Optional[builtins.int]
            Bitrate in bits (voice channels).
        user_limit : typing.Optional[builtins.int]
            Maximum users, 0 for no limit (voice channels).
        rate_limit_per_user : typing.Optional[builtins.int]
            Slowmode in seconds.
        parent_id : typing.Optional[cordrest.models.base.Snowflake]
            The category the channel belongs to.
        permission_overwrites : typing.Optional[typing.Sequence[cordrest.models.channel.Overwrite]]
            Replaces every overwrite of the channel.
        reason : typing.Optional[builtins.str]
            Shown in the audit log.

        Returns
        -------
        cordrest.models.channel.Channel
            The updated channel.
        """

        json = (
            JSONBuilder()
            .add_optional("name", name)
            .add_optional("position", position)
            .add_optional("topic", topic)
            .add_optional("nsfw", nsfw)
            .add_optional("bitrate", bitrate)
            .add_optional("user_limit", user_limit)
            .add_optional("rate_limit_per_user", rate_limit_per_user)
            .add_optional("parent_id", parent_id)
            .add_optional("permission_overwrites", permission_overwrites)
        )

        response = await self.rest.request(
            route=Route("PATCH", "/channels/{channel_id}", channel_id=channel_id),
            json=json,
            reason=reason,
        )
        return self._one(Channel, response)

    async def delete(
        self, channel_id: Snowflake, *, reason: Optional[str] = None
    ) -> Channel:
        """Delete a guild channel or close a direct message, returns
        the channel as it was.
        """

        response = await self.rest.request(
            route=Route("DELETE", "/channels/{channel_id}", channel_id=channel_id),
            reason=reason,
        )
        return self._one(Channel, response)

    async def edit_permissions(
        self,
        channel_id: Snowflake,
        overwrite_id: Snowflake,
        *,
        type: int,
        allow: Any = MISSING,
        deny: Any = MISSING,
        reason: Optional[str] = None,
    ) -> None:
        """Create or replace the overwrite of a role (``type=0``) or
        member (``type=1``).
        """

        json = JSONBuilder(type=type)
        if allow is not MISSING:
            json.add("allow", str(allow))
        if deny is not MISSING:
            json.add("deny", str(deny))

        await self.rest.request(
            route=Route(
                "PUT",
                "/channels/{channel_id}/permissions/{overwrite_id}",
                channel_id=channel_id,
                overwrite_id=overwrite_id,
            ),
            json=json,
            reason=reason,
        )

    async def delete_permission(
        self,
        channel_id: Snowflake,
        overwrite_id: Snowflake,
        *,
        reason: Optional[str] = None,
    ) -> None:
        await self.rest.request(
            route=Route(
                "DELETE",
                "/channels/{channel_id}/permissions/{overwrite_id}",
                channel_id=channel_id,
                overwrite_id=overwrite_id,
            ),
            reason=reason,
        )

    async def get_invites(self, channel_id: Snowflake) -> List[Invite]:
        response = await self.rest.request(
            route=Route("GET", "/channels/{channel_id}/invites", channel_id=channel_id)
        )
        return self._many(Invite, response)

    async def create_invite(
        self,
        channel_id: Snowflake,
        *,
        max_age: int = MISSING,
        max_uses: int = MISSING,
        temporary: bool = MISSING,
        unique: bool = MISSING,
        reason: Optional[str] = None,
    ) -> Invite:
        """Create an invite to the channel.

        Parameters
        ----------
        max_age : builtins.int
            Seconds until it expires, 0 never expires (default 86400).
        max_uses : builtins.int
            Uses until it expires, 0 for unlimited.
        temporary : builtins.bool
            Members are kicked when they disconnect without a role.
        unique : builtins.bool
            Do not reuse a similar invite.
        """

        json = (
            JSONBuilder()
            .add_optional("max_age", max_age)
            .add_optional("max_uses", max_uses)
            .add_optional("temporary", temporary)
            .add_optional("unique", unique)
        )

        response = await self.rest.request(
            route=Route("POST", "/channels/{channel_id}/invites", channel_id=channel_id),
            json=json,
            reason=reason,
        )
        return self._one(Invite, response)

    async def trigger_typing(self, channel_id: Snowflake) -> None:
        """Show the typing indicator for the bot (about 10 seconds)"""

        await self.rest.request(
            route=Route("POST", "/channels/{channel_id}/typing", channel_id=channel_id)
        )

    async def get_pinned_messages(self, channel_id: Snowflake) -> List[Message]:
        response = await self.rest.request(
            route=Route("GET", "/channels/{channel_id}/pins", channel_id=channel_id)
        )
        return self._many(Message, response)

    async def pin_message(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        *,
        reason: Optional[str] = None,
    ) -> None:
        await self.rest.request(
            route=Route(
                "PUT",
                "/channels/{channel_id}/pins/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            ),
            reason=reason,
        )

    async def unpin_message(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        *,
        reason: Optional[str] = None,
    ) -> None:
        await self.rest.request(
            route=Route(
                "DELETE",
                "/channels/{channel_id}/pins/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            ),
            reason=reason,
        )

    async def add_recipient(
        self,
        channel_id: Snowflake,
        user_id: Snowflake,
        *,
        access_token: str,
        nick: str = MISSING,
    ) -> None:
        """Add a user to a group direct message, `access_token` is the
        user's OAuth2 token with the ``gdm.join`` scope.
        """

        json = JSONBuilder(access_token=access_token).add_optional("nick", nick)

        await self.rest.request(
            route=Route(
                "PUT",
                "/channels/{channel_id}/recipients/{user_id}",
                channel_id=channel_id,
                user_id=user_id,
            ),
            json=json,
        )

    async def remove_recipient(self, channel_id: Snowflake, user_id: Snowflake) -> None:
        await self.rest.request(
            route=Route(
                "DELETE",
                "/channels/{channel_id}/recipients/{user_id}",
                channel_id=channel_id,
                user_id=user_id,
            )
        )
