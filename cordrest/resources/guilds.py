from typing import Any, List, Mapping, Optional, Sequence

import attr

from ..models.base import Snowflake
from ..models.channel import Channel, Overwrite
from ..models.guild import Ban, Guild, GuildMember, Role
from ..models.invite import Invite
from ..rest.builders import MISSING, JSONArrayBuilder, JSONBuilder, ParamsBuilder
from ..rest.route import Route
from .base import Resource

__all__ = ("Guilds",)

GUILD: str = "/guilds/{guild_id}"
MEMBER: str = GUILD + "/members/{user_id}"


@attr.define
class Guilds(Resource):
    """Endpoints under ``/guilds`` and ``/guilds/{guild_id}``, covering
    the guild itself, its channels, members, bans, roles and prunes.
    """

    async def create(
        self,
        name: str,
        *,
        icon: Optional[str] = MISSING,
        verification_level: int = MISSING,
        roles: Sequence[Role] = MISSING,
        channels: Sequence[Channel] = MISSING,
    ) -> Guild:
        """Create a guild owned by the bot (only for bots in fewer than
        10 guilds).

        Parameters
        ----------
        name : builtins.str
            2-100 character guild name.
        icon : typing.Optional[builtins.str]
            A data URI of the icon image.
        verification_level : builtins.int
            The verification level members need.
        roles : typing.Sequence[cordrest.models.guild.Role]
            The first one replaces @everyone.
        channels : typing.Sequence[cordrest.models.channel.Channel]
            Initial channels.

        Returns
        -------
        cordrest.models.guild.Guild
        """

        json = (
            JSONBuilder(name=name)
            .add_optional("icon", icon)
            .add_optional("verification_level", verification_level)
            .add_optional("roles", roles)
            .add_optional("channels", channels)
        )

        response = await self.rest.request(route=Route("POST", "/guilds"), json=json)
        return self._one(Guild, response)

    async def get(self, guild_id: Snowflake, *, with_counts: bool = False) -> Guild:
        params = ParamsBuilder(with_counts=True) if with_counts else None

        response = await self.rest.request(
            route=Route("GET", GUILD, guild_id=guild_id), params=params
        )
        return self._one(Guild, response)

    async def modify(
        self,
        guild_id: Snowflake,
        *,
        name: str = MISSING,
        icon: Optional[str] = MISSING,
        description: Optional[str] = MISSING,
        verification_level: Optional[int] = MISSING,
        afk_channel_id: Optional[Snowflake] = MISSING,
        afk_timeout: int = MISSING,
        system_channel_id: Optional[Snowflake] = MISSING,
        owner_id: Snowflake = MISSING,
        reason: Optional[str] = None,
    ) -> Guild:
        """Update the guild's settings, only the arguments passed are
        sent. Transferring ownership (`owner_id`) needs the bot to be
        the owner.
        """

        json = (
            JSONBuilder()
            .add_optional("name", name)
            .add_optional("icon", icon)
            .add_optional("description", description)
            .add_optional("verification_level", verification_level)
            .add_optional("afk_channel_id", afk_channel_id)
            .add_optional("afk_timeout", afk_timeout)
            .add_optional("system_channel_id", system_channel_id)
            .add_optional("owner_id", owner_id)
        )

        response = await self.rest.request(
            route=Route("PATCH", GUILD, guild_id=guild_id), json=json, reason=reason
        )
        return self._one(Guild, response)

    async def delete(self, guild_id: Snowflake) -> None:
        await self.rest.request(route=Route("DELETE", GUILD, guild_id=guild_id))

    # channels

    async def get_channels(self, guild_id: Snowflake) -> List[Channel]:
        response = await self.rest.request(
            route=Route("GET", GUILD + "/channels", guild_id=guild_id)
        )
        return self._many(Channel, response)

    async def create_channel(
        self,
        guild_id: Snowflake,
        name: str,
        *,
        type: int = MISSING,
        topic: str = MISSING,
        bitrate: int = MISSING,
        user_limit: int = MISSING,
        position: int = MISSING,
        parent_id: Snowflake = MISSING,
        nsfw: bool = MISSING,
        permission_overwrites: Sequence[Overwrite] = MISSING,
        reason: Optional[str] = None,
    ) -> Channel:
        json = (
            JSONBuilder(name=name)
            .add_optional("type", type)
            .add_optional("topic", topic)
            .add_optional("bitrate", bitrate)
            .add_optional("user_limit", user_limit)
            .add_optional("position", position)
            .add_optional("parent_id", parent_id)
            .add_optional("nsfw", nsfw)
            .add_optional("permission_overwrites", permission_overwrites)
        )

        response = await self.rest.request(
            route=Route("POST", GUILD + "/channels", guild_id=guild_id),
            json=json,
            reason=reason,
        )
        return self._one(Channel, response)

    async def modify_channel_positions(
        self, guild_id: Snowflake, positions: Mapping[Snowflake, int]
    ) -> None:
        """Move channels, `positions` maps channel IDs to their new
        position.
        """

        json = JSONArrayBuilder()
        for channel_id, position in positions.items():
            json.append({"id": str(channel_id), "position": position})

        await self.rest.request(
            route=Route("PATCH", GUILD + "/channels", guild_id=guild_id),
            json=json,
        )

    # members

    async def get_member(self, guild_id: Snowflake, user_id: Snowflake) -> GuildMember:
        response = await self.rest.request(
            route=Route("GET", MEMBER, guild_id=guild_id, user_id=user_id)
        )
        return self._one(GuildMember, response)

    async def list_members(
        self,
        guild_id: Snowflake,
        *,
        limit: int = 0,
        after: Optional[Snowflake] = None,
    ) -> List[GuildMember]:
        """List the members of the guild (needs the members intent).

        Parameters
        ----------
        limit : builtins.int
            1-1000, discord's default (1) is used when it is 0.
        after : typing.Optional[cordrest.models.base.Snowflake]
            Only members with a greater user ID.
        """

        params = ParamsBuilder().add_optional("after", after)
        if limit > 0:
            params.add("limit", limit)

        response = await self.rest.request(
            route=Route("GET", GUILD + "/members", guild_id=guild_id),
            params=params or None,
        )
        return self._many(GuildMember, response)

    async def modify_member(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        *,
        nick: Optional[str] = MISSING,
        roles: Sequence[Snowflake] = MISSING,
        mute: bool = MISSING,
        deaf: bool = MISSING,
        channel_id: Optional[Snowflake] = MISSING,
        reason: Optional[str] = None,
    ) -> GuildMember:
        """Update a member, ``nick=None`` resets the nickname and
        ``channel_id=None`` disconnects them from voice.
        """

        json = (
            JSONBuilder()
            .add_optional("nick", nick)
            .add_optional("mute", mute)
            .add_optional("deaf", deaf)
            .add_optional("channel_id", channel_id)
        )
        if roles is not MISSING:
            json.add("roles", [str(role_id) for role_id in roles])

        response = await self.rest.request(
            route=Route("PATCH", MEMBER, guild_id=guild_id, user_id=user_id),
            json=json,
            reason=reason,
        )
        return self._one(GuildMember, response)

    async def modify_current_nick(
        self, guild_id: Snowflake, nick: Optional[str]
    ) -> Optional[str]:
        """Change the bot's own nickname, returns the new one"""

        response = await self.rest.request(
            route=Route("PATCH", GUILD + "/members/@me", guild_id=guild_id),
            json=JSONBuilder(nick=nick),
        )
        return response.json().get("nick")

    async def add_member_role(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        role_id: Snowflake,
        *,
        reason: Optional[str] = None,
    ) -> None:
        await self.rest.request(
            route=Route(
                "PUT",
                MEMBER + "/roles/{role_id}",
                guild_id=guild_id,
                user_id=user_id,
                role_id=role_id,
            ),
            reason=reason,
        )

    async def remove_member_role(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        role_id: Snowflake,
        *,
        reason: Optional[str] = None,
    ) -> None:
        await self.rest.request(
            route=Route(
                "DELETE",
                MEMBER + "/roles/{role_id}",
                guild_id=guild_id,
                user_id=user_id,
                role_id=role_id,
            ),
            reason=reason,
        )

    async def remove_member(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        *,
        reason: Optional[str] = None,
    ) -> None:
        """Kick a member"""

        await self.rest.request(
            route=Route("DELETE", MEMBER, guild_id=guild_id, user_id=user_id),
            reason=reason,
        )

    # bans

    async def get_bans(self, guild_id: Snowflake) -> List[Ban]:
        response = await self.rest.request(
            route=Route("GET", GUILD + "/bans", guild_id=guild_id)
        )
        return self._many(Ban, response)

    async def create_ban(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        *,
        delete_message_seconds: int = MISSING,
        reason: Optional[str] = None,
    ) -> None:
        json = JSONBuilder().add_optional(
            "delete_message_seconds", delete_message_seconds
        )

        await self.rest.request(
            route=Route(
                "PUT", GUILD + "/bans/{user_id}", guild_id=guild_id, user_id=user_id
            ),
            json=json,
            reason=reason,
        )

    async def remove_ban(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        *,
        reason: Optional[str] = None,
    ) -> None:
        await self.rest.request(
            route=Route(
                "DELETE", GUILD + "/bans/{user_id}", guild_id=guild_id, user_id=user_id
            ),
            reason=reason,
        )

    # roles

    async def get_roles(self, guild_id: Snowflake) -> List[Role]:
        response = await self.rest.request(
            route=Route("GET", GUILD + "/roles", guild_id=guild_id)
        )
        return self._many(Role, response)

    async def create_role(
        self,
        guild_id: Snowflake,
        *,
        name: str = MISSING,
        permissions: Any = MISSING,
        color: int = MISSING,
        hoist: bool = MISSING,
        mentionable: bool = MISSING,
        reason: Optional[str] = None,
    ) -> Role:
        response = await self.rest.request(
            route=Route("POST", GUILD + "/roles", guild_id=guild_id),
            json=_role_json(name, permissions, color, hoist, mentionable),
            reason=reason,
        )
        return self._one(Role, response)

    async def modify_role(
        self,
        guild_id: Snowflake,
        role_id: Snowflake,
        *,
        name: Optional[str] = MISSING,
        permissions: Any = MISSING,
        color: Optional[int] = MISSING,
        hoist: Optional[bool] = MISSING,
        mentionable: Optional[bool] = MISSING,
        reason: Optional[str] = None,
    ) -> Role:
        response = await self.rest.request(
            route=Route(
                "PATCH", GUILD + "/roles/{role_id}", guild_id=guild_id, role_id=role_id
            ),
            json=_role_json(name, permissions, color, hoist, mentionable),
            reason=reason,
        )
        return self._one(Role, response)

    async def delete_role(
        self,
        guild_id: Snowflake,
        role_id: Snowflake,
        *,
        reason: Optional[str] = None,
    ) -> None:
        await self.rest.request(
            route=Route(
                "DELETE", GUILD + "/roles/{role_id}", guild_id=guild_id, role_id=role_id
            ),
            reason=reason,
        )

    # prune

    async def get_prune_count(self, guild_id: Snowflake, *, days: int = 7) -> int:
        """How many members a prune of `days` (1-30) of inactivity
        would kick.
        """

        response = await self.rest.request(
            route=Route("GET", GUILD + "/prune", guild_id=guild_id),
            params=ParamsBuilder(days=days),
        )
        return response.json()["pruned"]

    async def begin_prune(
        self,
        guild_id: Snowflake,
        *,
        days: int = 7,
        compute_prune_count: bool = True,
        reason: Optional[str] = None,
    ) -> Optional[int]:
        """Kick inactive members, the count is `None` unless
        `compute_prune_count` is set (discouraged for large guilds).
        """

        response = await self.rest.request(
            route=Route("POST", GUILD + "/prune", guild_id=guild_id),
            json=JSONBuilder(days=days, compute_prune_count=compute_prune_count),
            reason=reason,
        )
        return response.json().get("pruned")

    async def get_invites(self, guild_id: Snowflake) -> List[Invite]:
        response = await self.rest.request(
            route=Route("GET", GUILD + "/invites", guild_id=guild_id)
        )
        return self._many(Invite, response)


def _role_json(
    name: Any, permissions: Any, color: Any, hoist: Any, mentionable: Any
) -> JSONBuilder:
    json = (
        JSONBuilder()
        .add_optional("name", name)
        .add_optional("color", color)
        .add_optional("hoist", hoist)
        .add_optional("mentionable", mentionable)
    )
    if permissions is not MISSING:
        json.add("permissions", None if permissions is None else str(permissions))
    return json


