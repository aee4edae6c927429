from typing import Any, List, Optional

import attr

from ..models.base import Snowflake
from ..models.user import User
from ..rest.builders import ParamsBuilder
from ..rest.route import Route
from .base import Resource

__all__ = ("Reactions",)

REACTIONS: str = "/channels/{channel_id}/messages/{message_id}/reactions"
""" Every reaction endpoint hangs off this path """


@attr.define
class Reactions(Resource):
    """Endpoints under ``/channels/{channel_id}/messages/{message_id}/reactions``.

    `emoji` is either a `cordrest.models.message.ReactionEmoji` or the
    string discord expects: the unicode character or ``name:id`` for
    custom emoji.
    """

    async def create(
        self, channel_id: Snowflake, message_id: Snowflake, emoji: Any
    ) -> None:
        await self.rest.request(
            route=Route(
                "PUT",
                REACTIONS + "/{emoji}/@me",
                channel_id=channel_id,
                message_id=message_id,
                emoji=self._emoji(emoji),
            )
        )

    async def delete_own(
        self, channel_id: Snowflake, message_id: Snowflake, emoji: Any
    ) -> None:
        await self.rest.request(
            route=Route(
                "DELETE",
                REACTIONS + "/{emoji}/@me",
                channel_id=channel_id,
                message_id=message_id,
                emoji=self._emoji(emoji),
            )
        )

    async def delete(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        emoji: Any,
        user_id: Snowflake,
    ) -> None:
        """Remove a user's reaction, ``user_id="@me"`` removes the
        bot's own.
        """

        if user_id == "@me":
            return await self.delete_own(channel_id, message_id, emoji)

        await self.rest.request(
            route=Route(
                "DELETE",
                REACTIONS + "/{emoji}/{user_id}",
                channel_id=channel_id,
                message_id=message_id,
                emoji=self._emoji(emoji),
                user_id=user_id,
            )
        )

    async def get(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        emoji: Any,
        *,
        after: Optional[Snowflake] = None,
        limit: int = 0,
    ) -> List[User]:
        """The users that reacted with `emoji`.

        Parameters
        ----------
        after : typing.Optional[cordrest.models.base.Snowflake]
            Only users with a greater ID.
        limit : builtins.int
            1-100, discord's default (25) is used when it is 0.

        Returns
        -------
        typing.List[cordrest.models.user.User]
        """

        params = ParamsBuilder().add_optional("after", after)
        if limit > 0:
            params.add("limit", limit)

        response = await self.rest.request(
            route=Route(
                "GET",
                REACTIONS + "/{emoji}",
                channel_id=channel_id,
                message_id=message_id,
                emoji=self._emoji(emoji),
            ),
            params=params or None,
        )
        return self._many(User, response)

    async def delete_all(self, channel_id: Snowflake, message_id: Snowflake) -> None:
        await self.rest.request(
            route=Route(
                "DELETE",
                REACTIONS,
                channel_id=channel_id,
                message_id=message_id,
            )
        )

    async def delete_all_for_emoji(
        self, channel_id: Snowflake, message_id: Snowflake, emoji: Any
    ) -> None:
        await self.rest.request(
            route=Route(
                "DELETE",
                REACTIONS + "/{emoji}",
                channel_id=channel_id,
                message_id=message_id,
                emoji=self._emoji(emoji),
            )
        )
