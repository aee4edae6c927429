from typing import Any, List, Mapping, Optional, Sequence

import attr

from ..models.base import Snowflake
from ..models.embed import Embed
from ..models.file import File
from ..models.message import Message
from ..rest.builders import MISSING, FormBuilder, JSONBuilder, ParamsBuilder
from ..rest.route import Route
from .base import Resource

__all__ = ("Messages", "message_form")


def message_form(payload: Mapping[str, Any], file: File) -> FormBuilder:
    """The multipart body of a message with an attachment, the
    parameters travel JSON encoded in `payload_json`.
    """

    return FormBuilder().add_json(payload).add_file("file", file)


@attr.define
class Messages(Resource):
    """Endpoints under ``/channels/{channel_id}/messages``"""

    async def list(
        self,
        channel_id: Snowflake,
        *,
        around: Optional[Snowflake] = None,
        before: Optional[Snowflake] = None,
        after: Optional[Snowflake] = None,
        limit: int = 0,
    ) -> List[Message]:
        """Fetch messages of a channel, newest first.

        Parameters
        ----------
        channel_id : cordrest.models.base.Snowflake
            The ID of the channel.
        around : typing.Optional[cordrest.models.base.Snowflake]
            Messages around this message ID.
        before : typing.Optional[cordrest.models.base.Snowflake]
            Messages before this message ID.
        after : typing.Optional[cordrest.models.base.Snowflake]
            Messages after this message ID.
        limit : builtins.int
            1-100, discord's default (50) is used when it is 0.

        Returns
        -------
        typing.List[cordrest.models.message.Message]
        """

        params = (
            ParamsBuilder()
            .add_optional("around", around)
            .add_optional("before", before)
            .add_optional("after", after)
        )
        if limit > 0:
            params.add("limit", limit)

        response = await self.rest.request(
            route=Route("GET", "/channels/{channel_id}/messages", channel_id=channel_id),
            params=params or None,
        )
        return self._many(Message, response)

    async def get(self, channel_id: Snowflake, message_id: Snowflake) -> Message:
        response = await self.rest.request(
            route=Route(
                "GET",
                "/channels/{channel_id}/messages/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            )
        )
        return self._one(Message, response)

    async def create(
        self,
        channel_id: Snowflake,
        *,
        content: str = MISSING,
        nonce: str = MISSING,
        tts: bool = MISSING,
        embeds: Sequence[Embed] = MISSING,
        file: Optional[File] = None,
    ) -> Message:
        """Post a message to a channel. With a `file` the request is
        sent as multipart form data, otherwise as JSON.

        Parameters
        ----------
        channel_id : cordrest.models.base.Snowflake
            The ID of the channel.
        content : builtins.str
            Up to 2000 characters.
        nonce : builtins.str
            Echoed back, used to verify the message was sent.
        tts : builtins.bool
            Whether it is a text-to-speech message.
        embeds : typing.Sequence[cordrest.models.embed.Embed]
            Up to 10 embeds.
        file : typing.Optional[cordrest.models.file.File]
            A file to attach.

        Raises
        ------
        builtins.ValueError
            The message would be empty.

        Returns
        -------
        cordrest.models.message.Message
            The created message.
        """

        if not content and not embeds and file is None:
            raise ValueError("a message needs content, embeds or a file")

        json = (
            JSONBuilder()
            .add_optional("content", content)
            .add_optional("nonce", nonce)
            .add_optional("tts", tts)
            .add_optional("embeds", embeds)
        )

        route = Route("POST", "/channels/{channel_id}/messages", channel_id=channel_id)
        if file is not None:
            response = await self.rest.request(
                route=route, form=message_form(json.build(), file)
            )
        else:
            response = await self.rest.request(route=route, json=json)

        return self._one(Message, response)

    async def edit(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        *,
        content: Optional[str] = MISSING,
        embeds: Optional[Sequence[Embed]] = MISSING,
    ) -> Message:
        """Edit a message the bot sent, pass `None` to clear a part"""

        json = JSONBuilder().add_optional("content", content).add_optional("embeds", embeds)

        response = await self.rest.request(
            route=Route(
                "PATCH",
                "/channels/{channel_id}/messages/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            ),
            json=json,
        )
        return self._one(Message, response)

    async def delete(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        *,
        reason: Optional[str] = None,
    ) -> None:
        await self.rest.request(
            route=Route(
                "DELETE",
                "/channels/{channel_id}/messages/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            ),
            reason=reason,
        )

    async def bulk_delete(
        self,
        channel_id: Snowflake,
        message_ids: Sequence[Snowflake],
        *,
        reason: Optional[str] = None,
    ) -> None:
        """Delete 2-100 messages that are at most two weeks old"""

        if not 2 <= len(message_ids) <= 100:
            raise ValueError("bulk delete takes between 2 and 100 messages")

        await self.rest.request(
            route=Route(
                "POST",
                "/channels/{channel_id}/messages/bulk-delete",
                channel_id=channel_id,
            ),
            json=JSONBuilder(messages=[str(message_id) for message_id in message_ids]),
            reason=reason,
        )
