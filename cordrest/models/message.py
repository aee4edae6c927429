import datetime
from typing import Optional, Sequence

import attr

from .base import Model, iso_timestamp, model, models
from .embed import Embed
from .user import User

__all__ = ("Attachment", "ReactionEmoji", "Reaction", "Message")


@attr.define(kw_only=True)
class Attachment(Model):
    id: str = attr.field()
    filename: Optional[str] = attr.field(default=None)
    size: Optional[int] = attr.field(default=None)
    url: Optional[str] = attr.field(default=None)
    proxy_url: Optional[str] = attr.field(default=None)
    height: Optional[int] = attr.field(default=None)
    width: Optional[int] = attr.field(default=None)
    content_type: Optional[str] = attr.field(default=None)


@attr.define(kw_only=True)
class ReactionEmoji(Model):
    """The emoji of a reaction, `id` is only set for custom emoji"""

    id: Optional[str] = attr.field(default=None)
    name: Optional[str] = attr.field(default=None)

    @property
    def path(self) -> str:
        """The form the reaction endpoints expect, ``name:id`` for
        custom emoji and the unicode character otherwise.
        """
        if self.id is not None:
            return f"{self.name}:{self.id}"
        return self.name or ""


@attr.define(kw_only=True)
class Reaction(Model):
    count: int = attr.field(default=0)
    me: bool = attr.field(default=False)
    emoji: Optional[ReactionEmoji] = attr.field(
        default=None, converter=model(ReactionEmoji)
    )


@attr.define(kw_only=True)
class Message(Model):
    """A message sent in a channel. The author is a real user unless
    the message came from a webhook, in which case `webhook_id` is set
    and the author carries the webhook's id, name and avatar.
    """

    id: str = attr.field()
    channel_id: str = attr.field()
    guild_id: Optional[str] = attr.field(default=None)
    author: Optional[User] = attr.field(default=None, converter=model(User))
    content: str = attr.field(default="")
    timestamp: Optional[datetime.datetime] = attr.field(
        default=None, converter=iso_timestamp
    )
    edited_timestamp: Optional[datetime.datetime] = attr.field(
        default=None, converter=iso_timestamp
    )
    tts: bool = attr.field(default=False)
    mention_everyone: bool = attr.field(default=False)
    mentions: Optional[Sequence[User]] = attr.field(
        default=None, converter=models(User)
    )
    mention_roles: Optional[Sequence[str]] = attr.field(default=None)
    attachments: Optional[Sequence[Attachment]] = attr.field(
        default=None, converter=models(Attachment)
    )
    embeds: Optional[Sequence[Embed]] = attr.field(
        default=None, converter=models(Embed)
    )
    reactions: Optional[Sequence[Reaction]] = attr.field(
        default=None, converter=models(Reaction)
    )
    nonce: Optional[str] = attr.field(default=None)
    pinned: bool = attr.field(default=False)
    webhook_id: Optional[str] = attr.field(default=None)
    type: Optional[int] = attr.field(default=None)

    @property
    def is_webhook(self) -> bool:
        return self.webhook_id is not None
