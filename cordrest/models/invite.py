import datetime
from typing import Optional

import attr

from .base import Model, iso_timestamp, model
from .channel import Channel
from .guild import Guild
from .user import User

__all__ = ("Invite",)


@attr.define(kw_only=True)
class Invite(Model):
    """An invite code, the metadata fields (`uses` and the like) are
    only sent to members allowed to manage the channel.
    """

    code: str = attr.field()
    guild: Optional[Guild] = attr.field(default=None, converter=model(Guild))
    channel: Optional[Channel] = attr.field(default=None, converter=model(Channel))
    inviter: Optional[User] = attr.field(default=None, converter=model(User))
    approximate_member_count: Optional[int] = attr.field(default=None)
    approximate_presence_count: Optional[int] = attr.field(default=None)
    expires_at: Optional[datetime.datetime] = attr.field(
        default=None, converter=iso_timestamp
    )
    uses: Optional[int] = attr.field(default=None)
    max_uses: Optional[int] = attr.field(default=None)
    max_age: Optional[int] = attr.field(default=None)
    temporary: Optional[bool] = attr.field(default=None)
    created_at: Optional[datetime.datetime] = attr.field(
        default=None, converter=iso_timestamp
    )

    @property
    def url(self) -> str:
        return f"https://discord.gg/{self.code}"
