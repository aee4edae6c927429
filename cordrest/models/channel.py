from typing import Optional, Sequence

import attr

from .base import Model, models
from .user import User

__all__ = ("Overwrite", "Channel")


@attr.define(kw_only=True)
class Overwrite(Model):
    """A permission overwrite for a role (type 0) or member (type 1)"""

    id: str = attr.field()
    type: int = attr.field(default=0)
    allow: str = attr.field(default="0", converter=str)
    """ Bit set of allowed permissions, discord sends it as a string """
    deny: str = attr.field(default="0", converter=str)
    """ Bit set of denied permissions """


@attr.define(kw_only=True)
class Channel(Model):
    """A guild channel or, when `recipients` is set, a direct message
    channel between users outside of any guild.
    """

    id: str = attr.field()
    type: Optional[int] = attr.field(default=None)
    guild_id: Optional[str] = attr.field(default=None)
    position: Optional[int] = attr.field(default=None)
    permission_overwrites: Optional[Sequence[Overwrite]] = attr.field(
        default=None, converter=models(Overwrite)
    )
    name: Optional[str] = attr.field(default=None)
    topic: Optional[str] = attr.field(default=None)
    nsfw: Optional[bool] = attr.field(default=None)
    last_message_id: Optional[str] = attr.field(default=None)
    bitrate: Optional[int] = attr.field(default=None)
    user_limit: Optional[int] = attr.field(default=None)
    rate_limit_per_user: Optional[int] = attr.field(default=None)
    recipients: Optional[Sequence[User]] = attr.field(
        default=None, converter=models(User)
    )
    icon: Optional[str] = attr.field(default=None)
    owner_id: Optional[str] = attr.field(default=None)
    parent_id: Optional[str] = attr.field(default=None)

    @property
    def is_direct_message(self) -> bool:
        return bool(self.recipients)

    @property
    def recipient(self) -> Optional[User]:
        """The other user of a one-to-one direct message"""
        if self.recipients:
            return self.recipients[0]
        return None

    @property
    def mention(self) -> str:
        return f"<#{self.id}>"
