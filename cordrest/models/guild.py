import datetime
from typing import Any, Mapping, Optional, Sequence

import attr

from .base import Model, iso_timestamp, model, models
from .user import User

__all__ = ("Role", "GuildMember", "Ban", "Guild")


@attr.define(kw_only=True)
class Role(Model):
    id: str = attr.field()
    name: Optional[str] = attr.field(default=None)
    color: Optional[int] = attr.field(default=None)
    hoist: Optional[bool] = attr.field(default=None)
    icon: Optional[str] = attr.field(default=None)
    position: Optional[int] = attr.field(default=None)
    permissions: Optional[str] = attr.field(default=None)
    managed: Optional[bool] = attr.field(default=None)
    mentionable: Optional[bool] = attr.field(default=None)

    @property
    def mention(self) -> str:
        return f"<@&{self.id}>"


@attr.define(kw_only=True)
class GuildMember(Model):
    """A user's membership of a guild, `user` is missing in some
    nested payloads.
    """

    user: Optional[User] = attr.field(default=None, converter=model(User))
    nick: Optional[str] = attr.field(default=None)
    avatar: Optional[str] = attr.field(default=None)
    roles: Sequence[str] = attr.field(factory=list)
    joined_at: Optional[datetime.datetime] = attr.field(
        default=None, converter=iso_timestamp
    )
    premium_since: Optional[datetime.datetime] = attr.field(
        default=None, converter=iso_timestamp
    )
    deaf: bool = attr.field(default=False)
    mute: bool = attr.field(default=False)
    pending: Optional[bool] = attr.field(default=None)

    @property
    def display_name(self) -> Optional[str]:
        if self.nick is not None:
            return self.nick
        if self.user is not None:
            return self.user.global_name or self.user.username
        return None


@attr.define(kw_only=True)
class Ban(Model):
    reason: Optional[str] = attr.field(default=None)
    user: User = attr.field(converter=model(User))


@attr.define(kw_only=True)
class Guild(Model):
    """A guild, partial guilds (e.g. the one of an invite) only carry
    a handful of these fields.
    """

    id: str = attr.field()
    name: Optional[str] = attr.field(default=None)
    icon: Optional[str] = attr.field(default=None)
    splash: Optional[str] = attr.field(default=None)
    description: Optional[str] = attr.field(default=None)
    owner_id: Optional[str] = attr.field(default=None)
    afk_channel_id: Optional[str] = attr.field(default=None)
    afk_timeout: Optional[int] = attr.field(default=None)
    verification_level: Optional[int] = attr.field(default=None)
    default_message_notifications: Optional[int] = attr.field(default=None)
    explicit_content_filter: Optional[int] = attr.field(default=None)
    roles: Optional[Sequence[Role]] = attr.field(default=None, converter=models(Role))
    emojis: Optional[Sequence[Mapping[str, Any]]] = attr.field(default=None)
    features: Optional[Sequence[str]] = attr.field(default=None)
    mfa_level: Optional[int] = attr.field(default=None)
    system_channel_id: Optional[str] = attr.field(default=None)
    approximate_member_count: Optional[int] = attr.field(default=None)
    approximate_presence_count: Optional[int] = attr.field(default=None)
