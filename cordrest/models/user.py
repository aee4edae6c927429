from typing import Optional

import attr

from .base import Model

__all__ = ("User",)


@attr.define(kw_only=True)
class User(Model):
    """A discord user, also used for the author of webhook messages
    (then only `id`, `username` and `avatar` belong to the webhook).
    """

    id: str = attr.field()
    username: Optional[str] = attr.field(default=None)
    discriminator: Optional[str] = attr.field(default=None)
    global_name: Optional[str] = attr.field(default=None)
    avatar: Optional[str] = attr.field(default=None)
    bot: Optional[bool] = attr.field(default=None)
    system: Optional[bool] = attr.field(default=None)

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"
