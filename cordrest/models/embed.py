import datetime
from typing import Optional, Sequence

import attr

from .base import Model, iso_timestamp, model, models

__all__ = (
    "EmbedFooter",
    "EmbedImage",
    "EmbedThumbnail",
    "EmbedVideo",
    "EmbedProvider",
    "EmbedAuthor",
    "EmbedField",
    "Embed",
)


@attr.define(kw_only=True)
class EmbedFooter(Model):
    text: Optional[str] = attr.field(default=None)
    icon_url: Optional[str] = attr.field(default=None)
    proxy_icon_url: Optional[str] = attr.field(default=None)


@attr.define(kw_only=True)
class EmbedImage(Model):
    url: Optional[str] = attr.field(default=None)
    proxy_url: Optional[str] = attr.field(default=None)
    height: Optional[int] = attr.field(default=None)
    width: Optional[int] = attr.field(default=None)


@attr.define(kw_only=True)
class EmbedThumbnail(Model):
    url: Optional[str] = attr.field(default=None)
    proxy_url: Optional[str] = attr.field(default=None)
    height: Optional[int] = attr.field(default=None)
    width: Optional[int] = attr.field(default=None)


@attr.define(kw_only=True)
class EmbedVideo(Model):
    url: Optional[str] = attr.field(default=None)
    height: Optional[int] = attr.field(default=None)
    width: Optional[int] = attr.field(default=None)


@attr.define(kw_only=True)
class EmbedProvider(Model):
    name: Optional[str] = attr.field(default=None)
    url: Optional[str] = attr.field(default=None)


@attr.define(kw_only=True)
class EmbedAuthor(Model):
    name: Optional[str] = attr.field(default=None)
    url: Optional[str] = attr.field(default=None)
    icon_url: Optional[str] = attr.field(default=None)
    proxy_icon_url: Optional[str] = attr.field(default=None)


@attr.define(kw_only=True)
class EmbedField(Model):
    name: str = attr.field()
    value: str = attr.field()
    inline: Optional[bool] = attr.field(default=None)


@attr.define(kw_only=True)
class Embed(Model):
    """Rich content attached to a message. Every part is optional,
    unset parts are not sent.
    """

    title: Optional[str] = attr.field(default=None)
    type: Optional[str] = attr.field(default=None)
    description: Optional[str] = attr.field(default=None)
    url: Optional[str] = attr.field(default=None)
    timestamp: Optional[datetime.datetime] = attr.field(
        default=None, converter=iso_timestamp
    )
    color: Optional[int] = attr.field(default=None)
    footer: Optional[EmbedFooter] = attr.field(
        default=None, converter=model(EmbedFooter)
    )
    image: Optional[EmbedImage] = attr.field(default=None, converter=model(EmbedImage))
    thumbnail: Optional[EmbedThumbnail] = attr.field(
        default=None, converter=model(EmbedThumbnail)
    )
    video: Optional[EmbedVideo] = attr.field(default=None, converter=model(EmbedVideo))
    provider: Optional[EmbedProvider] = attr.field(
        default=None, converter=model(EmbedProvider)
    )
    author: Optional[EmbedAuthor] = attr.field(
        default=None, converter=model(EmbedAuthor)
    )
    fields: Optional[Sequence[EmbedField]] = attr.field(
        default=None, converter=models(EmbedField)
    )

    def add_field(self, name: str, value: str, inline: bool = False) -> "Embed":
        """Append a field, can be used for chaining"""

        if self.fields is None:
            self.fields = []
        self.fields.append(EmbedField(name=name, value=value, inline=inline))
        return self
