"""
Immutable embed records.

Each record mirrors one object of Discord's embed JSON and renders back to it
with to_dict(), leaving out anything that is unset.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

import discord


def _without_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class EmbedAuthor:
    """
    Attribution block shown above the embed title.

    proxy_icon_url is filled in by Discord after the message is sent; the
    builders never set it.
    """

    icon_url: Optional[str] = None
    name: Optional[str] = None
    proxy_icon_url: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_builder(cls, builder) -> "EmbedAuthor":
        """Same as calling builder.build()."""
        return builder.build()

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "name": self.name,
            "url": self.url,
            "icon_url": self.icon_url,
            "proxy_icon_url": self.proxy_icon_url,
        })


@dataclass(frozen=True)
class EmbedFooter:
    text: str
    icon_url: Optional[str] = None
    proxy_icon_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "text": self.text,
            "icon_url": self.icon_url,
            "proxy_icon_url": self.proxy_icon_url,
        })


@dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "inline": self.inline}


@dataclass(frozen=True)
class EmbedImage:
    url: str
    proxy_url: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "url": self.url,
            "proxy_url": self.proxy_url,
            "height": self.height,
            "width": self.width,
        })


@dataclass(frozen=True)
class EmbedThumbnail:
    url: str
    proxy_url: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "url": self.url,
            "proxy_url": self.proxy_url,
            "height": self.height,
            "width": self.width,
        })


@dataclass(frozen=True)
class Embed:
    """
    A complete embed, as produced by EmbedBuilder.build().

    Attributes:
        author: Attribution block
        color: RGB color of the left border, 0x000000 to 0xFFFFFF
        description: Main body text
        fields: Name/value pairs, in display order
        footer: Footer block
        image: Large image below the fields
        kind: Discord embed type; builders always produce "rich"
        thumbnail: Small image in the top right corner
        timestamp: Time shown next to the footer
        title: Title text
        url: Link target of the title
    """

    author: Optional[EmbedAuthor] = None
    color: Optional[int] = None
    description: Optional[str] = None
    fields: tuple[EmbedField, ...] = field(default_factory=tuple)
    footer: Optional[EmbedFooter] = None
    image: Optional[EmbedImage] = None
    kind: str = "rich"
    thumbnail: Optional[EmbedThumbnail] = None
    timestamp: Optional[datetime] = None
    title: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = _without_none({
            "type": self.kind,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "color": self.color,
        })
        if self.author is not None:
            data["author"] = self.author.to_dict()
        if self.footer is not None:
            data["footer"] = self.footer.to_dict()
        if self.image is not None:
            data["image"] = self.image.to_dict()
        if self.thumbnail is not None:
            data["thumbnail"] = self.thumbnail.to_dict()
        if self.fields:
            data["fields"] = [embed_field.to_dict() for embed_field in self.fields]
        return data

    def to_discord(self) -> discord.Embed:
        """Convert to a discord.Embed ready to pass to discord.py's send methods."""
        return discord.Embed.from_dict(self.to_dict())
