from dataclasses import replace
from datetime import datetime
from typing import Union

import discord

from .consumable import ConsumableBuilder
from .embed_author import EmbedAuthorBuilder
from .embed_field import EmbedFieldBuilder
from .embed_footer import EmbedFooterBuilder
from .embed_models import Embed, EmbedAuthor, EmbedField, EmbedFooter, EmbedImage, EmbedThumbnail
from .errors import EmbedError, EmbedErrorType
from .image_source import ImageSource
from .logger import log


def utf16_length(text: str) -> int:
    """Length of text in UTF-16 code units, which is how Discord counts embed limits."""
    return len(text.encode('utf-16-le')) // 2


class EmbedBuilder(ConsumableBuilder):
    """
    A standardized builder for creating Discord embeds.

    Setters only reject arguments of the wrong kind (a raw string where an
    ImageSource is needed); every limit below is checked once, in build().
    """

    # https://discord.com/developers/docs/resources/channel#embed-object-embed-limits
    AUTHOR_NAME_LENGTH_LIMIT = 256
    COLOR_MAXIMUM = 0xFFFFFF
    DESCRIPTION_LENGTH_LIMIT = 4096
    EMBED_FIELD_LIMIT = 25
    EMBED_LENGTH_LIMIT = 6000
    FIELD_NAME_LENGTH_LIMIT = 256
    FIELD_VALUE_LENGTH_LIMIT = 1024
    FOOTER_TEXT_LENGTH_LIMIT = 2048
    TITLE_LENGTH_LIMIT = 256

    def __init__(self, title: str = None, description: str = None, color: Union[int, discord.Colour] = None):
        super().__init__()
        self._embed = Embed()
        if title is not None:
            self.set_title(title)
        if description is not None:
            self.set_description(description)
        if color is not None:
            self.set_color(color)

    def set_title(self, title: str):
        self._ensure_configurable()
        self._embed = replace(self._embed, title=str(title))
        return self

    def set_description(self, description: str):
        self._ensure_configurable()
        self._embed = replace(self._embed, description=str(description))
        return self

    def set_color(self, color: Union[int, discord.Colour]):
        self._ensure_configurable()
        if isinstance(color, discord.Colour):
            color = color.value
        self._embed = replace(self._embed, color=color)
        return self

    def set_url(self, url: str):
        self._ensure_configurable()
        self._embed = replace(self._embed, url=str(url))
        return self

    def set_timestamp(self, timestamp: datetime):
        self._ensure_configurable()
        self._embed = replace(self._embed, timestamp=timestamp)
        return self

    def add_field(self, embed_field: Union[EmbedField, EmbedFieldBuilder]):
        self._ensure_configurable()
        if isinstance(embed_field, EmbedFieldBuilder):
            embed_field = embed_field.build()
        self._embed = replace(self._embed, fields=self._embed.fields + (embed_field,))
        return self

    def set_footer(self, footer: Union[EmbedFooter, EmbedFooterBuilder]):
        self._ensure_configurable()
        if isinstance(footer, EmbedFooterBuilder):
            footer = footer.build()
        self._embed = replace(self._embed, footer=footer)
        return self

    def set_author(self, author: Union[EmbedAuthor, EmbedAuthorBuilder]):
        self._ensure_configurable()
        if isinstance(author, EmbedAuthorBuilder):
            author = author.build()
        self._embed = replace(self._embed, author=author)
        return self

    def set_thumbnail(self, image_source: ImageSource):
        self._check_image_source(image_source)
        self._ensure_configurable()
        self._embed = replace(self._embed, thumbnail=EmbedThumbnail(url=image_source.url))
        return self

    def set_image(self, image_source: ImageSource):
        self._check_image_source(image_source)
        self._ensure_configurable()
        self._embed = replace(self._embed, image=EmbedImage(url=image_source.url))
        return self

    @staticmethod
    def _check_image_source(image_source):
        if not isinstance(image_source, ImageSource):
            raise TypeError(
                f"image must be an ImageSource, not {type(image_source).__name__}; "
                "use ImageSource.from_url or ImageSource.from_attachment"
            )

    def build(self) -> Embed:
        """
        Validate the embed and return it. The builder can't be used afterwards.

        Raises:
            EmbedError: if any Discord embed limit is broken
        """
        self._consume()
        try:
            self._validate(self._embed)
        except EmbedError as e:
            log.warning(f"Rejected embed: {e}")
            raise
        log.debug(f"Built embed with {len(self._embed.fields)} fields.")
        return self._embed

    @classmethod
    def _validate(cls, embed: Embed):
        total = 0

        if embed.author is not None and embed.author.name is not None:
            total += cls._check_text(
                embed.author.name,
                cls.AUTHOR_NAME_LENGTH_LIMIT,
                EmbedErrorType.AUTHOR_NAME_EMPTY,
                EmbedErrorType.AUTHOR_NAME_TOO_LONG,
            )

        if embed.color is not None and not (
            isinstance(embed.color, int)
            and not isinstance(embed.color, bool)
            and 0 <= embed.color <= cls.COLOR_MAXIMUM
        ):
            raise EmbedError(EmbedErrorType.COLOR_NOT_RGB, embed.color)

        if embed.description is not None:
            total += cls._check_text(
                embed.description,
                cls.DESCRIPTION_LENGTH_LIMIT,
                EmbedErrorType.DESCRIPTION_EMPTY,
                EmbedErrorType.DESCRIPTION_TOO_LONG,
            )

        if len(embed.fields) > cls.EMBED_FIELD_LIMIT:
            raise EmbedError(EmbedErrorType.TOO_MANY_FIELDS, len(embed.fields), cls.EMBED_FIELD_LIMIT)

        for embed_field in embed.fields:
            total += cls._check_text(
                embed_field.name,
                cls.FIELD_NAME_LENGTH_LIMIT,
                EmbedErrorType.FIELD_NAME_EMPTY,
                EmbedErrorType.FIELD_NAME_TOO_LONG,
            )
            total += cls._check_text(
                embed_field.value,
                cls.FIELD_VALUE_LENGTH_LIMIT,
                EmbedErrorType.FIELD_VALUE_EMPTY,
                EmbedErrorType.FIELD_VALUE_TOO_LONG,
            )

        if embed.footer is not None:
            total += cls._check_text(
                embed.footer.text,
                cls.FOOTER_TEXT_LENGTH_LIMIT,
                EmbedErrorType.FOOTER_TEXT_EMPTY,
                EmbedErrorType.FOOTER_TEXT_TOO_LONG,
            )

        if embed.title is not None:
            total += cls._check_text(
                embed.title,
                cls.TITLE_LENGTH_LIMIT,
                EmbedErrorType.TITLE_EMPTY,
                EmbedErrorType.TITLE_TOO_LONG,
            )

        if total > cls.EMBED_LENGTH_LIMIT:
            raise EmbedError(EmbedErrorType.TOTAL_CONTENT_TOO_LARGE, total, cls.EMBED_LENGTH_LIMIT)

    @staticmethod
    def _check_text(text: str, limit: int, empty: EmbedErrorType, too_long: EmbedErrorType) -> int:
        # Returns the length so callers can add it to the embed total
        length = utf16_length(text)
        if length == 0:
            raise EmbedError(empty, text)
        if length > limit:
            raise EmbedError(too_long, text, limit)
        return length
