"""
Create embed authors.

Usage:
    author = (
        EmbedAuthorBuilder()
        .set_icon(ImageSource.from_url("https://example.com/1.png"))
        .set_name("an author")
        .set_url("https://example.com")
        .build()
    )
    embed = EmbedBuilder().set_author(author).build()
"""

from dataclasses import replace

from .consumable import ConsumableBuilder
from .embed_models import EmbedAuthor
from .image_source import ImageSource


class EmbedAuthorBuilder(ConsumableBuilder):
    """
    Create an embed author with a builder.

    The result can be passed to EmbedBuilder.set_author. Nothing is validated here;
    the author name is checked against EmbedBuilder.AUTHOR_NAME_LENGTH_LIMIT when
    the whole embed is built.
    """

    def __init__(self):
        super().__init__()
        self._author = EmbedAuthor()

    @classmethod
    def new(cls) -> "EmbedAuthorBuilder":
        return cls()

    def set_icon(self, image_source: ImageSource):
        """Add an author icon."""
        if not isinstance(image_source, ImageSource):
            raise TypeError(
                f"icon must be an ImageSource, not {type(image_source).__name__}; "
                "use ImageSource.from_url or ImageSource.from_attachment"
            )
        self._ensure_configurable()
        self._author = replace(self._author, icon_url=image_source.url)
        return self

    def set_name(self, name: str):
        """
        The author's name.

        Refer to EmbedBuilder.AUTHOR_NAME_LENGTH_LIMIT for the maximum number of
        UTF-16 code units that can be in an author name.
        """
        self._ensure_configurable()
        self._author = replace(self._author, name=str(name))
        return self

    def set_url(self, url: str):
        """The author's url."""
        self._ensure_configurable()
        self._author = replace(self._author, url=str(url))
        return self

    def build(self) -> EmbedAuthor:
        """Build into an embed author. The builder can't be used afterwards."""
        self._consume()
        return self._author

    def __eq__(self, other):
        if not isinstance(other, EmbedAuthorBuilder):
            return NotImplemented
        return self._author == other._author and self._consumed == other._consumed

    def __repr__(self):
        return f"EmbedAuthorBuilder({self._author!r})"
