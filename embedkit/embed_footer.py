from dataclasses import replace

from .consumable import ConsumableBuilder
from .embed_models import EmbedFooter
from .image_source import ImageSource


class EmbedFooterBuilder(ConsumableBuilder):
    """
    Create an embed footer with a builder.

    The text is checked against EmbedBuilder.FOOTER_TEXT_LENGTH_LIMIT when the
    embed is built.
    """

    def __init__(self, text: str):
        super().__init__()
        self._footer = EmbedFooter(text=str(text))

    def set_icon(self, image_source: ImageSource):
        """Add a footer icon."""
        if not isinstance(image_source, ImageSource):
            raise TypeError(f"icon must be an ImageSource, not {type(image_source).__name__}")
        self._ensure_configurable()
        self._footer = replace(self._footer, icon_url=image_source.url)
        return self

    def build(self) -> EmbedFooter:
        self._consume()
        return self._footer

    def __eq__(self, other):
        if not isinstance(other, EmbedFooterBuilder):
            return NotImplemented
        return self._footer == other._footer and self._consumed == other._consumed

    def __repr__(self):
        return f"EmbedFooterBuilder({self._footer!r})"
