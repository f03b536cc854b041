"""
embedkit - fluent builders for Discord embed records.

Builders accumulate values without checking them; EmbedBuilder.build() is the
single place where Discord's embed limits are enforced.
"""

__version__ = "0.1.0"

from embedkit.embed_author import EmbedAuthorBuilder
from embedkit.embed_builder import EmbedBuilder
from embedkit.embed_field import EmbedFieldBuilder
from embedkit.embed_footer import EmbedFooterBuilder
from embedkit.embed_models import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedThumbnail,
)
from embedkit.errors import (
    BuilderConsumedError,
    EmbedError,
    EmbedErrorType,
    EmbedKitError,
    ImageSourceAttachmentError,
    ImageSourceAttachmentErrorType,
    ImageSourceUrlError,
    ImageSourceUrlErrorType,
)
from embedkit.image_source import ImageSource

__all__ = [
    # Builders
    "EmbedAuthorBuilder",
    "EmbedBuilder",
    "EmbedFieldBuilder",
    "EmbedFooterBuilder",
    "ImageSource",
    # Records
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "EmbedImage",
    "EmbedThumbnail",
    # Errors
    "EmbedKitError",
    "EmbedError",
    "EmbedErrorType",
    "BuilderConsumedError",
    "ImageSourceUrlError",
    "ImageSourceUrlErrorType",
    "ImageSourceAttachmentError",
    "ImageSourceAttachmentErrorType",
]
