from enum import Enum


class EmbedKitError(Exception):
    """Base class for every error raised by embedkit."""


class EmbedErrorType(Enum):
    AUTHOR_NAME_EMPTY = "author name empty"
    AUTHOR_NAME_TOO_LONG = "author name too long"
    COLOR_NOT_RGB = "color is not a valid RGB value"
    DESCRIPTION_EMPTY = "description empty"
    DESCRIPTION_TOO_LONG = "description too long"
    FIELD_NAME_EMPTY = "field name empty"
    FIELD_NAME_TOO_LONG = "field name too long"
    FIELD_VALUE_EMPTY = "field value empty"
    FIELD_VALUE_TOO_LONG = "field value too long"
    FOOTER_TEXT_EMPTY = "footer text empty"
    FOOTER_TEXT_TOO_LONG = "footer text too long"
    TITLE_EMPTY = "title empty"
    TITLE_TOO_LONG = "title too long"
    TOO_MANY_FIELDS = "too many fields"
    TOTAL_CONTENT_TOO_LARGE = "total content too large"


class EmbedError(EmbedKitError):
    """
    Raised by EmbedBuilder.build when the assembled embed breaks a Discord limit.

    Attributes:
        kind: Which check failed
        value: The offending value (a string, the color, or the field count)
        limit: The limit that was exceeded, for length and count checks
    """

    def __init__(self, kind: EmbedErrorType, value=None, limit: int = None):
        self.kind = kind
        self.value = value
        self.limit = limit
        message = kind.value
        if limit is not None:
            message = f"{message} (limit {limit})"
        super().__init__(message)


class ImageSourceUrlErrorType(Enum):
    PROTOCOL_UNSUPPORTED = "url protocol is not http or https"


class ImageSourceUrlError(EmbedKitError):
    """Raised when an image URL can't be used as an image source."""

    def __init__(self, kind: ImageSourceUrlErrorType, url: str):
        self.kind = kind
        self.url = url
        super().__init__(f"{kind.value}: {url!r}")


class ImageSourceAttachmentErrorType(Enum):
    EXTENSION_EMPTY = "attachment filename extension is empty"
    EXTENSION_MISSING = "attachment filename has no extension"


class ImageSourceAttachmentError(EmbedKitError):
    """Raised when an attachment filename can't be used as an image source."""

    def __init__(self, kind: ImageSourceAttachmentErrorType, filename: str):
        self.kind = kind
        self.filename = filename
        super().__init__(f"{kind.value}: {filename!r}")


class BuilderConsumedError(EmbedKitError, RuntimeError):
    """Raised when a builder is used again after build() was called on it."""

    def __init__(self, builder_name: str):
        self.builder_name = builder_name
        super().__init__(f"{builder_name} has already been built and can't be reused")
