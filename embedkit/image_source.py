from dataclasses import dataclass

from .errors import (
    ImageSourceAttachmentError,
    ImageSourceAttachmentErrorType,
    ImageSourceUrlError,
    ImageSourceUrlErrorType,
)


@dataclass(frozen=True)
class ImageSource:
    """
    A resolved reference to an image, either a web URL or a message attachment.

    Create one with from_url() or from_attachment() so the reference is checked
    before it reaches a builder.
    """

    url: str

    @classmethod
    def from_url(cls, url: str) -> "ImageSource":
        """
        Use an image hosted on the web.

        Only http and https URLs are accepted.
        """
        if not (url.startswith("https:") or url.startswith("http:")):
            raise ImageSourceUrlError(ImageSourceUrlErrorType.PROTOCOL_UNSUPPORTED, url)
        return cls(url)

    @classmethod
    def from_attachment(cls, filename: str) -> "ImageSource":
        """
        Use an image uploaded alongside the message.

        The filename must carry a non-empty extension, e.g. "image.png".
        """
        _, dot, extension = filename.rpartition(".")
        if not dot:
            raise ImageSourceAttachmentError(ImageSourceAttachmentErrorType.EXTENSION_MISSING, filename)
        if not extension:
            raise ImageSourceAttachmentError(ImageSourceAttachmentErrorType.EXTENSION_EMPTY, filename)
        return cls(f"attachment://{filename}")
