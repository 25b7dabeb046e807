from dataclasses import dataclass

DOWNLOAD_FILENAME = "extracted_text.txt"
DOWNLOAD_MEDIA_TYPE = "text/plain"


@dataclass(frozen=True)
class Downloadable:
    """Text packaged for saving as a file."""

    content: str
    suggested_name: str = DOWNLOAD_FILENAME
    media_type: str = DOWNLOAD_MEDIA_TYPE
