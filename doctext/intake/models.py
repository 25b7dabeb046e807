import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

PDF_MEDIA_TYPE = "application/pdf"
IMAGE_MEDIA_TYPE_PREFIX = "image/"


class DeclaredType(str, Enum):
    """Document category derived from the declared media type."""

    PDF = "pdf"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_media_type(cls, media_type: str) -> "DeclaredType":
        if media_type == PDF_MEDIA_TYPE:
            return cls.PDF
        if media_type.startswith(IMAGE_MEDIA_TYPE_PREFIX):
            return cls.IMAGE
        return cls.UNSUPPORTED


@dataclass(frozen=True)
class FileHandle:
    """A candidate file as offered by the presentation layer (metadata only)."""

    name: str
    media_type: str
    size_bytes: int
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "FileHandle":
        """Describe a file on disk without reading its content."""
        media_type, _encoding = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            media_type=media_type or "",
            size_bytes=path.stat().st_size,
            path=path,
        )


@dataclass(frozen=True)
class Document:
    """An accepted file pending extraction."""

    name: str
    declared_type: DeclaredType
    media_type: str
    size_bytes: int
    path: Path
