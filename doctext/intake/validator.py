from doctext.intake.exceptions import FileTooLargeError
from doctext.intake.models import DeclaredType, Document, FileHandle

DEFAULT_MAX_FILE_SIZE_BYTES = 5_000_000


class IntakeValidator:
    """Classifies candidate files into accepted documents.

    Unsupported media types are accepted here and tagged so that dispatch can
    report the precise failure later.
    """

    def __init__(self, max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES) -> None:
        self._max_file_size_bytes = max_file_size_bytes

    @property
    def max_file_size_bytes(self) -> int:
        return self._max_file_size_bytes

    def validate(self, candidate: FileHandle) -> Document:
        """Accept a candidate file or reject it.

        Raises:
            FileTooLargeError: if the file exceeds the size ceiling.
        """
        if candidate.size_bytes > self._max_file_size_bytes:
            raise FileTooLargeError(
                f"File '{candidate.name}' is too large ({candidate.size_bytes} bytes). "
                f"Please upload a file no larger than {self._max_file_size_bytes} bytes."
            )
        return Document(
            name=candidate.name,
            declared_type=DeclaredType.from_media_type(candidate.media_type),
            media_type=candidate.media_type,
            size_bytes=candidate.size_bytes,
            path=candidate.path,
        )
