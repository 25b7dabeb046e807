from doctext.intake.exceptions import FileReadError
from doctext.intake.models import Document


class FileLoader:
    """Reads an accepted document's bytes from disk."""

    def load(self, document: Document) -> bytes:
        """Read document bytes.

        Raises:
            FileReadError: if the file is missing or cannot be read.
        """
        path = document.path
        if not path.exists():
            raise FileReadError(f"File not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Could not read {path}: {exc}") from exc
