from pathlib import Path

from doctext.export.models import Downloadable


class DownloadWriter:
    """Saves downloadables to a directory under their suggested name."""

    def __init__(self, directory: Path | None = None) -> None:
        self._directory = directory if directory is not None else Path.cwd()

    def save(self, downloadable: Downloadable, directory: Path | None = None) -> Path:
        """Write the content as UTF-8 and return the written path."""
        target_dir = directory if directory is not None else self._directory
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / downloadable.suggested_name
        path.write_text(downloadable.content, encoding="utf-8")
        return path
