from pathlib import Path

import pytest

from doctext.intake.exceptions import FileReadError
from doctext.intake.file_loader import FileLoader
from doctext.intake.models import DeclaredType, Document


def _make_document(path: Path) -> Document:
    return Document(
        name=path.name,
        declared_type=DeclaredType.PDF,
        media_type="application/pdf",
        size_bytes=1024,
        path=path,
    )


class TestLoadReturnsBytes:
    def test_returns_file_content(self, tmp_path: Path) -> None:
        path = tmp_path / "report.pdf"
        path.write_bytes(b"%PDF test content")

        result = FileLoader().load(_make_document(path))

        assert result == b"%PDF test content"


class TestLoadRaisesWhenFileMissing:
    def test_raises_file_read_error(self, tmp_path: Path) -> None:
        document = _make_document(tmp_path / "missing.pdf")

        with pytest.raises(FileReadError, match="missing"):
            FileLoader().load(document)

    def test_raises_file_read_error_for_directory(self, tmp_path: Path) -> None:
        directory = tmp_path / "folder.pdf"
        directory.mkdir()

        with pytest.raises(FileReadError):
            FileLoader().load(_make_document(directory))
