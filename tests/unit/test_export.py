import io
from pathlib import Path

from doctext.export.adapter import to_clipboard_payload, to_downloadable
from doctext.export.clipboard import MemoryClipboard, StreamClipboard
from doctext.export.download import DownloadWriter
from doctext.export.models import Downloadable


class TestAdapter:
    def test_clipboard_payload_is_text_verbatim(self) -> None:
        assert to_clipboard_payload("  a\nb ") == "  a\nb "

    def test_downloadable_defaults(self) -> None:
        downloadable = to_downloadable("content")
        assert downloadable == Downloadable(
            content="content",
            suggested_name="extracted_text.txt",
            media_type="text/plain",
        )


class TestClipboards:
    def test_memory_clipboard_keeps_last_payload(self) -> None:
        clipboard = MemoryClipboard()
        clipboard.write("first")
        clipboard.write("second")
        assert clipboard.contents == "second"

    def test_stream_clipboard_writes_payload(self) -> None:
        stream = io.StringIO()
        StreamClipboard(stream).write("copied")
        assert stream.getvalue() == "copied"


class TestDownloadWriter:
    def test_writes_under_suggested_name(self, tmp_path: Path) -> None:
        path = DownloadWriter(tmp_path).save(to_downloadable("Grüße"))

        assert path == tmp_path / "extracted_text.txt"
        assert path.read_text(encoding="utf-8") == "Grüße"

    def test_directory_argument_overrides_default(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "out"

        path = DownloadWriter(tmp_path).save(to_downloadable("x"), target)

        assert path == target / "extracted_text.txt"
        assert path.exists()

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        writer = DownloadWriter(tmp_path)
        writer.save(to_downloadable("old"))
        path = writer.save(to_downloadable("new"))
        assert path.read_text(encoding="utf-8") == "new"
