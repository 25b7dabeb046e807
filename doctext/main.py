"""
doctext - extract plain text from a PDF or image.

Usage:
    doctext scan.png                         # OCR an image, print the text
    doctext report.pdf --collapse-whitespace # decode a PDF, tidy whitespace
    doctext report.pdf --uppercase --download ./out
    doctext report.pdf --copy | pbcopy       # clipboard payload on stdout
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from doctext.config.settings import Settings
from doctext.exceptions import DocTextError
from doctext.export.clipboard import StreamClipboard
from doctext.extractor import TextExtractor, build_extractor
from doctext.intake.models import FileHandle
from doctext.logging.logger import Log
from doctext.session.models import SessionState
from doctext.session.session import ExtractionSession

EXIT_OK = 0
EXIT_FAILED = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doctext",
        description="Extract plain text from a PDF or image.",
    )
    parser.add_argument("path", type=Path, help="PDF or image file to extract")
    parser.add_argument(
        "--uppercase", action="store_true", help="convert the text to uppercase"
    )
    parser.add_argument(
        "--power-case",
        action="store_true",
        help="capitalize the first letter of every word",
    )
    parser.add_argument(
        "--collapse-whitespace",
        action="store_true",
        help="collapse whitespace runs to single spaces",
    )
    parser.add_argument(
        "--copy",
        action="store_true",
        help="write the clipboard payload to stdout instead of printing the text",
    )
    parser.add_argument(
        "--download",
        type=Path,
        metavar="DIR",
        help="save the text as extracted_text.txt in DIR",
    )
    return parser


def render_progress(session: ExtractionSession) -> None:
    if session.state is SessionState.RUNNING:
        sys.stderr.write(f"\rProcessing... {session.progress_percent:3d}%")
    elif session.state in (SessionState.COMPLETED, SessionState.FAILED):
        sys.stderr.write("\n")
    sys.stderr.flush()


def apply_transforms(extractor: TextExtractor, args: argparse.Namespace) -> None:
    if args.uppercase:
        extractor.apply_uppercase()
    if args.power_case:
        extractor.apply_power_case()
    if args.collapse_whitespace:
        extractor.collapse_whitespace()


async def run(extractor: TextExtractor, args: argparse.Namespace) -> int:
    """Submit, extract, transform and export; returns the process exit code."""
    if not args.path.is_file():
        Log.error(f"No such file: {args.path}")
        return EXIT_FAILED

    try:
        extractor.submit_file(FileHandle.from_path(args.path))
        session = await extractor.start_extraction()
    except DocTextError as exc:
        Log.error(str(exc))
        return EXIT_FAILED

    if session.state is SessionState.FAILED:
        Log.error(f"Error extracting text: {session.failure_reason}")
        return EXIT_FAILED

    apply_transforms(extractor, args)

    if args.download is not None:
        extractor.download_as_text(args.download)
    if args.copy:
        extractor.copy_to_clipboard()
    else:
        sys.stdout.write(extractor.text.value + "\n")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args -> build dependencies -> run one extraction."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    extractor = build_extractor(settings, clipboard=StreamClipboard(sys.stdout))
    extractor.session.subscribe(render_progress)
    return asyncio.run(run(extractor, args))


if __name__ == "__main__":
    sys.exit(main())
