from doctext.export.models import Downloadable


def to_clipboard_payload(text: str) -> str:
    return text


def to_downloadable(text: str) -> Downloadable:
    return Downloadable(content=text)
