"""Pure text transforms applied to extracted text on demand."""

import re

_WORD_START = re.compile(r"\b\w")
_WHITESPACE_RUN = re.compile(r"\s+")


def to_uppercase(text: str) -> str:
    return text.upper()


def to_power_case(text: str) -> str:
    """Uppercase the first character of every word, leave the rest untouched.

    Unlike ``str.title`` this never lowercases anything, so "hELLO" becomes
    "HELLO" and "2nd-rate" becomes "2nd-Rate".
    """
    return _WORD_START.sub(lambda match: match.group(0).upper(), text)


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and trim both ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()
