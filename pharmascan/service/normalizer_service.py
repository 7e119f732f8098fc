from __future__ import annotations

import re

_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\n]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Fold line endings, blank out non-printable characters, collapse whitespace.

    Total over strings: the result is printable ASCII separated by single
    spaces, with no leading or trailing whitespace.
    """
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _NON_PRINTABLE_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
