"""Clean and normalize raw profile text before it is sent for extraction."""

import re
import unicodedata

from cv_genie.config import MAX_PROFILE_CHARS

# Control characters other than tab and newline (OCR and copy/paste debris)
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def clean_profile_text(text: str, max_chars: int = MAX_PROFILE_CHARS) -> str:
    """
    Normalize unicode (NFC), drop control characters, collapse runs of
    whitespace and truncate very long inputs.
    """
    if not text or not text.strip():
        return ""
    t = unicodedata.normalize("NFC", text)
    t = t.replace("\r\n", "\n").replace("\r", "\n")
    t = _CONTROL_CHARS.sub("", t)
    t = t.replace("\u00a0", " ")
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r" *\n *", "\n", t)
    t = re.sub(r"\n{3,}", "\n\n", t)
    t = t.strip()
    if len(t) > max_chars:
        t = t[:max_chars] + "\n\n[Content truncated.]"
    return t
