"""
🧬 Record Codec
Flat-text wire format shared by the AppleScript side and the host.

    field|||field|||field:::field|||field|||field

Each field is percent-escaped before joining, so the delimiters never appear
inside content. List-valued fields escape each item, join them with ",",
then escape the joined text again as an ordinary field.
"""

import re
from typing import Iterable, Sequence

FIELD_DELIMITER  = "|||"
RECORD_DELIMITER = ":::"
LIST_DELIMITER   = ","

# Order matters: "%" must be escaped first.
_ESCAPES = (
    ("%", "%25"),
    ("|", "%7C"),
    (":", "%3A"),
    (",", "%2C"),
)
_UNESCAPES = {code: char for char, code in _ESCAPES}
_UNESCAPE_RE = re.compile("|".join(re.escape(code) for _, code in _ESCAPES))


def escape(text: str) -> str:
    for char, code in _ESCAPES:
        text = text.replace(char, code)
    return text


def unescape(text: str) -> str:
    # Single pass so "%252C" decodes to the literal "%2C".
    return _UNESCAPE_RE.sub(lambda m: _UNESCAPES[m.group(0)], text)


# ─── Records ──────────────────────────────────────────────────────────────────

def encode(fields: Sequence[str]) -> str:
    """Encode one record."""
    return FIELD_DELIMITER.join(escape(str(f)) for f in fields)


def encode_batch(records: Iterable[Sequence[str]]) -> str:
    """Encode an ordered batch of records."""
    return RECORD_DELIMITER.join(encode(r) for r in records)


def decode(text: str) -> tuple[str, ...]:
    """Decode one record. Never raises; a short record stays short."""
    return tuple(unescape(f) for f in text.split(FIELD_DELIMITER))


def decode_batch(text: str) -> list[tuple[str, ...]]:
    """
    Decode a batch. Empty text is an empty batch; callers map that to their
    "not found" representation rather than to a single empty record.
    """
    if not text:
        return []
    return [decode(chunk) for chunk in text.split(RECORD_DELIMITER)]


# ─── List sub-fields ──────────────────────────────────────────────────────────

def encode_list(items: Iterable[str]) -> str:
    """Encode a multi-valued field. The result is a raw field value."""
    return LIST_DELIMITER.join(escape(str(i)) for i in items)


def decode_list(text: str) -> list[str]:
    """Decode a multi-valued field that has already been unescaped once."""
    if not text:
        return []
    return [unescape(item) for item in text.split(LIST_DELIMITER)]
