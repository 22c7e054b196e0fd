"""
Question image decoding.

The backend sends images as base64 text, sometimes with a PNG/JPEG data-URI
header and embedded line breaks. decode_question_image() returns the raw
bytes when they form a readable image, otherwise None so the caller can
show a placeholder.
"""
from __future__ import annotations

import base64
import binascii
import io
import logging
import re

from PIL import Image, UnidentifiedImageError

log = logging.getLogger(__name__)

PLACEHOLDER_GLYPH = "🖼️"

_WHITESPACE_RE = re.compile(r"[ \n\r\t]")
_KNOWN_PREFIXES = (
    "data:image/png;base64,",
    "data:image/jpeg;base64,",
)


def clean_base64(payload: str) -> str:
    cleaned = _WHITESPACE_RE.sub("", payload)
    for prefix in _KNOWN_PREFIXES:
        cleaned = cleaned.replace(prefix, "")
    return cleaned.strip()


def decode_question_image(payload: str | None) -> bytes | None:
    if not payload:
        return None
    try:
        raw = base64.b64decode(clean_base64(payload), validate=True)
    except (binascii.Error, ValueError) as exc:
        log.debug("Question image is not valid base64: %s", exc)
        return None
    if not raw:
        return None

    try:
        with Image.open(io.BytesIO(raw)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
        log.debug("Question image could not be decoded: %s", exc)
        return None
    return raw
