"""Percent-encoding of individual path segments for listing links.

Only characters that are unsafe or meaningful inside an href are escaped, so
non-ASCII file names stay readable in the generated links.
"""

from __future__ import annotations

import os
from urllib.parse import unquote

# Controls, space, " < > ` # ? { } \ and % itself.
_ESCAPED = [*range(0x00, 0x20), 0x7F, *map(ord, ' "<>`#?{}\\%')]
_ESCAPE_TABLE = {code: f"%{code:02X}" for code in _ESCAPED}

_SEPARATORS = {os.sep, "/"} | ({os.altsep} if os.altsep else set())


def encode_segment(segment: str) -> str:
    """Percent-encode a single path segment."""
    return segment.translate(_ESCAPE_TABLE)


def split_path(relative_path: str) -> list[str]:
    parts = [relative_path]
    for sep in _SEPARATORS:
        parts = [piece for part in parts for piece in part.split(sep)]
    return [p for p in parts if p and p != "."]


def encode_path(relative_path: str) -> str:
    """Encode every segment of a root-relative path and join them with '/'."""
    return "/".join(encode_segment(segment) for segment in split_path(relative_path))


def decode_segment(encoded: str) -> str:
    """Lossy percent-decoding.

    Malformed escapes are kept verbatim and byte sequences that are not valid
    UTF-8 are replaced with U+FFFD, so decoding never fails.
    """
    return unquote(encoded, encoding="utf-8", errors="replace")
