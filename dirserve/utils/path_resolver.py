"""Mapping of request paths onto the served root.

The resolved target is canonicalized before the containment check, so '..'
segments, injected absolute paths and symlinks leading outside the root are
all rejected the same way.
"""

from __future__ import annotations

import os

from dirserve.exceptions import ForbiddenPathError, MalformedPathError
from dirserve.utils.segment_codec import decode_segment


def is_within_root(root: str, path: str) -> bool:
    """Return True if the absolute ``path`` lies in the subtree of ``root``.

    Both arguments are expected to be canonical already.
    """
    try:
        common = os.path.commonpath([root, path])
    except ValueError:
        # different drives or mixed absolute/relative paths
        return False
    return common == root


def resolve_request_path(root: str, request_path: str) -> str:
    """Turn a raw request path (``/sub%20dir``) into an absolute path under ``root``.

    Raises:
        MalformedPathError: If the path has no leading '/' or cannot be
            represented on this platform
        ForbiddenPathError: If the canonical target escapes ``root``
    """
    if not request_path.startswith("/"):
        raise MalformedPathError(f"Request path must start with '/': {request_path!r}")

    relative = decode_segment(request_path[1:])
    if "\x00" in relative:
        raise MalformedPathError(f"Request path contains a NUL byte: {request_path!r}")

    try:
        target = os.path.realpath(os.path.join(root, relative))
    except (ValueError, OSError) as e:
        raise MalformedPathError(f"Cannot resolve request path {request_path!r}: {e}")

    if not is_within_root(root, target):
        raise ForbiddenPathError(f"Path escapes the served root: {request_path}")
    return target


def relative_to_root(root: str, path: str) -> str:
    """Path of ``path`` relative to ``root``, '' for the root itself.

    Raises:
        ValueError: If ``path`` is not inside ``root``
    """
    if not is_within_root(root, path):
        raise ValueError(f"{path} is not inside {root}")
    rel = os.path.relpath(path, root)
    return "" if rel == os.curdir else rel
