"""Helpers turning uploaded or on-disk text sources into strings."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Union

TextSource = Union[BytesIO, Path, bytes, str]


def ensure_text(source: TextSource) -> str:
    """Decode an extracted-text source as UTF-8; a leading BOM is dropped."""
    if isinstance(source, str):
        return source
    if isinstance(source, Path):
        payload = source.read_bytes()
    elif isinstance(source, BytesIO):
        payload = source.getvalue()
    elif isinstance(source, bytes):
        payload = source
    else:
        raise TypeError(f"Unsupported text source: {type(source)!r}")
    return payload.decode("utf-8-sig")
