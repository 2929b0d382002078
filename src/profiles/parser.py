"""Decode serialized profiles into `LanguageProfile` records."""

from __future__ import annotations

import json
from typing import BinaryIO, Union

from .config import PROFILE_ENCODING
from .errors import FormatError
from .profile import LanguageProfile


def parse_profile(data: Union[bytes, str], source: str = "<profile>") -> LanguageProfile:
    """Parse one JSON profile, raising `FormatError` on any encoding or shape problem."""
    if isinstance(data, bytes):
        try:
            text = data.decode(PROFILE_ENCODING)
        except UnicodeDecodeError as exc:
            raise FormatError(f"profile format error in '{source}': {exc}") from exc
    else:
        text = data

    # Some published profile sets carry a UTF-8 byte order mark.
    text = text.lstrip("\ufeff")
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise FormatError(f"profile format error in '{source}': {exc}") from exc
    return LanguageProfile.from_mapping(payload, source=source)


def read_profile(stream: BinaryIO, source: str = "<stream>") -> LanguageProfile:
    """Read a binary stream to the end and parse it."""
    return parse_profile(stream.read(), source=source)


__all__ = ["parse_profile", "read_profile"]
