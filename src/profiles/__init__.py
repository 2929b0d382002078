"""Language profiles: the on-disk record, its parser, and the sources that supply it."""

from .errors import (
    DuplicateLangError,
    ErrorCode,
    FileLoadError,
    FormatError,
    LangDetectError,
    NeedLoadProfileError,
)
from .parser import parse_profile, read_profile
from .profile import LanguageProfile, validate_profile
from .sources import (
    DirectoryProfileSource,
    LiteralProfileSource,
    ProfileEntry,
    ProfileSource,
    ResourceProfileSource,
    bundled_source,
)

__all__ = [
    "DirectoryProfileSource",
    "DuplicateLangError",
    "ErrorCode",
    "FileLoadError",
    "FormatError",
    "LangDetectError",
    "LanguageProfile",
    "LiteralProfileSource",
    "NeedLoadProfileError",
    "ProfileEntry",
    "ProfileSource",
    "ResourceProfileSource",
    "bundled_source",
    "parse_profile",
    "read_profile",
    "validate_profile",
]
