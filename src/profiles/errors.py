"""Error taxonomy shared by profile loading and model construction."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    FILE_LOAD_ERROR = "FileLoadError"
    FORMAT_ERROR = "FormatError"
    DUPLICATE_LANG_ERROR = "DuplicateLangError"
    NEED_LOAD_PROFILE_ERROR = "NeedLoadProfileError"


class LangDetectError(Exception):
    """Base error carrying an `ErrorCode` plus a human-readable message."""

    code: ErrorCode = ErrorCode.FORMAT_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class FileLoadError(LangDetectError):
    """A profile source could not be opened."""

    code = ErrorCode.FILE_LOAD_ERROR


class FormatError(LangDetectError):
    """A profile stream does not match the expected structure."""

    code = ErrorCode.FORMAT_ERROR


class DuplicateLangError(LangDetectError):
    """Two profiles declare the same language code."""

    code = ErrorCode.DUPLICATE_LANG_ERROR


class NeedLoadProfileError(LangDetectError):
    """The model is empty or too small for the requested operation."""

    code = ErrorCode.NEED_LOAD_PROFILE_ERROR


__all__ = [
    "DuplicateLangError",
    "ErrorCode",
    "FileLoadError",
    "FormatError",
    "LangDetectError",
    "NeedLoadProfileError",
]
