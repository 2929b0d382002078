"""Providers that hand out profile byte streams in column order.

Every provider exposes ``entries()``: an ordered list of `ProfileEntry`
records. Streams are opened one entry at a time by the consumer, so each can
be closed before the next one is opened.
"""

from __future__ import annotations

import importlib.resources
import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, List, Protocol, Sequence, Union

from .config import HIDDEN_PREFIX, MIN_LITERAL_PROFILES, PROFILE_ENCODING, get_bundle
from .errors import FileLoadError, NeedLoadProfileError


@dataclass(frozen=True)
class ProfileEntry:
    """A named, lazily opened profile stream."""

    label: str
    opener: Callable[[], BinaryIO]

    def open(self) -> BinaryIO:
        try:
            return self.opener()
        except OSError as exc:
            raise FileLoadError(f"can't open profile '{self.label}': {exc}") from exc


class ProfileSource(Protocol):
    """Anything that can list profile streams in a stable order."""

    def entries(self) -> Sequence[ProfileEntry]: ...


class DirectoryProfileSource:
    """Every regular, non-hidden file directly inside ``directory``."""

    def __init__(self, directory: Union[str, Path], hidden_prefix: str = HIDDEN_PREFIX) -> None:
        self.directory = Path(directory)
        self.hidden_prefix = hidden_prefix

    def entries(self) -> List[ProfileEntry]:
        if not self.directory.is_dir():
            raise FileLoadError(f"Not found profile directory: {self.directory}")
        try:
            children = sorted(self.directory.iterdir(), key=lambda child: child.name)
        except OSError as exc:
            raise FileLoadError(f"can't list profile directory {self.directory}: {exc}") from exc

        entries = [
            ProfileEntry(label=str(child), opener=_file_opener(child))
            for child in children
            if not child.name.startswith(self.hidden_prefix) and child.is_file()
        ]
        if not entries:
            raise NeedLoadProfileError(f"No profiles found in {self.directory}")
        return entries


class ResourceProfileSource:
    """Named profile resources bundled inside an importable package."""

    def __init__(self, package: str, names: Sequence[str]) -> None:
        self.package = package
        self.names = tuple(names)

    def entries(self) -> List[ProfileEntry]:
        try:
            root = importlib.resources.files(self.package)
        except ModuleNotFoundError as exc:
            raise FileLoadError(f"Profile package '{self.package}' is not importable") from exc

        entries: List[ProfileEntry] = []
        for name in self.names:
            resource = root.joinpath(name)
            if not resource.is_file():
                raise FileLoadError(f"Profile resource '{name}' not found in package '{self.package}'")
            entries.append(ProfileEntry(label=f"{self.package}/{name}", opener=_resource_opener(resource)))
        return entries

    @classmethod
    def from_bundle(cls, key: str) -> "ResourceProfileSource":
        bundle = get_bundle(key)
        return cls(bundle["package"], bundle["names"])


class LiteralProfileSource:
    """Serialized profiles already held in memory."""

    def __init__(self, profiles: Sequence[str]) -> None:
        if len(profiles) < MIN_LITERAL_PROFILES:
            raise NeedLoadProfileError(
                f"Need at least {MIN_LITERAL_PROFILES} profiles, got {len(profiles)}"
            )
        self.profiles = tuple(profiles)

    def entries(self) -> List[ProfileEntry]:
        return [
            ProfileEntry(label=f"<profile #{position}>", opener=_bytes_opener(text))
            for position, text in enumerate(self.profiles)
        ]


def bundled_source(key: str) -> ResourceProfileSource:
    """Return the resource source for a bundle registered in the config."""
    return ResourceProfileSource.from_bundle(key)


# ---------------------------------------------------------------------------
# Internal helpers


def _file_opener(path: Path) -> Callable[[], BinaryIO]:
    return lambda: path.open("rb")


def _resource_opener(resource) -> Callable[[], BinaryIO]:
    return lambda: resource.open("rb")


def _bytes_opener(text: str) -> Callable[[], BinaryIO]:
    return lambda: io.BytesIO(text.encode(PROFILE_ENCODING))


__all__ = [
    "DirectoryProfileSource",
    "LiteralProfileSource",
    "ProfileEntry",
    "ProfileSource",
    "ResourceProfileSource",
    "bundled_source",
]
