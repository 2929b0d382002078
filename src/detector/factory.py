"""Detector factory: loads language profiles and hands out model snapshots.

A `DetectorFactory` owns one `ModelState`. Profiles are merged in batches;
each batch fixes the column index of its languages in load order. Errors abort
the batch without rolling back profiles merged before the failure, so callers
should ``clear()`` before retrying a failed load.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import BinaryIO, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from src.profiles.config import DEFAULT_ALPHA
from src.profiles.errors import FileLoadError, NeedLoadProfileError
from src.profiles.parser import read_profile
from src.profiles.profile import LanguageProfile
from src.profiles.sources import (
    DirectoryProfileSource,
    LiteralProfileSource,
    ProfileSource,
    bundled_source,
)

from .handle import DetectorModel, snapshot_state
from .state import ModelState


class DetectorFactory:
    """Build the shared n-gram model and construct detector handles from it."""

    def __init__(self, state: Optional[ModelState] = None) -> None:
        self.state = state if state is not None else ModelState()
        # Batches and snapshots are serialized so readers never see a partial merge.
        self._lock = threading.RLock()
        self._snapshot: Optional[Tuple[Tuple[str, ...], Mapping[str, np.ndarray]]] = None
        self._snapshot_version = -1

    # ------------------------------------------------------------------
    # Loading

    def load_source(self, source: ProfileSource) -> int:
        """Merge every profile supplied by ``source``; returns the number merged."""
        with self._lock:
            entries = source.entries()
            offset, total = self._begin_batch(len(entries))
            for position, entry in enumerate(entries):
                with entry.open() as stream:
                    profile = _read(stream, entry.label)
                self.state.add_profile(profile, offset + position, total)
        _log_batch(len(entries), total)
        return len(entries)

    def load_directory(self, directory: Union[str, Path]) -> int:
        """Load every regular, non-hidden file in ``directory`` as a profile."""
        return self.load_source(DirectoryProfileSource(directory))

    def load_bundle(self, key: str = "sm") -> int:
        """Load a profile set bundled as package resources.

        The profile data files are not shipped with this package: install them
        into the bundle's resource package (``src/profiles/sm/`` for ``"sm"``)
        first. Until then this raises `FileLoadError` naming the first missing
        profile, before anything is merged.
        """
        return self.load_source(bundled_source(key))

    def load_json_profiles(self, profiles: Sequence[str]) -> int:
        """Load serialized JSON profiles; at least two are required."""
        return self.load_source(LiteralProfileSource(profiles))

    def load_streams(self, streams: Sequence[BinaryIO]) -> int:
        """Load already opened binary streams, closing each of them."""
        with self._lock:
            try:
                offset, total = self._begin_batch(len(streams))
                for position, stream in enumerate(streams):
                    label = str(getattr(stream, "name", f"<stream #{position}>"))
                    with stream:
                        profile = _read(stream, label)
                    self.state.add_profile(profile, offset + position, total)
            finally:
                for stream in streams:
                    if not stream.closed:
                        stream.close()
        _log_batch(len(streams), total)
        return len(streams)

    # ------------------------------------------------------------------
    # Lifecycle and read surface

    def create(self, alpha: Optional[float] = None) -> DetectorModel:
        """Return a detector handle over the current model.

        ``alpha`` is the smoothing parameter forwarded to the classifier
        (0.5 when omitted).
        """
        with self._lock:
            if not self.state.languages:
                raise NeedLoadProfileError("need to load profiles")
            languages, word_lang_prob_map = self._current_snapshot()
            return DetectorModel(
                languages=languages,
                word_lang_prob_map=word_lang_prob_map,
                alpha=DEFAULT_ALPHA if alpha is None else float(alpha),
                seed=self.state.seed,
            )

    def clear(self) -> None:
        """Drop every loaded profile so the factory can be reloaded."""
        with self._lock:
            self.state.clear()

    def set_seed(self, seed: Optional[int]) -> None:
        with self._lock:
            self.state.seed = seed

    def get_lang_list(self) -> Tuple[str, ...]:
        """Loaded language codes in column order."""
        with self._lock:
            return tuple(self.state.languages)

    # ------------------------------------------------------------------
    # Internal helpers

    def _begin_batch(self, size: int) -> Tuple[int, int]:
        offset = len(self.state.languages)
        total = offset + size
        self.state.reserve(total)
        return offset, total

    def _current_snapshot(self) -> Tuple[Tuple[str, ...], Mapping[str, np.ndarray]]:
        if self._snapshot is None or self._snapshot_version != self.state.version:
            self._snapshot = snapshot_state(self.state)
            self._snapshot_version = self.state.version
        return self._snapshot


def _read(stream: BinaryIO, label: str) -> LanguageProfile:
    try:
        return read_profile(stream, source=label)
    except OSError as exc:
        raise FileLoadError(f"can't read profile stream '{label}': {exc}") from exc


def _log_batch(merged: int, total: int) -> None:
    print(f"[profiles] Merged {merged} profiles ({total} languages loaded)")


__all__ = ["DetectorFactory"]
