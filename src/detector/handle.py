"""Read-only model view handed to the classifier."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import numpy as np

from src.profiles.config import DEFAULT_ALPHA

from .state import ModelState


@dataclass(frozen=True)
class DetectorModel:
    """Snapshot of the language index and probability matrix.

    ``alpha`` is the smoothing parameter and ``seed`` the sampling seed; both
    are forwarded untouched to the classifier.
    """

    languages: Tuple[str, ...]
    word_lang_prob_map: Mapping[str, np.ndarray]
    alpha: float = DEFAULT_ALPHA
    seed: Optional[int] = None

    @property
    def n_languages(self) -> int:
        return len(self.languages)

    def probabilities(self, ngram: str) -> Optional[np.ndarray]:
        """Return the per-language row for ``ngram``, or None when it is not modeled."""
        return self.word_lang_prob_map.get(ngram)

    def index_of(self, language: str) -> int:
        try:
            return self.languages.index(language)
        except ValueError as exc:
            raise ValueError(f"Unknown language '{language}'. Loaded: {list(self.languages)}") from exc

    def __contains__(self, ngram: object) -> bool:
        return ngram in self.word_lang_prob_map


def snapshot_state(state: ModelState) -> Tuple[Tuple[str, ...], Mapping[str, np.ndarray]]:
    """Copy the state by value into read-only structures."""
    rows = {}
    for ngram, row in state.word_lang_prob_map.items():
        frozen = row.copy()
        frozen.setflags(write=False)
        rows[ngram] = frozen
    return tuple(state.languages), MappingProxyType(rows)


__all__ = ["DetectorModel", "snapshot_state"]
