"""Mutable model state: the language index and the n-gram probability matrix."""

from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

from src.profiles.errors import DuplicateLangError
from src.profiles.profile import LanguageProfile, validate_profile


class ModelState:
    """Language index plus n-gram -> per-language probability rows.

    Column ``i`` of every row belongs to ``languages[i]``. All rows share the
    same ``width``; slots of languages without evidence for an n-gram stay 0.0.
    """

    def __init__(self) -> None:
        self.languages: List[str] = []
        self.word_lang_prob_map: Dict[str, np.ndarray] = {}
        self.seed: Optional[int] = None
        self.width = 0
        self.version = 0

    def reserve(self, total_count: int) -> None:
        """Widen every row to ``total_count`` columns, zero padded."""
        if total_count <= self.width:
            return
        padding = total_count - self.width
        for ngram, row in self.word_lang_prob_map.items():
            self.word_lang_prob_map[ngram] = np.pad(row, (0, padding))
        self.width = total_count
        self.version += 1

    def add_profile(self, profile: LanguageProfile, index: int, total_count: int) -> None:
        """Merge one profile into column ``index`` of a ``total_count``-language model.

        ``index`` must be the next free column, ``len(languages)``, so that
        ``languages[i]`` always owns column ``i``. Nothing is mutated unless
        the profile is well formed and its language is not loaded yet.
        """
        validate_profile(profile, source=profile.name or "<profile>")
        if profile.name in self.languages:
            raise DuplicateLangError(f"duplicate the same language profile: '{profile.name}'")
        if index != len(self.languages):
            raise ValueError(
                f"Column index {index} does not match the next free column {len(self.languages)}."
            )
        if index >= total_count:
            raise ValueError(f"Column index {index} is outside a model of {total_count} languages.")

        self.reserve(total_count)
        self.languages.append(profile.name)
        for ngram, probability in profile.modeled_ngrams():
            row = self.word_lang_prob_map.get(ngram)
            if row is None:
                row = np.zeros(self.width, dtype=np.float64)
                self.word_lang_prob_map[ngram] = row
            row[index] = probability
        self.version += 1

    def clear(self) -> None:
        """Drop every loaded language; the seed is kept."""
        self.languages.clear()
        self.word_lang_prob_map.clear()
        self.width = 0
        self.version += 1


__all__ = ["ModelState"]
