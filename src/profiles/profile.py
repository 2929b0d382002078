"""Per-language n-gram frequency record."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Tuple

from .config import MAX_NGRAM_LENGTH, MIN_NGRAM_LENGTH
from .errors import FormatError

N_WORDS_SIZE = MAX_NGRAM_LENGTH


@dataclass(frozen=True)
class LanguageProfile:
    """Language code, n-gram counts and per-length totals for one language.

    ``n_words[k]`` holds the total occurrence count of n-grams of length
    ``k + 1`` and is the denominator for their relative frequencies. Lengths
    are counted in UTF-16 code units, so a character outside the Basic
    Multilingual Plane counts as two.
    """

    name: str
    freq: Mapping[str, int] = field(default_factory=dict)
    n_words: Tuple[int, ...] = (0, 0, 0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "freq", MappingProxyType(dict(self.freq)))
        object.__setattr__(self, "n_words", tuple(self.n_words))

    @classmethod
    def from_mapping(cls, payload: Any, source: str = "<profile>") -> "LanguageProfile":
        """Build a validated profile from a decoded ``{name, freq, n_words}`` object."""
        if not isinstance(payload, Mapping):
            raise FormatError(f"profile format error in '{source}': expected an object, got {type(payload).__name__}")
        missing = [key for key in ("name", "freq", "n_words") if key not in payload]
        if missing:
            raise FormatError(f"profile format error in '{source}': missing {', '.join(missing)}")

        freq = payload["freq"]
        n_words = payload["n_words"]
        if not isinstance(freq, Mapping):
            raise FormatError(f"profile format error in '{source}': 'freq' must be an object")
        if not isinstance(n_words, (list, tuple)):
            raise FormatError(f"profile format error in '{source}': 'n_words' must be an array")

        profile = cls(name=payload["name"], freq=freq, n_words=tuple(n_words))
        validate_profile(profile, source=source)
        return profile

    def to_mapping(self) -> Dict[str, Any]:
        return {"name": self.name, "freq": dict(self.freq), "n_words": list(self.n_words)}

    def to_json(self) -> str:
        """Serialize into the on-disk profile format."""
        return json.dumps(self.to_mapping(), ensure_ascii=False)

    def modeled_ngrams(self) -> Iterator[Tuple[str, float]]:
        """Yield ``(ngram, relative frequency)`` for every n-gram of a modeled length."""
        for ngram, count in self.freq.items():
            length = ngram_length(ngram)
            if MIN_NGRAM_LENGTH <= length <= MAX_NGRAM_LENGTH:
                yield ngram, count / self.n_words[length - 1]


def validate_profile(profile: LanguageProfile, source: str = "<profile>") -> None:
    """Raise `FormatError` unless the profile can be merged into a model."""
    if not isinstance(profile.name, str) or not profile.name:
        raise FormatError(f"profile format error in '{source}': 'name' must be a non-empty string")

    if len(profile.n_words) != N_WORDS_SIZE:
        raise FormatError(
            f"profile format error in '{source}': 'n_words' must hold {N_WORDS_SIZE} totals, "
            f"got {len(profile.n_words)}"
        )
    for total in profile.n_words:
        if not _is_count(total):
            raise FormatError(f"profile format error in '{source}': invalid n_words total {total!r}")

    for ngram, count in profile.freq.items():
        if not isinstance(ngram, str):
            raise FormatError(f"profile format error in '{source}': n-gram keys must be strings")
        if not _is_count(count):
            raise FormatError(f"profile format error in '{source}': invalid count {count!r} for {ngram!r}")
        length = ngram_length(ngram)
        if MIN_NGRAM_LENGTH <= length <= MAX_NGRAM_LENGTH and profile.n_words[length - 1] == 0:
            raise FormatError(
                f"profile format error in '{source}': n_words[{length - 1}] is 0 "
                f"but {length}-gram {ngram!r} is present"
            )


def ngram_length(ngram: str) -> int:
    """Length in UTF-16 code units, the unit published profiles were counted in."""
    return len(ngram.encode("utf-16-le", "surrogatepass")) // 2


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


__all__ = ["LanguageProfile", "ngram_length", "validate_profile"]
