"""Static configuration for profile sources and model construction."""

from __future__ import annotations

from typing import Dict, Tuple, TypedDict


class ResourceBundleConfig(TypedDict):
    package: str
    names: Tuple[str, ...]


# Directory entries starting with this marker are treated as hidden.
HIDDEN_PREFIX = "."
PROFILE_ENCODING = "utf-8"

# Only n-grams within these lengths are modeled.
MIN_NGRAM_LENGTH = 1
MAX_NGRAM_LENGTH = 3

# A classifier needs at least two candidate languages.
MIN_LITERAL_PROFILES = 2

# Smoothing parameter forwarded to detectors when none is given.
DEFAULT_ALPHA = 0.5

# ---------------------------------------------------------------------------
# Bundled profile sets shipped as importable resource packages.

SM_LANGUAGES: Tuple[str, ...] = (
    "ar", "bg", "bn", "ca", "cs", "da", "de", "el", "en", "es", "et", "fa",
    "fi", "fr", "gu", "he", "hi", "hr", "hu", "id", "it", "ja", "ko", "lt",
    "lv", "mk", "ml", "nl", "no", "pa", "pl", "pt", "ro", "ru", "si", "sq",
    "sv", "ta", "te", "th", "tl", "tr", "uk", "ur", "vi", "zh-cn", "zh-tw",
)

BUNDLES: Dict[str, ResourceBundleConfig] = {
    "sm": {
        "package": "src.profiles.sm",
        "names": SM_LANGUAGES,
    },
}


def get_bundle(key: str) -> ResourceBundleConfig:
    """Return the bundle registered under ``key``."""
    try:
        return BUNDLES[key]
    except KeyError as exc:
        raise ValueError(f"Unknown profile bundle '{key}'. Available: {list(BUNDLES)}") from exc


__all__ = [
    "BUNDLES",
    "DEFAULT_ALPHA",
    "HIDDEN_PREFIX",
    "MAX_NGRAM_LENGTH",
    "MIN_LITERAL_PROFILES",
    "MIN_NGRAM_LENGTH",
    "PROFILE_ENCODING",
    "ResourceBundleConfig",
    "SM_LANGUAGES",
    "get_bundle",
]
