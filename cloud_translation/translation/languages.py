"""Generic language tags and their provider-specific codes."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SUPPORTED_LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        "en": "English",
        "zh": "Chinese",
        "ja": "Japanese",
        "ko": "Korean",
        "ru": "Russian",
        "fr": "French",
        "es": "Spanish",
        "pt": "Portuguese",
        "ar": "Arabic",
        "th": "Thai",
        "cht": "Traditional Chinese",
        "vi": "Vietnamese",
        "id": "Indonesian",
        "de": "German",
        "it": "Italian",
        "jp": "Japanese",
    }
)

# Shown in the translation candidate's comment, e.g. "[英译] 你好".
LANGUAGE_SHORT_NAME: Mapping[str, str] = MappingProxyType(
    {
        "en": "英", "zh": "中", "ja": "日", "ko": "韩", "ru": "俄",
        "fr": "法", "es": "西", "pt": "葡", "ar": "阿", "th": "泰",
        "vi": "越", "id": "印", "de": "德", "it": "意", "cht": "繁",
    }
)

GOOGLE_LANG_MAP: Mapping[str, str] = MappingProxyType(
    {
        "en": "en", "zh": "zh-CN", "ja": "ja", "ko": "ko", "ru": "ru",
        "fr": "fr", "es": "es", "pt": "pt", "ar": "ar", "th": "th",
        "vi": "vi", "id": "id", "de": "de", "it": "it", "cht": "zh-TW",
    }
)

DEEPL_LANG_MAP: Mapping[str, str] = MappingProxyType(
    {
        "en": "EN", "zh": "ZH", "ja": "JA", "ko": "KO", "ru": "RU",
        "fr": "FR", "es": "ES", "pt": "PT", "it": "IT", "de": "DE",
        "cht": "ZH",
    }
)

MICROSOFT_LANG_MAP: Mapping[str, str] = MappingProxyType(
    {
        "en": "en", "zh": "zh-Hans", "ja": "ja", "ko": "ko", "ru": "ru",
        "fr": "fr", "es": "es", "pt": "pt", "ar": "ar", "th": "th",
        "vi": "vi", "id": "id", "de": "de", "it": "it", "cht": "zh-Hant",
    }
)

# Providers with their own code vocabulary, and the code used when a tag is unmapped.
_PROVIDER_TABLES: Mapping[str, tuple[Mapping[str, str], str]] = MappingProxyType(
    {
        "google": (GOOGLE_LANG_MAP, "en"),
        "deepl": (DEEPL_LANG_MAP, "EN"),
        "microsoft": (MICROSOFT_LANG_MAP, "en"),
    }
)

# Providers that accept any tag and fall back to English.
_LENIENT_PROVIDERS = frozenset({"google"})


def normalize_tag(tag: str) -> str:
    """Lower-case *tag* and fold the legacy ``jp`` alias into ``ja``."""

    normalized = (tag or "").strip().lower()
    if normalized == "jp":
        return "ja"
    return normalized


def map_language(provider: str, tag: str) -> str:
    normalized = normalize_tag(tag)
    entry = _PROVIDER_TABLES.get(provider)
    if entry is None:
        return normalized
    table, fallback = entry
    return table.get(normalized, fallback)


def is_supported(provider: str, tag: str) -> bool:
    """Return whether *provider* accepts *tag* as a translation target."""

    if provider in _LENIENT_PROVIDERS:
        return True
    normalized = normalize_tag(tag)
    entry = _PROVIDER_TABLES.get(provider)
    if entry is not None:
        return normalized in entry[0]
    return normalized in SUPPORTED_LANGUAGES


def short_label(tag: str) -> str:
    return LANGUAGE_SHORT_NAME.get(tag) or LANGUAGE_SHORT_NAME.get(tag.lower()) or tag
