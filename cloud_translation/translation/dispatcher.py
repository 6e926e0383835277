"""Route a translation request to the configured provider."""

from __future__ import annotations

import logging

from ..config import Settings
from .providers import PROVIDERS, BaseTranslationProvider, TranslationResult, build_provider
from .transport import Transport

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "niutrans"


def resolve_provider_name(name: str | None) -> str:
    """Return the registry key for *name*, falling back to the default provider."""

    normalized = (name or "").strip().lower()
    if normalized in PROVIDERS:
        return normalized
    logger.debug("未知翻译服务 %r，使用默认服务 %s", name, DEFAULT_PROVIDER)
    return DEFAULT_PROVIDER


def get_provider(name: str | None, transport: Transport | None = None) -> BaseTranslationProvider:
    return build_provider(resolve_provider_name(name), transport=transport)


def dispatch(text: str, settings: Settings, transport: Transport | None = None) -> TranslationResult:
    """Translate *text* with the provider named by ``settings.default_api``.

    Exactly one provider is called; its failure is returned as-is and never
    retried against another provider.
    """

    provider = get_provider(settings.default_api, transport=transport)
    logger.debug("使用翻译服务 %s 翻译至 %s", provider.name, settings.target_lang)
    return provider.translate(text, settings)
