"""Translation provider registry and dispatch."""

from .dispatcher import DEFAULT_PROVIDER, dispatch, get_provider, resolve_provider_name
from .exceptions import (
    ConfigurationError,
    NotFoundError,
    ParseError,
    ProviderError,
    TranslationProviderError,
    TransportError,
    UnsupportedLanguageError,
)
from .providers import (
    PROVIDERS,
    BaseTranslationProvider,
    TranslationResult,
    available_providers,
    build_provider,
)
from .transport import HttpRequest, HttpxTransport, Transport

__all__ = [
    "DEFAULT_PROVIDER",
    "PROVIDERS",
    "BaseTranslationProvider",
    "TranslationResult",
    "available_providers",
    "build_provider",
    "dispatch",
    "get_provider",
    "resolve_provider_name",
    "HttpRequest",
    "HttpxTransport",
    "Transport",
    "TranslationProviderError",
    "ConfigurationError",
    "UnsupportedLanguageError",
    "TransportError",
    "ParseError",
    "ProviderError",
    "NotFoundError",
]
