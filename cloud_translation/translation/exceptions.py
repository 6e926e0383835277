"""Error taxonomy shared by translation providers."""

from __future__ import annotations


class TranslationProviderError(RuntimeError):
    """Raised when a translation provider fails irrecoverably."""


class ConfigurationError(TranslationProviderError):
    """Required credentials are missing or still the placeholder value."""

    pass


class UnsupportedLanguageError(TranslationProviderError):
    """Target language is outside the provider's supported set."""

    pass


class TransportError(TranslationProviderError):
    """The HTTP exchange produced no reply."""

    pass


class ParseError(TranslationProviderError):
    """The reply body could not be decoded."""

    pass


class ProviderError(TranslationProviderError):
    """The provider reported a business error."""

    def __init__(self, provider: str, code: str | None, message: str | None = None) -> None:
        self.provider = provider
        self.code = code
        self.message = message
        text = f"{provider}错误"
        if code:
            text = f"{text} {code}"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)


class NotFoundError(TranslationProviderError):
    """The decoded reply lacks the expected translation field."""

    pass
