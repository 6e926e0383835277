"""Translation provider implementations and helpers."""

from __future__ import annotations

import abc
import json
import logging
import re
import urllib.parse
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from ..config import (
    BAIDU_APP_ID_PLACEHOLDER,
    BAIDU_APP_KEY_PLACEHOLDER,
    DEEPL_PLACEHOLDER,
    MICROSOFT_PLACEHOLDER,
    NIUTRANS_PLACEHOLDER,
    YOUDAO_APP_ID_PLACEHOLDER,
    YOUDAO_APP_KEY_PLACEHOLDER,
    Settings,
)
from .exceptions import (
    ConfigurationError,
    NotFoundError,
    ParseError,
    ProviderError,
    TranslationProviderError,
    TransportError,
    UnsupportedLanguageError,
)
from .languages import is_supported, map_language
from .signing import baidu_sign, make_salt, make_timestamp, youdao_sign
from .transport import HttpRequest, HttpxTransport, Transport

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}
FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


@dataclass(slots=True)
class TranslationResult:
    """Either a translated text or a human-readable error message."""

    text: str | None = None
    error: str | None = None
    provider: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.text)

    @classmethod
    def success(cls, text: str, provider: str | None = None) -> "TranslationResult":
        return cls(text=text, provider=provider)

    @classmethod
    def failure(cls, message: str, provider: str | None = None) -> "TranslationResult":
        return cls(error=message, provider=provider)


class BaseTranslationProvider(abc.ABC):
    """Abstract translation provider interface.

    Subclasses implement :meth:`_translate`, which raises
    :class:`TranslationProviderError` subclasses. :meth:`translate` turns those
    into a failed :class:`TranslationResult`, so callers never see them.
    """

    name: str
    endpoint: str
    # Prefix for "unsupported language" and "not found" messages.
    label: str = ""
    # Prefix for credential, transport and parse messages.
    api_label: str = "API"

    def __init__(self, transport: Transport | None = None, endpoint: str | None = None) -> None:
        self._transport = transport or HttpxTransport()
        if endpoint:
            self.endpoint = endpoint

    def translate(self, text: str, settings: Settings) -> TranslationResult:
        """Translate *text* into ``settings.target_lang``."""

        try:
            translated = self._translate(text, settings)
        except TranslationProviderError as exc:
            logger.warning("翻译服务 %s 调用失败: %s", self.name, exc)
            return TranslationResult.failure(str(exc), provider=self.name)
        return TranslationResult.success(translated, provider=self.name)

    @abc.abstractmethod
    def _translate(self, text: str, settings: Settings) -> str:
        """Return the translated text or raise a provider error."""

    @property
    def error_label(self) -> str:
        return self.label

    def _require_credentials(self, *pairs: tuple[str | None, str]) -> None:
        for value, placeholder in pairs:
            if not value or value == placeholder:
                raise ConfigurationError(f"{self.api_label}密钥未配置")

    def _target_language(self, settings: Settings) -> str:
        tag = settings.target_lang.lower()
        if not is_supported(self.name, tag):
            raise UnsupportedLanguageError(f"{self.label}不支持的目标语言: {tag}")
        return map_language(self.name, tag)

    def _send(self, request: str | HttpRequest) -> str:
        reply = self._transport(request)
        if not reply:
            raise TransportError(f"{self.api_label}请求失败")
        return reply

    def _decode(self, reply: str) -> Any:
        try:
            return json.loads(reply)
        except ValueError as exc:
            raise ParseError(f"{self.api_label}响应解析失败") from exc

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label}未找到翻译结果")


class NiuTransProvider(BaseTranslationProvider):
    """NiuTrans open API provider."""

    name = "niutrans"
    endpoint = "https://api.niutrans.com/NiuTransServer/translation"

    @property
    def error_label(self) -> str:
        return "API"

    def _translate(self, text: str, settings: Settings) -> str:
        api_key = settings.api_keys.niutrans.api_key
        self._require_credentials((api_key, NIUTRANS_PLACEHOLDER))
        target = self._target_language(settings)
        body = json.dumps(
            {"from": "auto", "to": target, "apikey": api_key, "src_text": text},
            ensure_ascii=False,
        )
        reply = self._send(HttpRequest(self.endpoint, "POST", JSON_HEADERS, body))
        data = self._decode(reply)
        if not isinstance(data, dict):
            raise self._not_found()
        if data.get("error_code") is not None:
            raise ProviderError(self.error_label, str(data["error_code"]), data.get("error_msg"))
        target_text = data.get("tgt_text")
        if isinstance(target_text, dict):
            target_text = target_text.get("content")
        if isinstance(target_text, str) and target_text:
            return target_text
        raise self._not_found()


class GoogleTranslateProvider(BaseTranslationProvider):
    """Google's free ``translate_a/single`` web endpoint.

    The endpoint needs no credentials and its reply shape is loose. Decoded
    ``sentences`` objects and nested segment arrays are read directly; a body
    that does not decode is scraped with raw text patterns instead.
    """

    name = "google"
    endpoint = "https://translate.googleapis.com/translate_a/single"

    _RAW_PATTERNS = (
        re.compile(r'"trans":"([^"]+)"'),
        re.compile(r'\[\[\["([^"]+)"'),
    )

    def _translate(self, text: str, settings: Settings) -> str:
        target = self._target_language(settings)
        query = urllib.parse.urlencode(
            {"client": "gtx", "sl": "auto", "tl": target, "dt": "t", "q": text}
        )
        reply = self._send(f"{self.endpoint}?{query}")
        try:
            data = json.loads(reply)
        except ValueError:
            data = None
        sentences = data.get("sentences") if isinstance(data, dict) else None
        if isinstance(sentences, list) and sentences and isinstance(sentences[0], dict):
            translated = sentences[0].get("trans")
            if translated:
                return translated
        if isinstance(data, list) and data and isinstance(data[0], list):
            translated = "".join(
                segment[0]
                for segment in data[0]
                if isinstance(segment, list) and segment and isinstance(segment[0], str)
            )
            if translated:
                return translated
        logger.debug("Google 响应结构无法识别，尝试原始文本匹配")
        for pattern in self._RAW_PATTERNS:
            match = pattern.search(reply)
            if match:
                return match.group(1)
        raise self._not_found()


class DeepLProvider(BaseTranslationProvider):
    """DeepL free API provider (form-encoded ``auth_key``)."""

    name = "deepl"
    endpoint = "https://api-free.deepl.com/v2/translate"
    label = "DeepL"
    api_label = "DeepL API"

    def _translate(self, text: str, settings: Settings) -> str:
        api_key = settings.api_keys.deepl
        self._require_credentials((api_key, DEEPL_PLACEHOLDER))
        target = self._target_language(settings)
        body = urllib.parse.urlencode({"auth_key": api_key, "text": text, "target_lang": target})
        reply = self._send(HttpRequest(self.endpoint, "POST", FORM_HEADERS, body))
        data = self._decode(reply)
        if not isinstance(data, dict):
            raise self._not_found()
        if data.get("message"):
            raise ProviderError(self.error_label, None, data["message"])
        translations = data.get("translations")
        if isinstance(translations, list) and translations and isinstance(translations[0], dict):
            translated = translations[0].get("text")
            if translated:
                return translated
        raise self._not_found()


class MicrosoftTranslatorProvider(BaseTranslationProvider):
    """Microsoft Translator Text API v3 provider.

    Authentication travels only in the subscription key and region headers.
    """

    name = "microsoft"
    endpoint = "https://api.cognitive.microsofttranslator.com/translate"
    label = "Microsoft"
    api_label = "Microsoft API"

    def _translate(self, text: str, settings: Settings) -> str:
        keys = settings.api_keys.microsoft
        self._require_credentials((keys.key, MICROSOFT_PLACEHOLDER))
        target = self._target_language(settings)
        url = f"{self.endpoint}?api-version=3.0&to={target}"
        headers = {
            "Content-Type": "application/json",
            "Ocp-Apim-Subscription-Key": keys.key,
            "Ocp-Apim-Subscription-Region": keys.region,
        }
        body = json.dumps([{"Text": text}], ensure_ascii=False)
        reply = self._send(HttpRequest(url, "POST", headers, body))
        data = self._decode(reply)
        if isinstance(data, dict) and data.get("error"):
            error = data["error"]
            if isinstance(error, dict):
                code = error.get("code")
                raise ProviderError(
                    self.error_label,
                    None if code is None else str(code),
                    error.get("message") or "未知错误",
                )
            raise ProviderError(self.error_label, None, str(error))
        if isinstance(data, list) and data and isinstance(data[0], dict):
            translations = data[0].get("translations")
            if isinstance(translations, list) and translations and isinstance(translations[0], dict):
                translated = translations[0].get("text")
                if translated:
                    return translated
        raise self._not_found()


class YoudaoTranslateProvider(BaseTranslationProvider):
    """Youdao open API provider using the v3 SHA-256 signature."""

    name = "youdao"
    endpoint = "https://openapi.youdao.com/api"
    label = "有道"
    api_label = "有道API"

    def _translate(self, text: str, settings: Settings) -> str:
        keys = settings.api_keys.youdao
        self._require_credentials(
            (keys.app_id, YOUDAO_APP_ID_PLACEHOLDER),
            (keys.app_key, YOUDAO_APP_KEY_PLACEHOLDER),
        )
        target = self._target_language(settings)
        salt = make_salt()
        curtime = make_timestamp()
        sign = youdao_sign(keys.app_id, text, salt, curtime, keys.app_key)
        body = urllib.parse.urlencode(
            {
                "q": text,
                "from": "auto",
                "to": target,
                "appKey": keys.app_id,
                "salt": salt,
                "sign": sign,
                "signType": "v3",
                "curtime": curtime,
            }
        )
        reply = self._send(HttpRequest(self.endpoint, "POST", FORM_HEADERS, body))
        data = self._decode(reply)
        if not isinstance(data, dict):
            raise self._not_found()
        error_code = data.get("errorCode")
        if error_code is not None and str(error_code) != "0":
            raise ProviderError(self.error_label, str(error_code), data.get("message") or "未知错误")
        translation = data.get("translation")
        if isinstance(translation, list) and translation and translation[0]:
            return translation[0]
        raise self._not_found()


class BaiduTranslateProvider(BaseTranslationProvider):
    """Baidu Translate VIP API provider."""

    name = "baidu"
    endpoint = "https://fanyi-api.baidu.com/api/trans/vip/translate"
    label = "百度"
    api_label = "百度API"

    def _translate(self, text: str, settings: Settings) -> str:
        keys = settings.api_keys.baidu
        self._require_credentials(
            (keys.app_id, BAIDU_APP_ID_PLACEHOLDER),
            (keys.app_key, BAIDU_APP_KEY_PLACEHOLDER),
        )
        target = self._target_language(settings)
        salt = make_salt()
        sign = baidu_sign(keys.app_id, text, salt, keys.app_key)
        body = urllib.parse.urlencode(
            {
                "q": text,
                "from": "auto",
                "to": target,
                "appid": keys.app_id,
                "salt": salt,
                "sign": sign,
            }
        )
        reply = self._send(HttpRequest(self.endpoint, "POST", FORM_HEADERS, body))
        data = self._decode(reply)
        if not isinstance(data, dict):
            raise self._not_found()
        if data.get("error_code") is not None:
            raise ProviderError(self.error_label, str(data["error_code"]), data.get("error_msg") or "未知错误")
        result = data.get("trans_result")
        if isinstance(result, list) and result and isinstance(result[0], dict):
            dst = result[0].get("dst")
            if dst:
                return dst
        raise self._not_found()


PROVIDERS: Mapping[str, type[BaseTranslationProvider]] = MappingProxyType(
    {
        "niutrans": NiuTransProvider,
        "google": GoogleTranslateProvider,
        "deepl": DeepLProvider,
        "microsoft": MicrosoftTranslatorProvider,
        "youdao": YoudaoTranslateProvider,
        "baidu": BaiduTranslateProvider,
    }
)


def build_provider(name: str, transport: Transport | None = None) -> BaseTranslationProvider:
    """Instantiate a provider by name."""

    normalized = name.strip().lower()
    try:
        provider_cls = PROVIDERS[normalized]
    except KeyError as exc:
        raise TranslationProviderError(f"未知翻译提供商: {name}") from exc
    return provider_cls(transport=transport)


def available_providers() -> Sequence[str]:
    return list(PROVIDERS.keys())
