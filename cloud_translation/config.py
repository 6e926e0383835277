"""Configuration loader for the cloud translation filter."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Protocol

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

CONFIG_ROOT = "cloud_translation"
JAPANESE_OPTION = "cloud_translation_japanese"

DEFAULT_API = "niutrans"
DEFAULT_TRIGGER_KEY = "''"
DEFAULT_TARGET_LANG0 = "en"
DEFAULT_TARGET_LANG1 = "ja"

NIUTRANS_PLACEHOLDER = "YOUR_NIUTRANS_API_KEY"
DEEPL_PLACEHOLDER = "YOUR_DEEPL_API_KEY"
MICROSOFT_PLACEHOLDER = "YOUR_MS_TRANSLATOR_API_KEY"
MICROSOFT_DEFAULT_REGION = "global"
YOUDAO_APP_ID_PLACEHOLDER = "YOUR_YOUDAO_APP_ID"
YOUDAO_APP_KEY_PLACEHOLDER = "YOUR_YOUDAO_APP_KEY"
BAIDU_APP_ID_PLACEHOLDER = "YOUR_BAIDU_APP_ID"
BAIDU_APP_KEY_PLACEHOLDER = "YOUR_BAIDU_APP_KEY"


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


class SettingsSource(Protocol):
    """Read-only key/value store addressed by slash-separated paths."""

    def get_string(self, path: str) -> str | None:
        ...


class MappingSettingsSource:
    """Settings source backed by a plain mapping such as a parsed schema file."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get_string(self, path: str) -> str | None:
        value = self._values.get(path)
        return None if value is None else str(value)


class EnvSettingsSource:
    """Read settings from environment variables (and ``.env``).

    ``cloud_translation/api_keys/baidu/app_id`` is looked up as
    ``CLOUD_TRANSLATION_API_KEYS_BAIDU_APP_ID``. Empty values count as unset.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    @staticmethod
    def env_name(path: str) -> str:
        return path.strip("/").replace("/", "_").replace(".", "_").upper()

    def get_string(self, path: str) -> str | None:
        value = self._environ.get(self.env_name(path), "")
        return value or None


def japanese_option_from_env(environ: Mapping[str, str] | None = None) -> bool:
    env = environ if environ is not None else os.environ
    return _as_bool(env.get(JAPANESE_OPTION.upper()))


@dataclass(frozen=True, slots=True)
class NiuTransKeys:
    api_key: str = NIUTRANS_PLACEHOLDER


@dataclass(frozen=True, slots=True)
class MicrosoftKeys:
    key: str = MICROSOFT_PLACEHOLDER
    region: str = MICROSOFT_DEFAULT_REGION


@dataclass(frozen=True, slots=True)
class YoudaoKeys:
    app_id: str = YOUDAO_APP_ID_PLACEHOLDER
    app_key: str = YOUDAO_APP_KEY_PLACEHOLDER


@dataclass(frozen=True, slots=True)
class BaiduKeys:
    app_id: str = BAIDU_APP_ID_PLACEHOLDER
    app_key: str = BAIDU_APP_KEY_PLACEHOLDER


@dataclass(frozen=True, slots=True)
class ApiKeys:
    niutrans: NiuTransKeys = field(default_factory=NiuTransKeys)
    deepl: str = DEEPL_PLACEHOLDER
    microsoft: MicrosoftKeys = field(default_factory=MicrosoftKeys)
    youdao: YoudaoKeys = field(default_factory=YoudaoKeys)
    baidu: BaiduKeys = field(default_factory=BaiduKeys)


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable per-invocation snapshot of the filter configuration."""

    default_api: str = DEFAULT_API
    api_keys: ApiKeys = field(default_factory=ApiKeys)
    trigger_key: str = DEFAULT_TRIGGER_KEY
    target_lang0: str = DEFAULT_TARGET_LANG0
    target_lang1: str = DEFAULT_TARGET_LANG1
    target_lang: str = DEFAULT_TARGET_LANG0


def load_settings(source: SettingsSource | None, use_alternate_language: bool = False) -> Settings:
    """Merge values from *source* over the built-in defaults.

    Every field falls back to its default when the source has no value for it.
    ``use_alternate_language`` mirrors the ``cloud_translation_japanese``
    context option and selects ``target_lang1`` over ``target_lang0``.
    """

    if source is None:
        return Settings(target_lang=DEFAULT_TARGET_LANG1 if use_alternate_language else DEFAULT_TARGET_LANG0)

    def read(key: str, default: str) -> str:
        value = source.get_string(f"{CONFIG_ROOT}/{key}")
        return default if value is None else value

    api_keys = ApiKeys(
        niutrans=NiuTransKeys(api_key=read("api_keys/niutrans/api_key", NIUTRANS_PLACEHOLDER)),
        deepl=read("api_keys/deepl", DEEPL_PLACEHOLDER),
        microsoft=MicrosoftKeys(
            key=read("api_keys/microsoft/key", MICROSOFT_PLACEHOLDER),
            region=read("api_keys/microsoft/region", MICROSOFT_DEFAULT_REGION),
        ),
        youdao=YoudaoKeys(
            app_id=read("api_keys/youdao/app_id", YOUDAO_APP_ID_PLACEHOLDER),
            app_key=read("api_keys/youdao/app_key", YOUDAO_APP_KEY_PLACEHOLDER),
        ),
        baidu=BaiduKeys(
            app_id=read("api_keys/baidu/app_id", BAIDU_APP_ID_PLACEHOLDER),
            app_key=read("api_keys/baidu/app_key", BAIDU_APP_KEY_PLACEHOLDER),
        ),
    )
    target_lang0 = read("target_lang0", DEFAULT_TARGET_LANG0)
    target_lang1 = read("target_lang1", DEFAULT_TARGET_LANG1)
    settings = Settings(
        default_api=read("default_api", DEFAULT_API),
        api_keys=api_keys,
        trigger_key=read("trigger_key", DEFAULT_TRIGGER_KEY),
        target_lang0=target_lang0,
        target_lang1=target_lang1,
        target_lang=target_lang1 if use_alternate_language else target_lang0,
    )
    logger.debug(
        "云翻译配置: api=%s trigger=%r target=%s",
        settings.default_api,
        settings.trigger_key,
        settings.target_lang,
    )
    return settings
