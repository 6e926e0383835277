"""Tests for settings loading."""

from cloud_translation.config import (
    DEEPL_PLACEHOLDER,
    EnvSettingsSource,
    MappingSettingsSource,
    Settings,
    _as_bool,
    japanese_option_from_env,
    load_settings,
)


def test_load_settings_defaults_without_source():
    settings = load_settings(None)
    assert settings == Settings()
    assert settings.default_api == "niutrans"
    assert settings.trigger_key == "''"
    assert settings.target_lang == "en"
    assert settings.api_keys.deepl == DEEPL_PLACEHOLDER
    assert settings.api_keys.microsoft.region == "global"
    assert load_settings(None, use_alternate_language=True).target_lang == "ja"


def test_load_settings_merges_values_field_by_field():
    source = MappingSettingsSource(
        {
            "cloud_translation/default_api": "baidu",
            "cloud_translation/api_keys/baidu/app_id": "20240101",
            "cloud_translation/api_keys/microsoft/key": "ms-key",
            "cloud_translation/target_lang1": "ko",
        }
    )
    settings = load_settings(source)
    assert settings.default_api == "baidu"
    assert settings.api_keys.baidu.app_id == "20240101"
    assert settings.api_keys.baidu.app_key == "YOUR_BAIDU_APP_KEY"
    assert settings.api_keys.microsoft.key == "ms-key"
    assert settings.api_keys.microsoft.region == "global"
    assert settings.target_lang0 == "en"
    assert settings.target_lang1 == "ko"
    assert settings.target_lang == "en"


def test_alternate_language_flag_selects_second_tag():
    source = MappingSettingsSource({"cloud_translation/target_lang1": "fr"})
    assert load_settings(source, use_alternate_language=True).target_lang == "fr"
    assert load_settings(source, use_alternate_language=False).target_lang == "en"


def test_env_settings_source_maps_paths_and_skips_empty_values():
    environ = {
        "CLOUD_TRANSLATION_API_KEYS_YOUDAO_APP_ID": "yd-id",
        "CLOUD_TRANSLATION_TRIGGER_KEY": "",
    }
    source = EnvSettingsSource(environ)
    assert EnvSettingsSource.env_name("cloud_translation/api_keys/youdao/app_id") == (
        "CLOUD_TRANSLATION_API_KEYS_YOUDAO_APP_ID"
    )
    settings = load_settings(source)
    assert settings.api_keys.youdao.app_id == "yd-id"
    assert settings.trigger_key == "''"


def test_japanese_option_from_env():
    assert japanese_option_from_env({"CLOUD_TRANSLATION_JAPANESE": "yes"}) is True
    assert japanese_option_from_env({}) is False
    assert _as_bool(None, default=True) is True
    assert _as_bool("off") is False
