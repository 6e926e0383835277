from cloud_translation.translation.languages import (
    is_supported,
    map_language,
    normalize_tag,
    short_label,
)


def test_normalize_tag_folds_legacy_japanese():
    assert normalize_tag("jp") == "ja"
    assert normalize_tag("JP") == "ja"
    assert normalize_tag("EN") == "en"


def test_table_providers_map_codes():
    assert map_language("google", "zh") == "zh-CN"
    assert map_language("google", "cht") == "zh-TW"
    assert map_language("deepl", "ja") == "JA"
    assert map_language("deepl", "cht") == "ZH"
    assert map_language("microsoft", "zh") == "zh-Hans"
    assert map_language("microsoft", "cht") == "zh-Hant"


def test_legacy_japanese_is_normalized_before_lookup():
    for provider, expected in (("google", "ja"), ("deepl", "JA"), ("microsoft", "ja"), ("youdao", "ja")):
        assert map_language(provider, "jp") == expected
        assert is_supported(provider, "jp")


def test_unmapped_tags_fall_back_to_english():
    assert map_language("google", "xx") == "en"
    assert map_language("deepl", "th") == "EN"


def test_generic_providers_pass_tag_through():
    assert map_language("niutrans", "cht") == "cht"
    assert map_language("baidu", "ko") == "ko"


def test_support_differs_per_provider():
    assert is_supported("google", "xx")
    assert not is_supported("deepl", "th")
    assert is_supported("microsoft", "th")
    assert not is_supported("microsoft", "xx")
    assert is_supported("niutrans", "cht")
    assert not is_supported("youdao", "xx")


def test_short_label():
    assert short_label("en") == "英"
    assert short_label("JA") == "日"
    assert short_label("xx") == "xx"
