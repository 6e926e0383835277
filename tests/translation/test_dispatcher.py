import json

import pytest

from cloud_translation.config import MappingSettingsSource, load_settings
from cloud_translation.translation.dispatcher import (
    DEFAULT_PROVIDER,
    dispatch,
    get_provider,
    resolve_provider_name,
)


class _FakeTransport:
    def __init__(self, reply):
        self.reply = reply
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        return self.reply


@pytest.mark.parametrize(
    "name, expected",
    [
        ("google", "google"),
        (" Baidu ", "baidu"),
        ("bing", DEFAULT_PROVIDER),
        ("", DEFAULT_PROVIDER),
        (None, DEFAULT_PROVIDER),
    ],
)
def test_resolve_provider_name(name, expected):
    assert resolve_provider_name(name) == expected


def test_get_provider_returns_adapter_for_name():
    assert get_provider("microsoft").name == "microsoft"
    assert get_provider("unknown").name == "niutrans"


def test_dispatch_uses_configured_provider():
    transport = _FakeTransport(json.dumps({"sentences": [{"trans": "hello"}]}))
    settings = load_settings(MappingSettingsSource({"cloud_translation/default_api": "google"}))

    result = dispatch("你好", settings, transport=transport)

    assert result.ok
    assert result.text == "hello"
    assert result.provider == "google"
    assert len(transport.requests) == 1


def test_dispatch_unknown_provider_defaults_to_niutrans():
    transport = _FakeTransport(json.dumps({"tgt_text": "hello"}))
    settings = load_settings(
        MappingSettingsSource(
            {
                "cloud_translation/default_api": "bing",
                "cloud_translation/api_keys/niutrans/api_key": "niu-key",
            }
        )
    )

    result = dispatch("你好", settings, transport=transport)

    assert result.provider == "niutrans"
    assert transport.requests[0].url.startswith("https://api.niutrans.com/")


def test_dispatch_does_not_fall_back_to_another_provider():
    transport = _FakeTransport(None)
    settings = load_settings(MappingSettingsSource({"cloud_translation/default_api": "google"}))

    result = dispatch("你好", settings, transport=transport)

    assert not result.ok
    assert result.error == "API请求失败"
    assert result.provider == "google"
    assert len(transport.requests) == 1
