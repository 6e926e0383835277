import hashlib

from cloud_translation.translation import signing
from cloud_translation.translation.signing import baidu_sign, truncate_input, youdao_sign


def test_truncate_input_keeps_short_text():
    assert truncate_input("你好") == "你好"
    assert truncate_input("a" * 20) == "a" * 20


def test_truncate_input_uses_code_points_for_mixed_text():
    text = "你好world这是一个很长的中文和English混合句子"
    length = len(text)
    assert length > 20
    result = truncate_input(text)
    assert result == text[:10] + str(length) + text[-10:]
    assert result.startswith("你好world这是一")
    assert result.endswith("nglish混合句子")


def test_truncate_input_twenty_one_characters():
    text = "汉" * 21
    assert truncate_input(text) == "汉" * 10 + "21" + "汉" * 10


def test_youdao_sign_is_deterministic_and_sensitive():
    base = youdao_sign("app", "你好", "40000", "1700000000", "secret")
    assert base == youdao_sign("app", "你好", "40000", "1700000000", "secret")
    expected = hashlib.sha256("app你好400001700000000secret".encode("utf-8")).hexdigest()
    assert base == expected
    assert base != youdao_sign("app2", "你好", "40000", "1700000000", "secret")
    assert base != youdao_sign("app", "你们", "40000", "1700000000", "secret")
    assert base != youdao_sign("app", "你好", "40001", "1700000000", "secret")
    assert base != youdao_sign("app", "你好", "40000", "1700000001", "secret")
    assert base != youdao_sign("app", "你好", "40000", "1700000000", "secret2")


def test_youdao_sign_hashes_truncated_input():
    text = "一二三四五六七八九十abcdefghijk零"
    truncated = truncate_input(text)
    expected = hashlib.sha256(f"id{truncated}1t2key".encode("utf-8")).hexdigest()
    assert youdao_sign("id", text, "1", "t2", "key") == expected


def test_baidu_sign_is_lowercase_md5_without_truncation():
    text = "这是一段超过二十个字符的中文文本用于测试百度签名是否截断"
    expected = hashlib.md5(f"2015063000000001{text}143566028812345678".encode("utf-8")).hexdigest()
    sign = baidu_sign("2015063000000001", text, "1435660288", "12345678")
    assert sign == expected
    assert sign == sign.lower()


def test_salt_and_timestamp(monkeypatch):
    for _ in range(50):
        assert 32768 <= int(signing.make_salt()) <= 65536
    monkeypatch.setattr(signing.time, "time", lambda: 1700000000.75)
    assert signing.make_timestamp() == "1700000000"
