"""Request signatures for the Youdao and Baidu open APIs."""

from __future__ import annotations

import hashlib
import random
import time

SALT_RANGE = (32768, 65536)
TRUNCATE_THRESHOLD = 20


def truncate_input(text: str) -> str:
    """Shorten *text* the way Youdao's v3 signature expects.

    Lengths are counted in code points, so a CJK character is never split.
    Texts up to 20 characters are returned unchanged; longer ones become the
    first 10 characters, the decimal length and the last 10 characters.
    """

    length = len(text)
    if length <= TRUNCATE_THRESHOLD:
        return text
    return f"{text[:10]}{length}{text[-10:]}"


def youdao_sign(app_id: str, text: str, salt: str, curtime: str, app_key: str) -> str:
    sign_raw = f"{app_id}{truncate_input(text)}{salt}{curtime}{app_key}"
    return hashlib.sha256(sign_raw.encode("utf-8")).hexdigest()


def baidu_sign(app_id: str, text: str, salt: str, app_key: str) -> str:
    sign_raw = f"{app_id}{text}{salt}{app_key}"
    return hashlib.md5(sign_raw.encode("utf-8")).hexdigest()


def make_salt() -> str:
    return str(random.randint(*SALT_RANGE))


def make_timestamp() -> str:
    return str(int(time.time()))
