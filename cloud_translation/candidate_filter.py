"""Candidate filter that injects a cloud translation ahead of the engine's candidates."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from .config import Settings, SettingsSource, load_settings
from .translation.dispatcher import dispatch
from .translation.languages import short_label
from .translation.transport import Transport
from .utils import is_chinese_character, setup_logger

# Handlers live on the package logger so provider and transport records share them.
setup_logger("cloud_translation")
logger = logging.getLogger(__name__)

NO_CANDIDATES_TEXT = "[无候选词]"
EMPTY_CANDIDATE_TEXT = "[空候选词]"
NON_CHINESE_TEXT = "[非中文候选词]"
CHECK_INPUT_COMMENT = "请检查输入"
TRANSLATION_FAILED_PREFIX = "[翻译失败]"
TRANSLATION_ERROR_COMMENT = "翻译错误"


@dataclass(frozen=True, slots=True)
class Candidate:
    """A selectable row in the input method's candidate list."""

    type: str
    start: int
    end: int
    text: str
    comment: str = ""


class FilterState(enum.Enum):
    PASSTHROUGH = "passthrough"
    TRIGGERED = "triggered"


def detect_state(input_text: str, trigger: str) -> FilterState:
    """Return TRIGGERED when *input_text* ends with a non-empty *trigger*."""

    if trigger and len(input_text) >= len(trigger) and input_text.endswith(trigger):
        return FilterState.TRIGGERED
    return FilterState.PASSTHROUGH


def _error_candidate(input_text: str, text: str, comment: str) -> Candidate:
    return Candidate("error", 0, len(input_text), text, comment)


def cloud_translation_filter(
    candidates: Iterable[Candidate],
    input_text: str,
    settings: Settings,
    *,
    transport: Transport | None = None,
) -> Iterator[Candidate]:
    """Yield the candidate stream, prefixed by a translation when triggered.

    Outside the trigger the incoming candidates are passed through lazily.
    When triggered, the whole stream is collected first, at most one
    translation or error row is yielded, then every original follows in order.
    """

    if detect_state(input_text, settings.trigger_key) is FilterState.PASSTHROUGH:
        yield from candidates
        return

    originals = list(candidates)
    if not originals:
        yield _error_candidate(input_text, NO_CANDIDATES_TEXT, CHECK_INPUT_COMMENT)
        return

    source_text = originals[0].text
    if not source_text:
        yield _error_candidate(input_text, EMPTY_CANDIDATE_TEXT, CHECK_INPUT_COMMENT)
    elif not is_chinese_character(source_text[0]):
        yield _error_candidate(input_text, NON_CHINESE_TEXT, CHECK_INPUT_COMMENT)
    else:
        yield _translate_candidate(source_text, input_text, settings, transport)
    yield from originals


def _translate_candidate(
    source_text: str,
    input_text: str,
    settings: Settings,
    transport: Transport | None,
) -> Candidate:
    try:
        result = dispatch(source_text, settings, transport=transport)
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("云翻译发生未预期错误")
        return _error_candidate(
            input_text, f"{TRANSLATION_FAILED_PREFIX} {exc}", TRANSLATION_ERROR_COMMENT
        )

    if result.ok:
        label = short_label(settings.target_lang)
        return Candidate(
            "translation",
            0,
            len(input_text),
            result.text or "",
            f"[{label}译] {source_text}",
        )
    return _error_candidate(
        input_text,
        f"{TRANSLATION_FAILED_PREFIX} {result.error or ''}",
        TRANSLATION_ERROR_COMMENT,
    )


def run_filter(
    candidates: Iterable[Candidate],
    input_text: str,
    settings: Settings,
    sink: Callable[[Candidate], None],
    *,
    transport: Transport | None = None,
) -> None:
    """Push every filtered candidate into *sink* in order."""

    for candidate in cloud_translation_filter(candidates, input_text, settings, transport=transport):
        sink(candidate)


class CloudTranslationFilter:
    """Filter entry point bound to a settings source and transport.

    A fresh :class:`Settings` snapshot is read on every call, so edits to the
    settings source take effect on the next keystroke.
    """

    def __init__(self, settings_source: SettingsSource | None = None, transport: Transport | None = None) -> None:
        self._settings_source = settings_source
        self._transport = transport

    def __call__(
        self,
        candidates: Iterable[Candidate],
        input_text: str,
        *,
        use_alternate_language: bool = False,
    ) -> Iterator[Candidate]:
        settings = load_settings(self._settings_source, use_alternate_language)
        return cloud_translation_filter(candidates, input_text, settings, transport=self._transport)
