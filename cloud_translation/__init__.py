"""Cloud translation candidate filter for Chinese input method engines."""

from .candidate_filter import (
    Candidate,
    CloudTranslationFilter,
    FilterState,
    cloud_translation_filter,
    detect_state,
    run_filter,
)
from .config import EnvSettingsSource, MappingSettingsSource, Settings, load_settings
from .translation import TranslationResult, dispatch

__all__ = [
    "Candidate",
    "CloudTranslationFilter",
    "FilterState",
    "cloud_translation_filter",
    "detect_state",
    "run_filter",
    "EnvSettingsSource",
    "MappingSettingsSource",
    "Settings",
    "load_settings",
    "TranslationResult",
    "dispatch",
]
