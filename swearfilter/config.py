"""
Configuration management for the swear filter.

Reads filter toggles and an optional seed word list from environment variables.
"""

from __future__ import annotations

import logging
import os

from .core.swear_filter import SwearFilter
from .logging_config import logger
from .safety.settings import FilterSettings

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


def _parse_bool(name: str, raw: str, errors: list[str]) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value not in _FALSE_VALUES:
        errors.append(f"{name} must be a boolean, got {raw!r}")
    return False


def _parse_words(raw: str) -> tuple[str, ...]:
    return tuple(word.strip().lower() for word in raw.split(",") if word.strip())


class Config:
    """Environment-backed configuration for building a SwearFilter."""

    DISABLE_NORMALIZE: str = os.getenv("SWEARFILTER_DISABLE_NORMALIZE", "")
    DISABLE_SPACED_TAB: str = os.getenv("SWEARFILTER_DISABLE_SPACED_TAB", "")
    DISABLE_MULTI_WHITESPACE_STRIPPING: str = os.getenv("SWEARFILTER_DISABLE_MULTI_WHITESPACE_STRIPPING", "")
    DISABLE_ZERO_WIDTH_STRIPPING: str = os.getenv("SWEARFILTER_DISABLE_ZERO_WIDTH_STRIPPING", "")
    DISABLE_LEET_SPEAK: str = os.getenv("SWEARFILTER_DISABLE_LEET_SPEAK", "")
    ENABLE_SPACED_BYPASS: str = os.getenv("SWEARFILTER_ENABLE_SPACED_BYPASS", "")

    # Comma-separated seed list
    WORDS: str = os.getenv("SWEARFILTER_WORDS", "")

    LOG_LEVEL: str = os.getenv("SWEARFILTER_LOG_LEVEL", "INFO")

    @classmethod
    def load(cls) -> None:
        """Re-read every setting from the environment."""
        cls.DISABLE_NORMALIZE = os.getenv("SWEARFILTER_DISABLE_NORMALIZE", "")
        cls.DISABLE_SPACED_TAB = os.getenv("SWEARFILTER_DISABLE_SPACED_TAB", "")
        cls.DISABLE_MULTI_WHITESPACE_STRIPPING = os.getenv("SWEARFILTER_DISABLE_MULTI_WHITESPACE_STRIPPING", "")
        cls.DISABLE_ZERO_WIDTH_STRIPPING = os.getenv("SWEARFILTER_DISABLE_ZERO_WIDTH_STRIPPING", "")
        cls.DISABLE_LEET_SPEAK = os.getenv("SWEARFILTER_DISABLE_LEET_SPEAK", "")
        cls.ENABLE_SPACED_BYPASS = os.getenv("SWEARFILTER_ENABLE_SPACED_BYPASS", "")
        cls.WORDS = os.getenv("SWEARFILTER_WORDS", "")
        cls.LOG_LEVEL = os.getenv("SWEARFILTER_LOG_LEVEL", "INFO")

    @classmethod
    def _settings(cls, errors: list[str]) -> FilterSettings:
        return FilterSettings(
            disable_normalize=_parse_bool("SWEARFILTER_DISABLE_NORMALIZE", cls.DISABLE_NORMALIZE, errors),
            disable_spaced_tab=_parse_bool("SWEARFILTER_DISABLE_SPACED_TAB", cls.DISABLE_SPACED_TAB, errors),
            disable_multi_whitespace_stripping=_parse_bool(
                "SWEARFILTER_DISABLE_MULTI_WHITESPACE_STRIPPING", cls.DISABLE_MULTI_WHITESPACE_STRIPPING, errors
            ),
            disable_zero_width_stripping=_parse_bool(
                "SWEARFILTER_DISABLE_ZERO_WIDTH_STRIPPING", cls.DISABLE_ZERO_WIDTH_STRIPPING, errors
            ),
            disable_leet_speak=_parse_bool("SWEARFILTER_DISABLE_LEET_SPEAK", cls.DISABLE_LEET_SPEAK, errors),
            enable_spaced_bypass=_parse_bool("SWEARFILTER_ENABLE_SPACED_BYPASS", cls.ENABLE_SPACED_BYPASS, errors),
        )

    @classmethod
    def validate(cls) -> None:
        """Validate configuration parameters."""
        errors: list[str] = []

        cls._settings(errors)

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            errors.append(f"SWEARFILTER_LOG_LEVEL is not a logging level: {cls.LOG_LEVEL!r}")

        if errors:
            error_msg = ", ".join(errors)
            logger.error(f"Configuration validation failed: {error_msg}")
            raise RuntimeError(f"Invalid configuration: {error_msg}")

        if not cls.WORDS.strip():
            logger.warning("SWEARFILTER_WORDS not set - filter starts with no words")

        logger.info("Configuration validated successfully")

    @classmethod
    def settings(cls) -> FilterSettings:
        errors: list[str] = []
        settings = cls._settings(errors)
        if errors:
            raise RuntimeError(f"Invalid configuration: {', '.join(errors)}")
        return settings

    @classmethod
    def words(cls) -> tuple[str, ...]:
        return _parse_words(cls.WORDS)

    @classmethod
    def build_filter(cls) -> SwearFilter:
        """Create a filter from the current environment."""
        cls.load()
        cls.validate()
        level = cls.LOG_LEVEL.upper()
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

        swear_filter = SwearFilter(cls.words())
        swear_filter.apply_settings(cls.settings())
        logger.info(f"Swear filter ready with {len(swear_filter)} words")
        return swear_filter
