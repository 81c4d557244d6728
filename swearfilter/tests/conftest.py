import pytest

from swearfilter import SwearFilter

ENV_VARS = (
    "SWEARFILTER_DISABLE_NORMALIZE",
    "SWEARFILTER_DISABLE_SPACED_TAB",
    "SWEARFILTER_DISABLE_MULTI_WHITESPACE_STRIPPING",
    "SWEARFILTER_DISABLE_ZERO_WIDTH_STRIPPING",
    "SWEARFILTER_DISABLE_LEET_SPEAK",
    "SWEARFILTER_ENABLE_SPACED_BYPASS",
    "SWEARFILTER_WORDS",
    "SWEARFILTER_LOG_LEVEL",
)


@pytest.fixture
def swear_filter():
    """Filter with a few words used across the behaviour tests."""
    return SwearFilter(["hello", "farty", "cafe"])


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
