from __future__ import annotations

from dataclasses import dataclass

from .whitespace import WhitespaceSettings


@dataclass(frozen=True)
class FilterSettings:
    """Snapshot of the toggles that steer normalization and matching.

    Every ``disable_*`` flag turns one normalization stage off; the defaults run
    them all. ``enable_spaced_bypass`` is the only opt-in.
    """

    disable_normalize: bool = False
    disable_spaced_tab: bool = False
    disable_multi_whitespace_stripping: bool = False
    disable_zero_width_stripping: bool = False
    disable_leet_speak: bool = False
    enable_spaced_bypass: bool = False

    def whitespace(self) -> WhitespaceSettings:
        return WhitespaceSettings(
            convert_tabs=not self.disable_spaced_tab,
            strip_zero_width=not self.disable_zero_width_stripping,
            collapse_runs=not self.disable_multi_whitespace_stripping,
        )
