"""Environment-driven settings for calcpad.

    CALCPAD_PRECISION   significant digits for displayed results (unset: shortest form)
    CALCPAD_NOTICES     0/false/no/off silences lexical notices
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from rich.console import Console

_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_precision(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        precision = int(raw)
    except ValueError:
        raise ValueError(f"CALCPAD_PRECISION must be an integer, got {raw!r}") from None
    if precision < 1:
        raise ValueError(f"CALCPAD_PRECISION must be at least 1, got {precision}")
    return precision


@dataclass(frozen=True)
class Settings:
    """Display and diagnostics settings."""

    precision: Optional[int] = None
    notices: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        notices = env.get("CALCPAD_NOTICES", "1").strip().lower() not in _FALSE_VALUES
        return cls(
            precision=_parse_precision(env.get("CALCPAD_PRECISION")),
            notices=notices,
        )

    def console(self) -> Console:
        """Stderr console for notices; quiet when notices are off."""
        return Console(stderr=True, quiet=not self.notices)
