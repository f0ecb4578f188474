"""Runtime settings, read from ``MU_LOGO_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

ENV_PREFIX = "MU_LOGO_"


@dataclass(frozen=True)
class Settings:
    """
    Settings for the command-line host.

    Attributes:
        log_level: Minimum level for the stderr log sink
        pixel_scale: Size in pixels of one cell in PNG exports
        base_url: Page that share links point at (empty = bare fragments)
    """
    log_level: str = "WARNING"
    pixel_scale: int = 32
    base_url: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from the environment, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()

        scale_raw = env.get(f"{ENV_PREFIX}PIXEL_SCALE")
        if scale_raw is None:
            pixel_scale = defaults.pixel_scale
        else:
            try:
                pixel_scale = int(scale_raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}PIXEL_SCALE must be an integer, got {scale_raw!r}"
                ) from None
            if pixel_scale < 1:
                raise ValueError(f"{ENV_PREFIX}PIXEL_SCALE must be >= 1, got {pixel_scale}")

        return cls(
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            pixel_scale=pixel_scale,
            base_url=env.get(f"{ENV_PREFIX}BASE_URL", defaults.base_url),
        )
