"""Runtime settings for stockpot, read from STOCKPOT_* environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_LOW_STOCK_THRESHOLD = 5

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Inventory behaviour knobs.

    low_stock_threshold: default cut-off for low-stock listings (inclusive).
    strict_discounts: reject sales that name an unknown discount kind instead
        of selling them without a discount.
    """

    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    strict_discounts: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from the environment (os.environ by default)."""
        env = os.environ if env is None else env

        threshold = DEFAULT_LOW_STOCK_THRESHOLD
        raw = env.get("STOCKPOT_LOW_STOCK_THRESHOLD", "").strip()
        if raw:
            try:
                threshold = int(raw)
            except ValueError:
                LOGGER.warning(
                    "Ignoring STOCKPOT_LOW_STOCK_THRESHOLD=%r, using %d",
                    raw, DEFAULT_LOW_STOCK_THRESHOLD,
                )

        strict = env.get("STOCKPOT_STRICT_DISCOUNTS", "").strip().lower() in _TRUTHY
        return cls(low_stock_threshold=threshold, strict_discounts=strict)
