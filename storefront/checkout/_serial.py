"""
Order serials: AYM-<month>-<random 4 digits>-<day>.
"""

from __future__ import annotations

import random
from datetime import datetime

SERIAL_PREFIX = "AYM"


def generate_serial(now: datetime, rng: random.Random | None = None) -> str:
    """
    >>> generate_serial(datetime(2024, 3, 7), random.Random(1))[:7]
    'AYM-03-'
    """
    n = (rng or random).randrange(10000)
    return f"{SERIAL_PREFIX}-{now.month:02d}-{n:04d}-{now.day:02d}"


__all__ = ("SERIAL_PREFIX", "generate_serial")
