"""Probabilistically unique atom identifiers."""

from __future__ import annotations

import random
import time
from typing import Optional

BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
RANDOM_SUFFIX_LENGTH = 5


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    chars = []
    while value > 0:
        value, remainder = divmod(value, 36)
        chars.append(BASE36[remainder])
    return "".join(reversed(chars))


def generate_atom_id(rng: Optional[random.Random] = None) -> str:
    """Millisecond timestamp in base36 followed by a random base36 suffix."""
    chooser = rng or random
    timestamp = to_base36(int(time.time() * 1000))
    suffix = "".join(chooser.choice(BASE36) for _ in range(RANDOM_SUFFIX_LENGTH))
    return timestamp + suffix
