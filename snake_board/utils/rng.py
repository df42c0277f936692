"""Random source helpers.

The board only ever asks for uniform integers over an inclusive range. The
default source wraps a private ``random.Random`` so seeding one board never
touches the global generator.
"""

import random
from typing import Optional

from snake_board.types import RandIntFn


def make_randint_fn(seed: Optional[int] = None) -> RandIntFn:
    """Return a seeded ``randint(low, high)`` (inclusive on both ends)."""
    return random.Random(seed).randint
