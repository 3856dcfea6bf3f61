"""Identifiers drawn from the run's random source."""
from __future__ import annotations

import random
import uuid


def random_uuid(rng: random.Random) -> uuid.UUID:
    """Return a version 4 UUID reproducible from a seeded generator."""

    return uuid.UUID(int=rng.getrandbits(128), version=4)
