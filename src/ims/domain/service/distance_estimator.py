"""Domain service: distance lookup for shipping quotes.

Real deployments would ask a routing API; the default estimator derives
a stable pseudo-distance from the destination text so quotes are
reproducible across runs and processes.
"""

from __future__ import annotations

import zlib
from abc import ABC, abstractmethod

MIN_DISTANCE_KM = 50
DISTANCE_SPREAD_KM = 500


class DistanceEstimator(ABC):

    @abstractmethod
    def distance_km(self, destination: str) -> int:
        """Return the non-negative distance in km to ``destination``."""


class HashDistanceEstimator(DistanceEstimator):
    """Deterministic simulated distance in [50, 549] km.

    Uses crc32 instead of ``hash()`` because string hashing is salted
    per process.
    """

    def distance_km(self, destination: str) -> int:
        key = " ".join(destination.lower().split()).encode("utf-8")
        return zlib.crc32(key) % DISTANCE_SPREAD_KM + MIN_DISTANCE_KM
