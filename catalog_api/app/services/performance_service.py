"""
Synthetic payloads for load testing.

Nothing produced here is stored.  The generated persons and the large
integer array exist only to give clients something big to download
and parse when benchmarking serialization and transfer.
"""

import random
import time
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from catalog_api.app.models.person import Person

FIRST_NAMES = ("Juan", "María", "Pedro", "Ana", "Luis", "Sofía", "Carlos", "Laura", "Miguel", "Elena")
LAST_NAMES = ("García", "Rodríguez", "López", "Martínez", "González", "Pérez", "Sánchez", "Fernández", "Ramírez", "Torres")

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


@dataclass
class LargeObject:
    id: int
    timestamp: int
    data: List[int]


class PerformanceService:
    """Builds throwaway person lists and large arrays.

    Parameters
    ----------
    default_count : int
        Number of persons generated when the caller gives no positive count.
    max_count : int
        Upper bound applied to any requested count.
    large_object_size : int
        Length of the ``data`` array in :meth:`build_large_object`.
    rng : Optional[random.Random]
        Source of randomness; pass a seeded instance for reproducible output.
    """

    def __init__(
        self,
        default_count: int = 10_000,
        max_count: int = 1_000_000,
        large_object_size: int = 2_500_000,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.default_count = default_count
        self.max_count = max_count
        self.large_object_size = large_object_size
        self._rng = rng or random.Random()

    def resolve_count(self, count: Optional[int]) -> int:
        size = count if count is not None and count > 0 else self.default_count
        return min(size, self.max_count)

    def generate_persons(self, count: Optional[int] = None) -> List[Person]:
        rng = self._rng
        today = date.today()
        persons = []
        for _ in range(self.resolve_count(count)):
            age = rng.randint(18, 97)
            persons.append(
                Person(
                    name=rng.choice(FIRST_NAMES),
                    last_name=rng.choice(LAST_NAMES),
                    age=age,
                    height=1.50 + rng.random() * 0.50,
                    weight=50.0 + rng.random() * 50.0,
                    birth_date=today - timedelta(days=age * 365),
                )
            )
        return persons

    def build_large_object(self) -> LargeObject:
        rng = self._rng
        return LargeObject(
            id=rng.getrandbits(63),
            timestamp=int(time.time() * 1000),
            data=[rng.randint(INT32_MIN, INT32_MAX) for _ in range(self.large_object_size)],
        )
