"""Person record held by the in-memory store."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Person:
    name: str
    last_name: str
    age: int
    height: float
    weight: float
    birth_date: date
    id: Optional[int] = None
