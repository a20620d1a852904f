from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TransportationType(IntEnum):
    WALKING = 0
    AIRPORT_BUS = 1
    BUS = 2
    DUMMY = 3
    AIRPORT_TRAIN = 4
    BOAT = 5
    TRAIN = 6
    TRAM = 7
    METRO = 8


@dataclass(frozen=True, slots=True)
class Line:
    id: int
    name: str
    transportation_type: TransportationType
    color: str  # hex without '#'
