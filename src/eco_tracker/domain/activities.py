"""Domain models for logged activities."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class ActivityCategory(StrEnum):
    """Closed set of activity categories."""

    TRANSPORT = "TRANSPORT"
    ELECTRICITY = "ELECTRICITY"
    WATER = "WATER"
    RECYCLING = "RECYCLING"
    FOOD = "FOOD"
    OTHER = "OTHER"


@dataclass(frozen=True)
class ActivityRecordInput:
    """Activity data ready to be persisted, with kg already computed."""

    date: date
    category: ActivityCategory
    detail: str
    amount: float
    kg: float


@dataclass(frozen=True)
class ActivityRecord:
    """Activity stored in the database."""

    id: int
    date: date
    category: ActivityCategory
    detail: str
    amount: float
    kg: float
