# frozen records for families and their members, the per-family summary and the letter/count pair

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, NamedTuple, Tuple, Union

Number = Union[int, float, Decimal]

@dataclass(frozen=True)
class Person:
    # only the age is needed for family statistics
    age: Number

@dataclass(frozen=True)
class Family:
    id: int
    persons: Tuple[Person, ...] = field(default_factory=tuple)

@dataclass(frozen=True)
class FamilySummary:
    # output value object, one per input family
    family_id: int
    number_of_family_members: int
    average_age: Decimal

class LetterCount(NamedTuple):
    # a plain pair so callers can compare against ("A", 1) tuples
    letter: str
    number_of_occurrences: int

def average_age(ages: Iterable[Number]) -> Decimal:
    # exact decimal average, 0 on empty input to avoid zero division
    values = [Decimal(str(a)) for a in ages]
    return sum(values, Decimal(0)) / len(values) if values else Decimal(0)
