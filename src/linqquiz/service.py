# the four quiz operations plus a payload parser.
# every function is pure: inputs are never mutated and each call builds a new list
# errors propagate to the caller untouched, nothing here retries or logs them


from __future__ import annotations
import logging
import math
import string
from collections import Counter
from typing import Any, List, Optional
from .config import settings
from .errors import NullArgumentError, OutOfRangeError, QuizOverflowError
from .models import Family, FamilySummary, LetterCount, Number, Person, average_age

logger = logging.getLogger(__name__)

def even_numbers(exclusive_upper_bound: int) -> List[int]:
    # even integers in [1, bound), ascending
    if exclusive_upper_bound < 1:
        raise OutOfRangeError(f"exclusive_upper_bound must be >= 1 (got {exclusive_upper_bound})")
    evens = list(range(2, exclusive_upper_bound, 2))
    logger.debug("even_numbers(%d): %d values", exclusive_upper_bound, len(evens))
    return evens

def squares_of_multiples_of_7(exclusive_upper_bound: int, max_value: Optional[int] = None) -> List[int]:
    # max_value is the top of the result's integer type (int32 by default);
    # a square above half of it aborts the whole call
    if exclusive_upper_bound < 1:
        return []
    limit = (settings.max_int if max_value is None else max_value) // 2

    squares: List[int] = []
    # start at the largest multiple of 7 below the bound and walk down
    for i in range((exclusive_upper_bound - 1) // 7 * 7, 0, -7):
        square = i * i
        if square > limit:
            raise QuizOverflowError(f"{i}**2 = {square} exceeds {limit}")
        squares.append(square)

    logger.debug("squares_of_multiples_of_7(%d): %d values", exclusive_upper_bound, len(squares))
    return squares

# families only need `id` and `persons`, persons only need `age`
def family_statistics(families) -> List[FamilySummary]:
    if families is None:
        raise NullArgumentError("families must not be None")

    summaries: List[FamilySummary] = []
    for family in families:
        ages = [p.age for p in family.persons]
        summaries.append(FamilySummary(
            family_id=family.id,
            number_of_family_members=len(ages),
            average_age=average_age(ages),
        ))
    logger.debug("family_statistics: %d families summarized", len(summaries))
    return summaries

def letter_statistic(text: str) -> List[LetterCount]:
    # only ASCII letters count, so e.g. "ß".upper() == "SS" never adds to S
    counts = Counter(c.upper() for c in text if c in string.ascii_letters)
    result = [LetterCount(letter, counts[letter]) for letter in string.ascii_uppercase if counts[letter]]
    logger.debug("letter_statistic: %d chars, %d distinct letters", len(text), len(result))
    return result

def _parse_id(raw: Any) -> int:
    # JSON numbers only; 2.0 is fine, 1.9 and True are not
    if isinstance(raw, bool) or not isinstance(raw, (int, float)) or raw != int(raw):
        raise ValueError(f"family id must be an integer (got {raw!r})")
    return int(raw)

def _parse_age(raw: Any) -> Number:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)) or not math.isfinite(raw) or raw < 0:
        raise ValueError(f"age must be a non-negative number (got {raw!r})")
    return raw

# map raw records onto Family/Person, rejecting anything family_statistics could not average
def parse_families(payload: Any) -> List[Family]:
    # accepted shapes: [{"id": .., "persons": [{"age": ..}]}] or {"families": [...]}
    records = payload.get("families") if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise ValueError("Unsupported payload shape for parse_families()")

    try:
        families = [
            Family(
                id=_parse_id(rec["id"]),
                persons=tuple(Person(age=_parse_age(p["age"])) for p in rec.get("persons") or ()),
            )
            for rec in records
        ]
    except (KeyError, TypeError, AttributeError, ValueError, OverflowError) as exc:
        raise ValueError(f"Invalid family record: {exc!r}") from exc

    logger.debug("parse_families: %d records, %d families", len(records), len(families))
    return families
