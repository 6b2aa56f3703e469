"""Time-of-day slots and the per-slot traffic weights of a road."""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Mapping, Union

from .errors import IncompleteTrafficError, InvalidTimeSlotError, InvalidWeightError


class TimeSlot(Enum):
    """Closed set of times of day a query can be asked for."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"

    def __str__(self) -> str:
        return self.value


def parse_time_slot(text: Union[str, TimeSlot]) -> TimeSlot:
    """Parse ``morning``/``afternoon``/``evening`` (case-sensitive)."""

    if isinstance(text, TimeSlot):
        return text
    if isinstance(text, str):
        for slot in TimeSlot:
            if slot.value == text:
                return slot
    raise InvalidTimeSlotError(
        f"Invalid time of day {text!r}; expected one of "
        + ", ".join(slot.value for slot in TimeSlot)
    )


# Per-weight cap. A road costs at most 2 * MAX_WEIGHT, so int64 path sums
# cannot overflow for any graph that fits in memory.
MAX_WEIGHT = 2**31 - 1


def check_weight(value: object, label: str) -> int:
    """Return ``value`` as an int, rejecting bools, floats, strings and out-of-range values."""

    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidWeightError(f"{label} must be an integer, got {value!r}")
    weight = int(value)
    if not -MAX_WEIGHT <= weight <= MAX_WEIGHT:
        raise InvalidWeightError(f"{label} must lie within +/-{MAX_WEIGHT}, got {weight}")
    return weight


@dataclass(frozen=True)
class TrafficProfile:
    """Additive traffic weight for each time slot."""

    morning: int
    afternoon: int
    evening: int

    @classmethod
    def from_mapping(cls, weights: Mapping) -> "TrafficProfile":
        """Build a profile from ``{slot: weight}``; keys may be slots or their names."""

        if isinstance(weights, TrafficProfile):
            return weights
        if not isinstance(weights, Mapping):
            raise IncompleteTrafficError(
                f"Traffic weights must be a mapping of time slots, got {type(weights).__name__}"
            )

        values = {}
        for key, weight in weights.items():
            try:
                slot = parse_time_slot(key)
            except InvalidTimeSlotError:
                raise IncompleteTrafficError(f"Unknown traffic time slot {key!r}") from None
            if slot in values:
                raise IncompleteTrafficError(f"Traffic weight for {slot} given twice")
            values[slot] = check_weight(weight, f"Traffic weight for {slot}")

        missing = [slot.value for slot in TimeSlot if slot not in values]
        if missing:
            raise IncompleteTrafficError(
                "Traffic weights missing for: " + ", ".join(missing)
            )
        return cls(
            morning=values[TimeSlot.MORNING],
            afternoon=values[TimeSlot.AFTERNOON],
            evening=values[TimeSlot.EVENING],
        )

    def weight(self, slot: TimeSlot) -> int:
        return getattr(self, slot.value)

    def as_dict(self) -> dict[str, int]:
        return {slot.value: self.weight(slot) for slot in TimeSlot}


__all__ = ["MAX_WEIGHT", "TimeSlot", "TrafficProfile", "check_weight", "parse_time_slot"]
