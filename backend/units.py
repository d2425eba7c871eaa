# Length units used by workroom measurements: exact linear ratios, no rounding.
#
# Ratios are held in millimetres so every standard unit is an exact decimal
# (1 in = 25.4 mm by definition, 1 ft = 12 in, 1 yd = 3 ft).

import enum

from pydantic import BaseModel


class LengthUnit(str, enum.Enum):
    MM = "mm"
    CM = "cm"
    M = "m"
    INCHES = "in"
    FEET = "ft"
    YARDS = "yd"


MM_PER_UNIT = {
    LengthUnit.MM: 1.0,
    LengthUnit.CM: 10.0,
    LengthUnit.M: 1000.0,
    LengthUnit.INCHES: 25.4,
    LengthUnit.FEET: 304.8,
    LengthUnit.YARDS: 914.4,
}

# Fabric is sold by the metre; imperial shops quote yards
YARDS_PER_METER = 1.09361


def parse_unit(unit) -> LengthUnit:
    """Accept a LengthUnit or its string value ('cm', 'in', ...)."""
    if isinstance(unit, LengthUnit):
        return unit
    try:
        return LengthUnit(str(unit).strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown length unit: {unit!r}. "
            f"Available: {[u.value for u in LengthUnit]}"
        )


def cm_per_unit(unit) -> float:
    """Centimetres in one of the given unit."""
    return MM_PER_UNIT[parse_unit(unit)] / 10.0


def convert_length(value: float, from_unit, to_unit) -> float:
    """Convert a length between any two supported units."""
    source = parse_unit(from_unit)
    target = parse_unit(to_unit)
    if source == target:
        return value
    return value * MM_PER_UNIT[source] / MM_PER_UNIT[target]


def to_cm(value: float, from_unit) -> float:
    return convert_length(value, from_unit, LengthUnit.CM)


class UnitSystem(BaseModel):
    """The user's measurement preferences, resolved by the caller and passed in."""
    length_unit: LengthUnit = LengthUnit.CM
    currency: str = "GBP"


def default_unit_system() -> UnitSystem:
    """Unit system built from the configured shop defaults."""
    from .config import settings
    return UnitSystem(
        length_unit=parse_unit(settings.DEFAULT_LENGTH_UNIT),
        currency=settings.DEFAULT_CURRENCY,
    )
