"""
Abstract base class for all treatment calculators.

Input: MeasurementInput + TemplateSpec + FabricSpec + UnitSystem
Output: CalculationResult: a complete calculation, the list of missing
inputs, or an error detail. calculate() never raises.
"""

import logging
import math
from abc import ABC, abstractmethod

from pydantic import ValidationError

from ..errors import ComputationError, CalculationFailedError, InvalidInputError
from ..schemas import (
    CalculationResult, FabricSpec, FormulaStep, MeasurementInput, TemplateSpec,
)
from ..units import UnitSystem, default_unit_system, to_cm

logger = logging.getLogger(__name__)


class BaseCalculator(ABC):
    """All treatment calculators inherit from this."""

    category = ""

    @abstractmethod
    def compute(self, measurements: MeasurementInput, template: TemplateSpec,
                fabric: FabricSpec, units: UnitSystem):
        """
        Do the arithmetic on complete input.
        May raise InvalidInputError; anything else is treated as a failure.
        """
        pass

    def calculate(self, measurements, template, fabric, units=None) -> CalculationResult:
        """
        Validate, compute, and wrap the outcome. Records may be passed as
        schema instances or plain dicts.
        """
        try:
            measurements = self._coerce(MeasurementInput, measurements)
            template = self._coerce(TemplateSpec, template)
            fabric = self._coerce(FabricSpec, fabric)
            units = self._coerce(UnitSystem, units) or default_unit_system()
        except ValidationError as e:
            logger.warning("%s: rejected malformed input: %s", self.category, e)
            return CalculationResult(error=InvalidInputError.from_validation(e).detail())

        missing = self.missing_inputs(measurements, template, fabric)
        if missing:
            logger.debug("%s: waiting on %s", self.category, ", ".join(missing))
            return CalculationResult(missing=missing)

        try:
            calculation = self.compute(measurements, template, fabric, units)
        except InvalidInputError as e:
            logger.warning("%s: invalid %s=%r: %s", self.category, e.field, e.value, e.message)
            return CalculationResult(error=e.detail())
        except ComputationError as e:
            logger.exception("%s calculation failed", self.category)
            return CalculationResult(error=e.detail())
        except Exception as e:
            logger.exception("%s calculation failed", self.category)
            return CalculationResult(error=CalculationFailedError(str(e) or type(e).__name__).detail())

        return CalculationResult(calculation=calculation)

    def missing_inputs(self, measurements, template, fabric) -> list:
        """Names of the inputs still needed before a calculation can be produced."""
        missing = []
        if fabric is None:
            missing.append("fabric")
        if template is None:
            missing.append("template")
        if measurements is None or self.parse_length(measurements.rail_width) is None:
            missing.append("rail_width")
        if measurements is None or self.parse_length(measurements.drop) is None:
            missing.append("drop")
        return missing

    # --- Helper methods for all calculators ---

    def _coerce(self, model, value):
        if value is None or isinstance(value, model):
            return value
        if isinstance(value, dict):
            return model.model_validate(value)
        return model.model_validate(value, from_attributes=True)

    def parse_number(self, value, default: float = 0.0) -> float:
        """Parse a numeric value from user input. Blank, text, NaN and inf give the default."""
        if value is None:
            return default
        try:
            number = float(str(value).strip())
        except (ValueError, TypeError):
            return default
        if not math.isfinite(number):
            return default
        return number

    def parse_length(self, value):
        """A usable measurement: numeric and > 0, otherwise None."""
        number = self.parse_number(value, default=0.0)
        if number <= 0:
            return None
        return number

    def length_cm(self, value, units: UnitSystem, default: float = 0.0) -> float:
        """Parse a measurement in the user's unit and express it in centimetres."""
        return to_cm(self.parse_number(value, default), units.length_unit)

    def require_positive(self, field: str, value: float) -> float:
        if value is None or not math.isfinite(value) or value <= 0:
            raise InvalidInputError("%s must be greater than zero" % field, field=field, value=value)
        return value

    def require_non_negative(self, field: str, value: float) -> float:
        if value is None or not math.isfinite(value) or value < 0:
            raise InvalidInputError("%s must not be negative" % field, field=field, value=value)
        return value

    def waste_multiplier(self, waste_percent: float) -> float:
        """5 (%) -> 1.05"""
        return 1 + waste_percent / 100

    def step(self, label: str, formula: str, value: float, unit: str) -> FormulaStep:
        """One line of the workroom breakdown."""
        return FormulaStep(label=label, formula=formula, value=value, unit=unit)
