from pydantic import BaseModel, computed_field
from typing import Any, Dict, Optional, List, Union
from datetime import datetime
import enum

from .units import UnitSystem


class CurtainType(str, enum.Enum):
    PAIR = "pair"
    SINGLE = "single"


# --- Calculation inputs ---

# Raw form entries: numbers, numeric strings, or blanks. Calculators parse them.
RawLength = Optional[Union[float, str]]


class MeasurementInput(BaseModel):
    """Finished measurements for one window, in the user's length unit."""
    rail_width: RawLength = None
    drop: RawLength = None
    pooling_amount: RawLength = 0.0


class TemplateSpec(BaseModel):
    """Manufacturing parameters of a treatment template. Allowances in cm."""
    fullness_ratio: float
    header_allowance: float = 0.0
    bottom_hem: float = 0.0
    side_hems: float = 0.0
    seam_hems: float = 0.0
    return_left: float = 0.0
    return_right: float = 0.0
    waste_percent: Optional[float] = None
    curtain_type: CurtainType = CurtainType.PAIR
    treatment_category: str = "curtains"
    # Blinds are costed by area with their own hems
    blind_header_hem: float = 8.0
    blind_bottom_hem: float = 8.0
    blind_side_hem: float = 0.0

    def resolve_fullness(self, heading_fullness: Optional[float] = None) -> float:
        """A selected heading's fullness wins over the template default."""
        if heading_fullness is not None and heading_fullness > 0:
            return heading_fullness
        return self.fullness_ratio

    def with_heading(self, heading_fullness: Optional[float]) -> "TemplateSpec":
        return self.model_copy(update={"fullness_ratio": self.resolve_fullness(heading_fullness)})


class FabricSpec(BaseModel):
    fabric_width_cm: Optional[float] = None
    price_per_meter: float = 0.0
    price_per_sqm: Optional[float] = None
    name: Optional[str] = None


# --- Calculation outputs ---

class FormulaStep(BaseModel):
    label: str
    formula: str
    value: float
    unit: str

    class Config:
        frozen = True


class FabricCalculation(BaseModel):
    """Linear-metre fabric requirement for a curtain. Lengths in cm."""
    linear_meters: float
    linear_yards: float
    total_cost: float
    price_per_meter: float
    widths_required: int
    rail_width: float
    drop: float
    fullness_ratio: float
    header_hem: float
    bottom_hem: float
    pooling: float
    total_drop: float
    returns: float
    waste_percent: float
    side_hems: float
    seam_hems: float
    total_seam_allowance: float
    total_side_hems: float
    return_left: float
    return_right: float
    curtain_count: int
    curtain_type: CurtainType
    total_width_with_allowances: float
    fabric_width_cm: float
    currency: str
    breakdown: List[FormulaStep] = []

    class Config:
        frozen = True


class BlindCalculation(BaseModel):
    """Square-metre material requirement for a fabric blind. Lengths in cm."""
    sqm: float
    sqm_raw: float
    total_cost: float
    price_per_sqm: float
    rail_width: float
    drop: float
    effective_width: float
    effective_drop: float
    header_hem: float
    bottom_hem: float
    side_hem: float
    waste_percent: float
    currency: str
    breakdown: List[FormulaStep] = []

    class Config:
        frozen = True


class ErrorDetail(BaseModel):
    code: str
    message: str
    field: Optional[str] = None
    value: Optional[str] = None


class CalculationResult(BaseModel):
    """Either a complete calculation, a list of missing inputs, or an error."""
    calculation: Optional[Union[FabricCalculation, BlindCalculation]] = None
    missing: List[str] = []
    error: Optional[ErrorDetail] = None

    @computed_field
    @property
    def ok(self) -> bool:
        return self.calculation is not None


# --- API bodies ---

class CalculationRequest(BaseModel):
    measurements: MeasurementInput
    # Inline records stay raw so malformed fields reach the calculator envelope
    template: Optional[Dict[str, Any]] = None
    template_id: Optional[int] = None
    fabric: Optional[Dict[str, Any]] = None
    fabric_id: Optional[int] = None
    units: Optional[UnitSystem] = None
    heading_fullness: Optional[float] = None


class TreatmentTemplate(TemplateSpec):
    id: int
    name: str
    created_at: datetime

    class Config:
        from_attributes = True


class Fabric(FabricSpec):
    id: int
    name: str
    created_at: datetime

    class Config:
        from_attributes = True
