"""
Calculation endpoints.

Missing or unusable input is not an HTTP error: the response carries
ok=false with the missing field names or an error detail, so the form can
keep prompting while the user types. Only unknown library ids are 404s.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError
from sqlalchemy.orm import Session

from .. import models, schemas
from ..calculators.blind_usage import BlindUsageCalculator
from ..calculators.fabric_usage import FabricUsageCalculator
from ..calculators.registry import get_calculator
from ..database import get_db
from ..errors import InvalidInputError
from ..units import MM_PER_UNIT, default_unit_system

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculations"])


def _resolve_template(request: schemas.CalculationRequest, db: Session):
    """Library record or inline dict as a TemplateSpec. Raises ValidationError on bad fields."""
    if request.template_id is not None:
        record = db.query(models.TreatmentTemplate).filter(
            models.TreatmentTemplate.id == request.template_id
        ).first()
        if not record:
            raise HTTPException(status_code=404, detail="Template not found")
        template = record.to_spec()
    elif request.template is not None:
        template = schemas.TemplateSpec.model_validate(request.template)
    else:
        return None
    if request.heading_fullness is not None:
        template = template.with_heading(request.heading_fullness)
    return template


def _resolve_fabric(request: schemas.CalculationRequest, db: Session):
    if request.fabric_id is None:
        if request.fabric is None:
            return None
        return schemas.FabricSpec.model_validate(request.fabric)
    record = db.query(models.Fabric).filter(models.Fabric.id == request.fabric_id).first()
    if not record:
        raise HTTPException(status_code=404, detail="Fabric not found")
    return record.to_spec()


def _invalid(error: ValidationError) -> schemas.CalculationResult:
    logger.warning("Rejected malformed request record: %s", error)
    return schemas.CalculationResult(error=InvalidInputError.from_validation(error).detail())


def _run(calculator, request: schemas.CalculationRequest, db: Session, template=None) -> schemas.CalculationResult:
    try:
        if template is None:
            template = _resolve_template(request, db)
        fabric = _resolve_fabric(request, db)
    except ValidationError as e:
        return _invalid(e)
    units = request.units or default_unit_system()
    return calculator.calculate(request.measurements, template, fabric, units)


@router.post("/calculations/fabric", response_model=schemas.CalculationResult)
def calculate_fabric(request: schemas.CalculationRequest, db: Session = Depends(get_db)):
    """Curtain fabric usage in linear metres."""
    return _run(FabricUsageCalculator(), request, db)


@router.post("/calculations/blind", response_model=schemas.CalculationResult)
def calculate_blind(request: schemas.CalculationRequest, db: Session = Depends(get_db)):
    """Blind material usage in square metres."""
    return _run(BlindUsageCalculator(), request, db)


@router.post("/calculations/treatment", response_model=schemas.CalculationResult)
def calculate_treatment(request: schemas.CalculationRequest, db: Session = Depends(get_db)):
    """Pick the calculator from the template's treatment category."""
    try:
        template = _resolve_template(request, db)
    except ValidationError as e:
        return _invalid(e)
    category = template.treatment_category if template is not None else None
    calculator = get_calculator(category)
    logger.debug("Treatment category %r -> %s", category, type(calculator).__name__)
    return _run(calculator, request, db, template)


@router.get("/units")
def list_units():
    """Supported length units with their size in centimetres, plus shop defaults."""
    defaults = default_unit_system()
    return {
        "length_units": {unit.value: factor / 10.0 for unit, factor in MM_PER_UNIT.items()},
        "default_length_unit": defaults.length_unit.value,
        "default_currency": defaults.currency,
    }
