from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from .. import models, schemas
from ..database import get_db

router = APIRouter(tags=["library"])

# Default workroom library, typical UK workroom allowances (cm)
DEFAULT_TEMPLATES = {
    "Pencil Pleat Pair": {
        "treatment_category": "curtains", "curtain_type": "pair", "fullness_ratio": 2.5,
        "header_allowance": 8.0, "bottom_hem": 15.0, "side_hems": 5.0, "seam_hems": 1.5,
        "return_left": 7.5, "return_right": 7.5, "waste_percent": 5.0,
    },
    "Wave Heading Pair": {
        "treatment_category": "curtains", "curtain_type": "pair", "fullness_ratio": 2.2,
        "header_allowance": 6.0, "bottom_hem": 10.0, "side_hems": 4.0, "seam_hems": 1.5,
        "return_left": 0.0, "return_right": 0.0, "waste_percent": 5.0,
    },
    "Eyelet Single": {
        "treatment_category": "curtains", "curtain_type": "single", "fullness_ratio": 2.0,
        "header_allowance": 10.0, "bottom_hem": 15.0, "side_hems": 5.0, "seam_hems": 1.5,
        "return_left": 0.0, "return_right": 0.0, "waste_percent": 0.0,
    },
    "Roman Blind": {
        "treatment_category": "roman_blinds", "curtain_type": "single", "fullness_ratio": 1.0,
        "blind_header_hem": 8.0, "blind_bottom_hem": 8.0, "blind_side_hem": 4.0,
        "waste_percent": 5.0,
    },
}

DEFAULT_FABRICS = {
    "Plain Linen Natural": {"fabric_width_cm": 137.0, "price_per_meter": 24.00},
    "Velvet Midnight": {"fabric_width_cm": 140.0, "price_per_meter": 42.50},
    "Wide Width Voile": {"fabric_width_cm": 300.0, "price_per_meter": 18.00},
    "Blackout Lining": {"fabric_width_cm": None, "price_per_meter": 8.50},
}


def seed_library_records(db: Session) -> int:
    """Insert any missing default templates and fabrics. Safe to run repeatedly."""
    seeded = 0
    for name, data in DEFAULT_TEMPLATES.items():
        existing = db.query(models.TreatmentTemplate).filter(
            models.TreatmentTemplate.name == name
        ).first()
        if not existing:
            db.add(models.TreatmentTemplate(name=name, **data))
            seeded += 1
    for name, data in DEFAULT_FABRICS.items():
        existing = db.query(models.Fabric).filter(models.Fabric.name == name).first()
        if not existing:
            db.add(models.Fabric(name=name, **data))
            seeded += 1
    db.commit()
    return seeded


@router.get("/library/seed")
def seed_library(db: Session = Depends(get_db)):
    """Seed the default workroom library, skipping existing records."""
    return {"ok": True, "seeded": seed_library_records(db)}


@router.get("/templates", response_model=List[schemas.TreatmentTemplate])
def list_templates(db: Session = Depends(get_db)):
    return db.query(models.TreatmentTemplate).order_by(models.TreatmentTemplate.name).all()


@router.get("/fabrics", response_model=List[schemas.Fabric])
def list_fabrics(db: Session = Depends(get_db)):
    return db.query(models.Fabric).order_by(models.Fabric.name).all()
