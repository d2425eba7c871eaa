from sqlalchemy import Column, Integer, String, Float, DateTime
from datetime import datetime
from .database import Base
from .schemas import TemplateSpec, FabricSpec


# --- Workroom library (read-only here; records are maintained elsewhere) ---

class TreatmentTemplate(Base):
    """Manufacturing parameters for one product. All allowances in cm."""
    __tablename__ = "treatment_templates"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    treatment_category = Column(String, default="curtains")  # 'curtains' | 'roman_blinds' | ...
    curtain_type = Column(String, default="pair")  # 'pair' | 'single'
    fullness_ratio = Column(Float, nullable=False)
    header_allowance = Column(Float, default=0.0)
    bottom_hem = Column(Float, default=0.0)
    side_hems = Column(Float, default=0.0)
    seam_hems = Column(Float, default=0.0)
    return_left = Column(Float, default=0.0)
    return_right = Column(Float, default=0.0)
    waste_percent = Column(Float, nullable=True)
    blind_header_hem = Column(Float, default=8.0)
    blind_bottom_hem = Column(Float, default=8.0)
    blind_side_hem = Column(Float, default=0.0)
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_spec(self) -> TemplateSpec:
        return TemplateSpec.model_validate(self, from_attributes=True)


class Fabric(Base):
    __tablename__ = "fabrics"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    fabric_width_cm = Column(Float, nullable=True)  # NULL = standard 137cm roll
    price_per_meter = Column(Float, default=0.0)
    price_per_sqm = Column(Float, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_spec(self) -> FabricSpec:
        return FabricSpec.model_validate(self, from_attributes=True)
