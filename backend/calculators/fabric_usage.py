"""
Curtain fabric usage calculator.

Converts finished window measurements plus the template's manufacturing
allowances into the linear metres of fabric to buy and what it costs.

    required width   = rail width x fullness
    total width      = required width + returns + side hems (2 per curtain)
    widths required  = ceil(total width / fabric roll width)
    seam allowance   = (widths - 1) x seam hem x 2, only when widths > 1
    total drop       = drop + header hem + bottom hem + pooling
    linear metres    = (total drop + seam allowance) / 100 x widths x (1 + waste%)
    cost             = linear metres x price per metre

Measurements arrive in the user's length unit; allowances are always cm.
Nothing is rounded except the width count, since panels are indivisible.
"""

import math

from .base import BaseCalculator
from ..schemas import CurtainType, FabricCalculation
from ..units import YARDS_PER_METER


DEFAULT_FABRIC_WIDTH_CM = 137.0


class FabricUsageCalculator(BaseCalculator):

    category = "curtains"

    def compute(self, measurements, template, fabric, units) -> FabricCalculation:
        breakdown = []

        # 1. Everything to centimetres
        rail_width = self.length_cm(measurements.rail_width, units)
        drop = self.length_cm(measurements.drop, units)
        pooling = self.length_cm(measurements.pooling_amount, units)

        fabric_width = fabric.fabric_width_cm if fabric.fabric_width_cm is not None else DEFAULT_FABRIC_WIDTH_CM
        fullness = template.fullness_ratio
        waste_percent = template.waste_percent or 0.0

        self.require_positive("fullness_ratio", fullness)
        self.require_positive("fabric_width_cm", fabric_width)
        self.require_non_negative("waste_percent", waste_percent)
        for field in ("header_allowance", "bottom_hem", "side_hems", "seam_hems",
                      "return_left", "return_right"):
            self.require_non_negative(field, getattr(template, field))
        self.require_non_negative("price_per_meter", fabric.price_per_meter)

        # 2. Width: fullness, then returns and side hems on top
        required_width = rail_width * fullness
        breakdown.append(self.step(
            "Required width", "%g rail x %g fullness" % (rail_width, fullness),
            required_width, "cm"))

        curtain_count = 2 if template.curtain_type == CurtainType.PAIR else 1
        total_side_hems = template.side_hems * 2 * curtain_count
        breakdown.append(self.step(
            "Side hems", "%g x 2 sides x %d curtain(s)" % (template.side_hems, curtain_count),
            total_side_hems, "cm"))

        returns = template.return_left + template.return_right
        total_width = required_width + template.return_left + template.return_right + total_side_hems
        breakdown.append(self.step(
            "Total width", "%g + %g returns + %g side hems" % (required_width, returns, total_side_hems),
            total_width, "cm"))

        # 3. Panels, can't buy half a width
        widths_required = math.ceil(total_width / fabric_width)
        breakdown.append(self.step(
            "Widths required", "ceil(%g / %g)" % (total_width, fabric_width),
            widths_required, "widths"))

        if widths_required > 1:
            total_seam_allowance = (widths_required - 1) * template.seam_hems * 2
        else:
            total_seam_allowance = 0.0
        breakdown.append(self.step(
            "Seam allowance", "%d join(s) x %g x 2" % (max(widths_required - 1, 0), template.seam_hems),
            total_seam_allowance, "cm"))

        # 4. Drop
        total_drop = drop + template.header_allowance + template.bottom_hem + pooling
        breakdown.append(self.step(
            "Total drop", "%g + %g header + %g bottom + %g pooling" % (
                drop, template.header_allowance, template.bottom_hem, pooling),
            total_drop, "cm"))

        # 5. Metres to buy, waste over the whole requirement
        waste_multiplier = self.waste_multiplier(waste_percent)
        linear_meters = ((total_drop + total_seam_allowance) / 100) * widths_required * waste_multiplier
        breakdown.append(self.step(
            "Linear metres", "(%g + %g) / 100 x %d widths x %g waste" % (
                total_drop, total_seam_allowance, widths_required, waste_multiplier),
            linear_meters, "m"))

        total_cost = linear_meters * fabric.price_per_meter
        breakdown.append(self.step(
            "Fabric cost", "%g m x %g/m" % (linear_meters, fabric.price_per_meter),
            total_cost, units.currency))

        return FabricCalculation(
            linear_meters=linear_meters,
            linear_yards=linear_meters * YARDS_PER_METER,
            total_cost=total_cost,
            price_per_meter=fabric.price_per_meter,
            widths_required=widths_required,
            rail_width=rail_width,
            drop=drop,
            fullness_ratio=fullness,
            header_hem=template.header_allowance,
            bottom_hem=template.bottom_hem,
            pooling=pooling,
            total_drop=total_drop,
            returns=returns,
            waste_percent=waste_percent,
            side_hems=template.side_hems,
            seam_hems=template.seam_hems,
            total_seam_allowance=total_seam_allowance,
            total_side_hems=total_side_hems,
            return_left=template.return_left,
            return_right=template.return_right,
            curtain_count=curtain_count,
            curtain_type=template.curtain_type,
            total_width_with_allowances=total_width,
            fabric_width_cm=fabric_width,
            currency=units.currency,
            breakdown=breakdown,
        )


def calculate_fabric_usage(measurements, template, fabric, units=None):
    """FabricCalculation, or None when the inputs can't produce one yet."""
    return FabricUsageCalculator().calculate(measurements, template, fabric, units).calculation
