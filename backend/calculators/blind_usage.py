"""
Fabric blind (roman/roller) material calculator.

Blinds are cut as one flat piece, so material is costed by area:
width plus a side hem each side, drop plus header and bottom hems,
then waste on top. Template waste defaults to 5% when unset.
"""

from .base import BaseCalculator
from ..schemas import BlindCalculation

DEFAULT_BLIND_WASTE_PERCENT = 5.0


class BlindUsageCalculator(BaseCalculator):

    category = "blinds"

    def compute(self, measurements, template, fabric, units) -> BlindCalculation:
        rail_width = self.length_cm(measurements.rail_width, units)
        drop = self.length_cm(measurements.drop, units)

        header = template.blind_header_hem
        bottom = template.blind_bottom_hem
        side = template.blind_side_hem
        waste_percent = template.waste_percent
        if waste_percent is None:
            waste_percent = DEFAULT_BLIND_WASTE_PERCENT
        self.require_non_negative("waste_percent", waste_percent)
        self.require_non_negative("blind_header_hem", header)
        self.require_non_negative("blind_bottom_hem", bottom)
        self.require_non_negative("blind_side_hem", side)

        price_per_sqm = fabric.price_per_sqm if fabric.price_per_sqm is not None else fabric.price_per_meter
        self.require_non_negative("price_per_sqm", price_per_sqm)

        effective_width = rail_width + side * 2
        effective_drop = drop + header + bottom
        sqm_raw = (effective_width * effective_drop) / 10000
        sqm = sqm_raw * self.waste_multiplier(waste_percent)
        total_cost = sqm * price_per_sqm

        breakdown = [
            self.step("Width", "%g + %g + %g" % (rail_width, side, side), effective_width, "cm"),
            self.step("Height", "%g + %g + %g" % (drop, header, bottom), effective_drop, "cm"),
            self.step("Area", "%g x %g / 10000" % (effective_width, effective_drop), sqm_raw, "sqm"),
            self.step("With waste", "%g x (1 + %g%%)" % (sqm_raw, waste_percent), sqm, "sqm"),
            self.step("Material cost", "%g sqm x %g/sqm" % (sqm, price_per_sqm), total_cost, units.currency),
        ]

        return BlindCalculation(
            sqm=sqm,
            sqm_raw=sqm_raw,
            total_cost=total_cost,
            price_per_sqm=price_per_sqm,
            rail_width=rail_width,
            drop=drop,
            effective_width=effective_width,
            effective_drop=effective_drop,
            header_hem=header,
            bottom_hem=bottom,
            side_hem=side,
            waste_percent=waste_percent,
            currency=units.currency,
            breakdown=breakdown,
        )
