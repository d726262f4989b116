"""Deterministic fallback estimates for fields the provider did not return.

These are not predictions. Every figure is a regional base value nudged by a
seed-derived offset, so the same address always produces the same numbers
while different addresses look plausibly varied.
"""

from datetime import date
from typing import Optional

from ..models.schemas import AppealPotential, SavingsEstimate, TaxSituation
from ..models.tables import EstimationTables
from ..utils.data_utils import round_half_up, round_one_decimal


class EstimationEngine:
    """Pure estimators over a set of :class:`EstimationTables`."""

    def __init__(self, tables: Optional[EstimationTables] = None, current_year: Optional[int] = None):
        self.tables = tables or EstimationTables()
        self._current_year = current_year

    @property
    def current_year(self) -> int:
        return self._current_year or date.today().year

    def base_value(self, address: str, property_type: str, seed: int) -> int:
        """Estimated property value, +/-15% around the regional base."""
        base = self.tables.base_values.lookup(address)
        multiplier = self.tables.type_value_multipliers.lookup(property_type)
        variation = self.tables.base_value_variation.apply(seed)
        return round_half_up(base * multiplier * (1 + variation))

    def square_footage(self, property_type: str, address: str, seed: int) -> int:
        """Estimated living area, +/-20% around the type and region base."""
        base_size = self.tables.type_square_footage.lookup(property_type)
        base_size = round_half_up(base_size * self.tables.region_size_factors.lookup(address))
        variation = self.tables.square_footage_variation.apply(seed)
        return round_half_up(base_size * (1 + variation))

    def tax_rate(self, address: str, seed: int) -> float:
        base_rate = self.tables.tax_rates.lookup(address)
        return base_rate + self.tables.tax_rate_variation.apply(seed)

    def value_increase_rate(self, address: str, seed: int) -> float:
        """Year-over-year value growth as a fraction."""
        base_rate = self.tables.value_increase_rates.lookup(address)
        return base_rate + self.tables.value_increase_variation.apply(seed)

    def tax_increase_rate(self, address: str, seed: int) -> float:
        """Year-over-year tax growth as a percentage with one decimal."""
        base_rate = self.tables.tax_increase_rates.lookup(address)
        rate = base_rate + self.tables.tax_increase_variation.apply(seed)
        return round_one_decimal(rate * 100)

    def year_built(self, address: str, seed: int) -> int:
        base_year = self.tables.base_years.lookup(address)
        year = round_half_up(base_year + self.tables.year_built_variation.apply(seed))
        return self.clamp_year(year)

    def clamp_year(self, year: int) -> int:
        """Limit a construction year to ``[min_year_built, current_year]``."""
        return max(self.tables.min_year_built, min(year, self.current_year))

    def sale_price(self, current_value: float, seed: int) -> int:
        """Last sale price, 90-110% of the current value."""
        return round_half_up(current_value * self.tables.sale_price_variation.apply(seed))

    def market_value(self, current_value: float, seed: int) -> int:
        """Market value, 95-110% of the current value."""
        return round_half_up(current_value * self.tables.market_value_variation.apply(seed))

    def sale_date(self, seed: int) -> str:
        tables = self.tables
        year = tables.sale_years[seed % len(tables.sale_years)]
        month = tables.sale_months[(seed * 2) % len(tables.sale_months)]
        day = tables.sale_days[(seed * 3) % len(tables.sale_days)]
        return f"{year}-{month}-{day}"

    def estimate_savings(self, current_tax: float, tax_situation: TaxSituation) -> SavingsEstimate:
        """Appeal potential and yearly savings for the owner's reported tax situation."""

        tax_situation = TaxSituation(tax_situation)
        rate = self.tables.savings_rates.get(tax_situation.value, self.tables.default_savings_rate)

        if tax_situation is TaxSituation.SIGNIFICANT:
            potential = AppealPotential.HIGH
        elif tax_situation is TaxSituation.MODERATE:
            potential = AppealPotential.MEDIUM
        else:
            potential = AppealPotential.LOW

        return SavingsEstimate(
            tax_situation=tax_situation,
            appeal_potential=potential,
            estimated_savings=round_half_up(current_tax * rate),
        )
