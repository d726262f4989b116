"""Lookup tables driving the synthetic property estimates."""

from typing import Dict, List, Tuple
from pydantic import BaseModel, Field


class Perturbation(BaseModel):
    """Seed-derived noise term: ``(seed % modulus) / divisor - offset``.

    A negative offset shifts the band upward, e.g. ``offset=-0.9`` with
    ``divisor=1000`` and ``modulus=200`` yields 0.9 to 1.1.
    """

    modulus: int = Field(description="Seed modulus")
    divisor: float = Field(description="Divisor applied to the remainder")
    offset: float = Field(default=0.0, description="Subtracted from the scaled remainder")

    def apply(self, seed: int) -> float:
        return (seed % self.modulus) / self.divisor - self.offset

    class Config:
        frozen = True


class RegionRule(BaseModel):
    """Tokens that identify a region in an address, and the region's value."""

    tokens: Tuple[str, ...] = Field(description="Lowercase substrings matched against the address")
    value: float

    class Config:
        frozen = True


class RegionTable(BaseModel):
    """Ordered region rules; the first rule with a matching token wins."""

    rules: List[RegionRule] = Field(default_factory=list)
    default: float

    def lookup(self, address: str) -> float:
        address_lower = address.lower()
        for rule in self.rules:
            if any(token in address_lower for token in rule.tokens):
                return rule.value
        return self.default


class TypeTable(BaseModel):
    """Ordered property-type rules matched as substrings of the type label."""

    rules: List[Tuple[str, float]] = Field(default_factory=list)
    default: float = 1.0

    def lookup(self, property_type: str) -> float:
        for label, value in self.rules:
            if label in property_type:
                return value
        return self.default


def _regions(default: float, *rules: Tuple[Tuple[str, ...], float]) -> RegionTable:
    return RegionTable(
        rules=[RegionRule(tokens=tokens, value=value) for tokens, value in rules],
        default=default,
    )


CALIFORNIA = ("ca", "california")
NEW_YORK = ("ny", "new york")
TEXAS = ("tx", "texas")
FLORIDA = ("fl", "florida")
MINNESOTA = ("mn", "minnesota")
ILLINOIS = ("il", "illinois")
WASHINGTON = ("wa", "washington")
COLORADO = ("co", "colorado")
ARIZONA = ("az", "arizona")
NEVADA = ("nv", "nevada")
NEW_JERSEY = ("nj", "new jersey")
NEW_HAMPSHIRE = ("nh", "new hampshire")


class EstimationTables(BaseModel):
    """All constants used by the estimation engine.

    Rule order is significant: region tokens are plain substrings, so an
    address containing both ``ca`` and ``tx`` resolves to whichever rule is
    declared first.
    """

    # Base value
    base_values: RegionTable = Field(default_factory=lambda: _regions(
        350000,
        (CALIFORNIA, 750000),
        (NEW_YORK, 550000),
        (TEXAS, 320000),
        (FLORIDA, 380000),
        (MINNESOTA, 340000),
        (ILLINOIS, 280000),
        (WASHINGTON, 580000),
        (COLORADO, 520000),
        (ARIZONA, 420000),
        (NEVADA, 450000),
    ))
    type_value_multipliers: TypeTable = Field(default_factory=lambda: TypeTable(
        rules=[
            ("Condominium", 0.85),
            ("Townhouse", 0.95),
            ("Multi-Family", 1.3),
            ("Commercial", 1.5),
        ],
        default=1.0,
    ))
    base_value_variation: Perturbation = Field(
        default_factory=lambda: Perturbation(modulus=300, divisor=1000, offset=0.15)
    )

    # Square footage
    type_square_footage: TypeTable = Field(default_factory=lambda: TypeTable(
        rules=[
            ("Condominium", 1400),
            ("Townhouse", 1800),
            ("Multi-Family", 2800),
            ("Commercial", 4000),
        ],
        default=2000,
    ))
    region_size_factors: RegionTable = Field(default_factory=lambda: _regions(
        1.0,
        (TEXAS, 1.1),
        (CALIFORNIA, 0.9),
    ))
    square_footage_variation: Perturbation = Field(
        default_factory=lambda: Perturbation(modulus=400, divisor=1000, offset=0.2)
    )

    # Tax rate
    tax_rates: RegionTable = Field(default_factory=lambda: _regions(
        0.011,
        (TEXAS, 0.017),
        (CALIFORNIA, 0.007),
        (NEW_YORK, 0.014),
        (FLORIDA, 0.009),
        (MINNESOTA, 0.010),
        (ILLINOIS, 0.021),
        (NEW_JERSEY, 0.023),
        (NEW_HAMPSHIRE, 0.018),
    ))
    tax_rate_variation: Perturbation = Field(
        default_factory=lambda: Perturbation(modulus=100, divisor=10000, offset=0.005)
    )

    # Year-over-year growth
    value_increase_rates: RegionTable = Field(default_factory=lambda: _regions(
        0.08,
        (FLORIDA, 0.12),
        (TEXAS, 0.10),
        (CALIFORNIA, 0.06),
        (NEW_YORK, 0.07),
    ))
    value_increase_variation: Perturbation = Field(
        default_factory=lambda: Perturbation(modulus=60, divisor=1000, offset=0.03)
    )
    tax_increase_rates: RegionTable = Field(default_factory=lambda: _regions(
        0.10,
        (CALIFORNIA, 0.06),
        (TEXAS, 0.12),
        (FLORIDA, 0.11),
    ))
    tax_increase_variation: Perturbation = Field(
        default_factory=lambda: Perturbation(modulus=40, divisor=1000, offset=0.02)
    )
    tax_growth_factor: float = Field(
        default=0.7, description="Share of the value increase rate applied to the previous tax"
    )

    # Year built
    base_years: RegionTable = Field(default_factory=lambda: _regions(
        1985,
        (CALIFORNIA, 1975),
        (TEXAS, 1995),
        (FLORIDA, 1990),
        (NEW_YORK, 1965),
    ))
    year_built_variation: Perturbation = Field(
        default_factory=lambda: Perturbation(modulus=300, divisor=10, offset=15)
    )
    min_year_built: int = 1900

    # Sale and market value
    sale_price_variation: Perturbation = Field(
        default_factory=lambda: Perturbation(modulus=200, divisor=1000, offset=-0.9)
    )
    market_value_variation: Perturbation = Field(
        default_factory=lambda: Perturbation(modulus=150, divisor=1000, offset=-0.95)
    )
    sale_years: List[int] = Field(default_factory=lambda: [2020, 2021, 2022, 2023, 2024])
    sale_months: List[str] = Field(
        default_factory=lambda: ["01", "02", "03", "04", "05", "06", "07", "08", "09", "10", "11", "12"]
    )
    sale_days: List[str] = Field(default_factory=lambda: ["01", "05", "10", "15", "20", "25"])

    # Appeal savings by self-reported tax situation
    savings_rates: Dict[str, float] = Field(
        default_factory=lambda: {"significant": 0.35, "moderate": 0.25},
        description="Share of the current tax an appeal might save",
    )
    default_savings_rate: float = 0.15
