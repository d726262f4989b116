"""
Tests for the deterministic estimators.
"""

import re

import pytest

from appeal_estimator.models import AppealPotential, EstimationTables, RegionTable, TaxSituation
from appeal_estimator.parsers import EstimationEngine

from conftest import AUSTIN, SPRINGFIELD

CUPERTINO = "1 Infinite Loop, Cupertino, CA 95014"


def test_base_value_uses_region_and_type(engine):
    # seed % 300 == 150 cancels the variation
    assert engine.base_value(AUSTIN, "Single Family Residence", 150) == 320000
    assert engine.base_value(CUPERTINO, "Condominium", 150) == 637500
    assert engine.base_value("10 Nowhere Rd", "Single Family Residence", 150) == 350000


def test_base_value_stays_within_band(engine):
    for seed in range(0, 1200, 7):
        value = engine.base_value(SPRINGFIELD, "Single Family Residence", seed)
        assert 280000 * 0.85 - 1 <= value <= 280000 * 1.15 + 1


def test_square_footage(engine):
    # seed % 400 == 200 cancels the variation
    assert engine.square_footage("Condominium", "Dallas, TX", 200) == 1540
    assert engine.square_footage("Townhouse", "Los Angeles, CA", 200) == 1620
    assert engine.square_footage("Commercial", "Denver, CO", 200) == 4000
    assert engine.square_footage("Mobile Home", "Denver, CO", 200) == 2000


def test_tax_rate(engine):
    assert engine.tax_rate(AUSTIN, 50) == pytest.approx(0.017)
    assert engine.tax_rate("7 Oak Ct, Newark, NJ", 50) == pytest.approx(0.023)
    assert engine.tax_rate("10 Nowhere Rd", 0) == pytest.approx(0.006)


def test_value_increase_rate(engine):
    assert engine.value_increase_rate("9 Pine Rd, Miami, FL", 30) == pytest.approx(0.12)
    assert engine.value_increase_rate("10 Nowhere Rd", 0) == pytest.approx(0.05)


def test_tax_increase_rate_is_percent_with_one_decimal(engine):
    assert engine.tax_increase_rate(AUSTIN, 20) == 12.0
    assert engine.tax_increase_rate("10 Nowhere Rd", 20) == 10.0
    assert engine.tax_increase_rate("10 Nowhere Rd", 39) == 11.9


def test_year_built(engine):
    # seed % 300 == 150 cancels the variation
    assert engine.year_built(CUPERTINO, 150) == 1975
    assert engine.year_built("5 Park Ave, New York, NY", 150) == 1965
    assert engine.year_built(SPRINGFIELD, 150) == 1985
    assert engine.year_built(SPRINGFIELD, 0) == 1970


def test_year_built_is_clamped():
    old = EstimationEngine(EstimationTables(base_years=RegionTable(default=1890)), current_year=2025)
    new = EstimationEngine(EstimationTables(base_years=RegionTable(default=2030)), current_year=2025)

    assert old.year_built(SPRINGFIELD, 0) == 1900
    assert new.year_built(SPRINGFIELD, 299) == 2025


def test_sale_price_and_market_value(engine):
    assert engine.sale_price(400000, 100) == 400000
    assert engine.sale_price(400000, 0) == 360000
    assert engine.market_value(400000, 50) == 400000
    assert engine.market_value(400000, 0) == 380000


def test_sale_date(engine):
    assert engine.sale_date(0) == "2020-01-01"
    assert engine.sale_date(7) == "2022-03-15"

    for seed in range(0, 500, 13):
        assert re.fullmatch(r"202[0-4]-(0[1-9]|1[0-2])-(01|05|10|15|20|25)", engine.sale_date(seed))


def test_current_year_defaults_to_today():
    from datetime import date

    assert EstimationEngine().current_year == date.today().year


def test_clamp_year(engine):
    assert engine.clamp_year(1850) == 1900
    assert engine.clamp_year(1999) == 1999
    assert engine.clamp_year(2100) == 2025


@pytest.mark.parametrize("situation,potential,savings", [
    (TaxSituation.SIGNIFICANT, AppealPotential.HIGH, 3150),
    (TaxSituation.MODERATE, AppealPotential.MEDIUM, 2250),
    (TaxSituation.SMALL, AppealPotential.LOW, 1350),
    (TaxSituation.EXPLORING, AppealPotential.LOW, 1350),
])
def test_estimate_savings(engine, situation, potential, savings):
    estimate = engine.estimate_savings(9000, situation)

    assert estimate.appeal_potential == potential
    assert estimate.estimated_savings == savings


def test_estimate_savings_accepts_plain_values(engine):
    estimate = engine.estimate_savings(1001, "moderate")

    # 1001 * 0.25 = 250.25
    assert estimate.estimated_savings == 250
    assert estimate.to_dict() == {
        "taxSituation": "moderate",
        "appealPotential": "MEDIUM",
        "estimatedSavings": 250,
    }
