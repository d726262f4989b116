"""
Pytest configuration and fixtures for the appeal estimator test suite.
"""

import pytest

from appeal_estimator.parsers import EstimationEngine, PropertyDataMapper
from appeal_estimator.utils.data_validator import PropertyDataValidator


SPRINGFIELD = "123 Main St, Springfield, IL 62701"
AUSTIN = "500 Oak Lane, Austin, TX"


def make_record(one_line=None, assessed=None, market=None, tax=None, avm=None,
                sale=None, trans_date=None, search_date=None, year_built=None,
                year_built_effective=None, living_size=None, bldg_size=None,
                gross_size=None, gross_size_adjusted=None, bldg_type=None, attom_id=None):
    """Build a decoded provider property record, leaving out every unset field."""

    def prune(value):
        if isinstance(value, dict):
            pruned = {k: prune(v) for k, v in value.items()}
            return {k: v for k, v in pruned.items() if v is not None and v != {}}
        return value

    return prune({
        "identifier": {"attomId": attom_id},
        "address": {"oneLine": one_line},
        "assessment": {
            "assessed": {"assdTtlValue": assessed},
            "market": {"mktTtlValue": market},
            "tax": {"taxAmt": tax},
        },
        "avm": {"amount": {"value": avm}},
        "sale": {
            "amount": {"saleAmt": sale},
            "transDate": trans_date,
            "salesSearchDate": search_date,
        },
        "building": {
            "construction": {"yearBuilt": year_built, "yearBuiltEffective": year_built_effective},
            "size": {
                "livingSize": living_size,
                "bldgSize": bldg_size,
                "grossSize": gross_size,
                "grossSizeAdjusted": gross_size_adjusted,
            },
            "summary": {"bldgType": bldg_type},
        },
    })


def make_response(*records, msg="SuccessWithResult"):
    """Wrap records in a provider response body."""
    return {
        "status": {"version": "1.0.0", "code": 0, "msg": msg, "total": len(records)},
        "property": list(records),
    }


@pytest.fixture
def engine():
    return EstimationEngine(current_year=2025)


@pytest.fixture
def mapper(engine):
    return PropertyDataMapper(engine=engine)


@pytest.fixture
def validator():
    return PropertyDataValidator()


@pytest.fixture
def full_record():
    """A record with real assessment, building and sale data."""
    return make_record(
        one_line=SPRINGFIELD,
        assessed=450000,
        tax=9000,
        year_built=2005,
        living_size=2100,
        sale=430000,
        trans_date="2019-06-14",
        bldg_type="SINGLE FAMILY RESIDENCE",
        attom_id="156812345",
    )
