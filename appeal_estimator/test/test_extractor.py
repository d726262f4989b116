"""
Tests for pulling real values out of provider records.
"""

import json
import math

import pytest

from appeal_estimator.models import RawRecordError
from appeal_estimator.parsers.extractor import FieldExtractor, display_address, field_path

from conftest import SPRINGFIELD, make_record


@pytest.fixture
def extractor():
    return FieldExtractor()


def test_field_path_walks_nested_sections():
    from appeal_estimator.models import RawPropertyRecord

    record = RawPropertyRecord.from_raw(make_record(assessed=450000))

    assert field_path("assessment", "assessed", "total_value")(record) == 450000
    assert field_path("assessment", "market", "total_value")(record) is None
    assert field_path("sale", "amount", "sale_amount")(record) is None


def test_full_record(extractor, full_record):
    fields = extractor.extract(full_record)

    assert fields.address == SPRINGFIELD
    assert fields.building_type == "SINGLE FAMILY RESIDENCE"
    assert fields.current_value == 450000
    assert fields.market_value == 430000
    assert fields.tax_amount == 9000
    assert fields.square_footage == 2100
    assert fields.year_built == 2005
    assert fields.sale_price == 430000
    assert fields.sale_date == "2019-06-14"
    assert fields.has_real_assessment_data
    assert fields.has_real_building_data
    assert fields.has_real_sale_data


@pytest.mark.parametrize("record,expected", [
    (make_record(assessed=1, market=2, avm=3, sale=4), 1),
    (make_record(market=2, avm=3, sale=4), 2),
    (make_record(avm=3, sale=4), 3),
    (make_record(sale=4), 4),
    (make_record(), None),
])
def test_current_value_priority(extractor, record, expected):
    assert extractor.extract(record).current_value == expected


@pytest.mark.parametrize("record,expected", [
    (make_record(assessed=1, market=2, avm=3, sale=4), 3),
    (make_record(assessed=1, market=2, sale=4), 2),
    (make_record(assessed=1, sale=4), 4),
    (make_record(assessed=1), None),
])
def test_market_value_priority(extractor, record, expected):
    assert extractor.extract(record).market_value == expected


@pytest.mark.parametrize("record,expected", [
    (make_record(living_size=1, bldg_size=2, gross_size=3, gross_size_adjusted=4), 1),
    (make_record(bldg_size=2, gross_size=3, gross_size_adjusted=4), 2),
    (make_record(gross_size=3, gross_size_adjusted=4), 3),
    (make_record(gross_size_adjusted=4), 4),
])
def test_square_footage_priority(extractor, record, expected):
    assert extractor.extract(record).square_footage == expected


def test_year_built_falls_back_to_effective_year(extractor):
    fields = extractor.extract(make_record(year_built_effective=1999))

    assert fields.year_built == 1999
    # Effective year alone is not a building signal
    assert not fields.has_real_building_data


def test_sale_date_falls_back_to_search_date(extractor):
    fields = extractor.extract(make_record(search_date="2018-01-02"))

    assert fields.sale_date == "2018-01-02"
    assert not fields.has_real_sale_data


def test_zero_and_nan_are_missing(extractor):
    fields = extractor.extract(make_record(assessed=0, market=math.nan, avm=510000))

    assert fields.current_value == 510000
    assert not fields.has_real_assessment_data


def test_infinite_values_are_missing(extractor):
    record = json.loads(
        '{"assessment": {"assessed": {"assdTtlValue": Infinity}, "market": {"mktTtlValue": -Infinity}},'
        ' "avm": {"amount": {"value": 510000}}}'
    )

    fields = extractor.extract(record)

    assert fields.current_value == 510000
    assert not fields.has_real_assessment_data


def test_negative_amounts_are_missing(extractor):
    fields = extractor.extract(make_record(sale=-5, living_size=-100, year_built=-1))

    assert fields.current_value is None
    assert fields.sale_price is None
    assert fields.square_footage is None
    assert fields.year_built is None
    assert not fields.has_real_sale_data
    assert not fields.has_real_building_data


def test_tax_alone_marks_assessment_real(extractor):
    fields = extractor.extract(make_record(tax=4200))

    assert fields.has_real_assessment_data
    assert fields.current_value is None


def test_detail_record_is_primary(extractor):
    search = make_record(one_line=SPRINGFIELD, assessed=100000, year_built=1950)
    detail = make_record(one_line="123 Main Street, Springfield, IL", assessed=200000)

    fields = extractor.extract(search, detail)

    assert fields.address == "123 Main Street, Springfield, IL"
    assert fields.current_value == 200000
    # Search-only fields are not merged in
    assert fields.year_built is None
    assert not fields.has_real_building_data


def test_address_falls_back_to_search_record(extractor):
    search = make_record(one_line=SPRINGFIELD)
    detail = make_record(assessed=200000)

    assert extractor.extract(search, detail).address == SPRINGFIELD


def test_display_address_joins_lines():
    from appeal_estimator.models import RawPropertyRecord

    record = RawPropertyRecord.from_raw({"address": {"line1": "4 Elm St", "line2": "Dallas, TX 75201"}})
    assert display_address(record) == "4 Elm St Dallas, TX 75201"

    record = RawPropertyRecord.from_raw({"address": {"line1": "4 Elm St"}})
    assert display_address(record) == "4 Elm St"

    assert display_address(RawPropertyRecord.from_raw({})) is None


def test_numeric_attom_id_is_accepted(extractor):
    from appeal_estimator.models import RawPropertyRecord

    record = RawPropertyRecord.from_raw(make_record(attom_id=156812345))
    assert record.identifier.attom_id == "156812345"


@pytest.mark.parametrize("raw", [
    ["not", "a", "record"],
    "123 Main St",
    {"assessment": {"assessed": {"assdTtlValue": "lots"}}},
])
def test_malformed_record_raises(extractor, raw):
    with pytest.raises(RawRecordError):
        extractor.extract(raw)
