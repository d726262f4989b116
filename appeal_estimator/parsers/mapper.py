"""Map provider property records into complete PropertyData records."""

import logging
from typing import Any, Optional, Union

from ..models.schemas import (
    ADDRESS_PLACEHOLDER,
    AttomResponse,
    DataQuality,
    PropertyData,
    PropertyNotFoundError,
    RawPropertyRecord,
)
from ..models.tables import EstimationTables
from ..utils.data_utils import round_half_up, round_one_decimal
from ..utils.seed import address_seed
from .classifier import PropertyTypeClassifier
from .estimation import EstimationEngine
from .extractor import FieldExtractor

RecordInput = Union[RawPropertyRecord, dict]


class PropertyDataMapper:
    """Build a fully populated PropertyData from a search record and optional detail record.

    Real provider values are used wherever present; every gap is filled by the
    estimation engine, seeded from the resolved address. The mapper never
    raises for missing data. Use :class:`PropertyDataValidator` to decide
    whether the result can be shown.
    """

    def __init__(self, tables: Optional[EstimationTables] = None,
                 engine: Optional[EstimationEngine] = None,
                 extractor: Optional[FieldExtractor] = None,
                 classifier: Optional[PropertyTypeClassifier] = None):
        self.engine = engine or EstimationEngine(tables)
        self.extractor = extractor or FieldExtractor()
        self.classifier = classifier or PropertyTypeClassifier()
        self.logger = logging.getLogger(__name__)

    def map(self, search: RecordInput, detail: Optional[RecordInput] = None) -> PropertyData:
        """Map one property lookup into a PropertyData record."""

        fields = self.extractor.extract(search, detail)
        engine = self.engine

        address = fields.address or ADDRESS_PLACEHOLDER
        seed = address_seed(address)
        property_type = self.classifier.classify(fields.building_type)

        # Values
        if fields.current_value is not None:
            current_value = round_half_up(fields.current_value)
        else:
            current_value = engine.base_value(address, property_type, seed)

        if fields.market_value is not None:
            market_value = round_half_up(fields.market_value)
        else:
            market_value = engine.market_value(current_value, seed)

        # Taxes
        if fields.tax_amount is not None:
            current_tax = round_half_up(fields.tax_amount)
            if current_value:
                self.logger.debug(
                    f"Effective tax rate for {address}: {current_tax / current_value:.4%}"
                )
        else:
            current_tax = round_half_up(current_value * engine.tax_rate(address, seed))

        value_increase_rate = engine.value_increase_rate(address, seed)
        previous_value = round_half_up(current_value / (1 + value_increase_rate))
        tax_growth = value_increase_rate * engine.tables.tax_growth_factor
        previous_tax = round_half_up(current_tax / (1 + tax_growth))

        if previous_tax > 0:
            tax_increase = round_one_decimal((current_tax - previous_tax) / previous_tax * 100)
        else:
            tax_increase = engine.tax_increase_rate(address, seed)

        # Building
        if fields.square_footage is not None:
            square_footage = round_half_up(fields.square_footage)
        else:
            square_footage = engine.square_footage(property_type, address, seed)

        if fields.year_built is not None:
            year_built = engine.clamp_year(fields.year_built)
        else:
            year_built = engine.year_built(address, seed)

        # Sale
        if fields.sale_price is not None:
            last_sale_price = round_half_up(fields.sale_price)
        else:
            last_sale_price = engine.sale_price(current_value, seed)
        last_sale_date = fields.sale_date or engine.sale_date(seed)

        result = PropertyData(
            address=address,
            property_type=property_type,
            current_value=current_value,
            previous_value=previous_value,
            current_tax=current_tax,
            previous_tax=previous_tax,
            tax_increase=tax_increase,
            market_value=market_value,
            square_footage=square_footage,
            year_built=year_built,
            last_sale_price=last_sale_price,
            last_sale_date=last_sale_date,
            has_real_assessment_data=fields.has_real_assessment_data,
            has_real_building_data=fields.has_real_building_data,
            has_real_sale_data=fields.has_real_sale_data,
            data_quality=DataQuality.from_flags(
                fields.has_real_assessment_data,
                fields.has_real_building_data,
                fields.has_real_sale_data,
            ),
        )

        self.logger.debug(f"Mapped property data for {address}: {result.data_quality.value}")
        return result

    def map_responses(self, search_response: Any, detail_response: Any = None) -> PropertyData:
        """Map decoded search/detail response bodies, using the first property of each."""

        search = AttomResponse.from_raw(search_response).first_property()
        if search is None:
            raise PropertyNotFoundError("Search response contains no property")

        detail = None
        if detail_response is not None:
            detail = AttomResponse.from_raw(detail_response).first_property()

        return self.map(search, detail)
