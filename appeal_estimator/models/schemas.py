"""Data schemas for provider property records and mapped results."""

from enum import Enum
from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field, ValidationError


ADDRESS_PLACEHOLDER = "Address not available"


class RawRecordError(ValueError):
    """Raised when a provider record does not have the expected shape."""


class PropertyNotFoundError(LookupError):
    """Raised when a provider response carries no property record."""


class _ProviderModel(BaseModel):
    """Base for provider sections: camelCase aliases, unknown keys ignored."""

    class Config:
        populate_by_name = True
        extra = "ignore"
        # attomId, fips and postal1 arrive as numbers or strings
        coerce_numbers_to_str = True


# PROVIDER (ATTOM) RECORD SECTIONS

class Identifier(_ProviderModel):
    attom_id: Optional[str] = Field(default=None, alias="attomId")
    fips: Optional[str] = Field(default=None)


class RecordAddress(_ProviderModel):
    one_line: Optional[str] = Field(default=None, alias="oneLine")
    line1: Optional[str] = Field(default=None)
    line2: Optional[str] = Field(default=None)
    locality: Optional[str] = Field(default=None)
    country_subdivision: Optional[str] = Field(default=None, alias="countrySubd")
    postal_code: Optional[str] = Field(default=None, alias="postal1")


class Lot(_ProviderModel):
    lot_size_acres: Optional[float] = Field(default=None, alias="lotSize1")
    lot_size_sqft: Optional[float] = Field(default=None, alias="lotSize2")


class BuildingSize(_ProviderModel):
    building_size: Optional[float] = Field(default=None, alias="bldgSize")
    gross_size: Optional[float] = Field(default=None, alias="grossSize")
    gross_size_adjusted: Optional[float] = Field(default=None, alias="grossSizeAdjusted")
    living_size: Optional[float] = Field(default=None, alias="livingSize")


class Construction(_ProviderModel):
    year_built: Optional[int] = Field(default=None, alias="yearBuilt")
    year_built_effective: Optional[int] = Field(default=None, alias="yearBuiltEffective")


class BuildingSummary(_ProviderModel):
    building_type: Optional[str] = Field(default=None, alias="bldgType")
    levels: Optional[float] = Field(default=None)
    units_count: Optional[float] = Field(default=None, alias="unitsCount")


class Building(_ProviderModel):
    size: Optional[BuildingSize] = None
    construction: Optional[Construction] = None
    summary: Optional[BuildingSummary] = None


class AssessedValues(_ProviderModel):
    total_value: Optional[float] = Field(default=None, alias="assdTtlValue")
    land_value: Optional[float] = Field(default=None, alias="assdLandValue")
    improvement_value: Optional[float] = Field(default=None, alias="assdImpValue")


class MarketValues(_ProviderModel):
    total_value: Optional[float] = Field(default=None, alias="mktTtlValue")
    land_value: Optional[float] = Field(default=None, alias="mktLandValue")
    improvement_value: Optional[float] = Field(default=None, alias="mktImpValue")


class TaxValues(_ProviderModel):
    tax_amount: Optional[float] = Field(default=None, alias="taxAmt")
    tax_year: Optional[int] = Field(default=None, alias="taxYear")


class Assessment(_ProviderModel):
    assessed: Optional[AssessedValues] = None
    market: Optional[MarketValues] = None
    tax: Optional[TaxValues] = None


class SaleAmount(_ProviderModel):
    sale_amount: Optional[float] = Field(default=None, alias="saleAmt")
    standard_code: Optional[str] = Field(default=None, alias="saleAmtStndCode")


class SaleCalculation(_ProviderModel):
    price_per_sqft: Optional[float] = Field(default=None, alias="pricePerSqft")


class Sale(_ProviderModel):
    amount: Optional[SaleAmount] = None
    calculation: Optional[SaleCalculation] = None
    sales_search_date: Optional[str] = Field(default=None, alias="salesSearchDate")
    transaction_date: Optional[str] = Field(default=None, alias="transDate")


class AvmAmount(_ProviderModel):
    value: Optional[float] = None


class Avm(_ProviderModel):
    amount: Optional[AvmAmount] = None
    event_date: Optional[str] = Field(default=None, alias="eventDate")


class RawPropertyRecord(_ProviderModel):
    """One property as returned by the provider's search or detail endpoint."""

    identifier: Optional[Identifier] = None
    address: Optional[RecordAddress] = None
    lot: Optional[Lot] = None
    building: Optional[Building] = None
    assessment: Optional[Assessment] = None
    sale: Optional[Sale] = None
    avm: Optional[Avm] = None

    @classmethod
    def from_raw(cls, data: Any) -> "RawPropertyRecord":
        """Validate a decoded JSON object into a record."""
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            raise RawRecordError(f"Expected a property object, got {type(data).__name__}")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise RawRecordError(f"Malformed property record: {e}") from e


class ResponseStatus(_ProviderModel):
    version: Optional[str] = None
    code: Optional[int] = None
    msg: Optional[str] = None
    total: Optional[int] = None
    response_date_time: Optional[str] = Field(default=None, alias="responseDateTime")
    transaction_id: Optional[str] = Field(default=None, alias="transactionID")


class AttomResponse(_ProviderModel):
    """Decoded body of a provider search or detail response."""

    status: Optional[ResponseStatus] = None
    properties: List[RawPropertyRecord] = Field(default_factory=list, alias="property")

    @classmethod
    def from_raw(cls, data: Any) -> "AttomResponse":
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            raise RawRecordError(f"Expected a response object, got {type(data).__name__}")
        if data.get("property") is None:
            data = {**data, "property": []}
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise RawRecordError(f"Malformed provider response: {e}") from e

    def first_property(self) -> Optional[RawPropertyRecord]:
        return self.properties[0] if self.properties else None


# MAPPED OUTPUT

class DataQuality(str, Enum):
    """How much of a mapped record came from real provider fields."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_flags(cls, has_assessment: bool, has_building: bool, has_sale: bool) -> "DataQuality":
        if has_assessment and has_building and has_sale:
            return cls.EXCELLENT
        if has_assessment and (has_building or has_sale):
            return cls.GOOD
        if has_assessment or has_building or has_sale:
            return cls.FAIR
        return cls.POOR


class ExtractedFields(BaseModel):
    """Real values pulled from a provider record, before any estimation."""

    address: Optional[str] = Field(default=None, description="Display address, if the record has one")
    building_type: str = Field(default="", description="Raw provider building type")
    current_value: Optional[float] = Field(default=None, description="Assessed, market, AVM or sale value")
    market_value: Optional[float] = Field(default=None, description="AVM, market or sale value")
    tax_amount: Optional[float] = Field(default=None)
    square_footage: Optional[float] = Field(default=None)
    year_built: Optional[int] = Field(default=None)
    sale_price: Optional[float] = Field(default=None)
    sale_date: Optional[str] = Field(default=None, description="Transaction or sales search date")

    has_real_assessment_data: bool = False
    has_real_building_data: bool = False
    has_real_sale_data: bool = False

    class Config:
        frozen = True


class PropertyData(BaseModel):
    """Complete property record consumed by the results and assessment pages."""

    address: str
    property_type: str = Field(alias="propertyType")
    current_value: int = Field(alias="currentValue")
    previous_value: int = Field(alias="previousValue")
    current_tax: int = Field(alias="currentTax")
    previous_tax: int = Field(alias="previousTax")
    tax_increase: float = Field(alias="taxIncrease", description="Percent, one decimal place")
    market_value: int = Field(alias="marketValue")
    square_footage: int = Field(alias="squareFootage")
    year_built: int = Field(alias="yearBuilt")
    last_sale_price: int = Field(alias="lastSalePrice")
    last_sale_date: str = Field(alias="lastSaleDate", description="YYYY-MM-DD")

    has_real_assessment_data: bool = Field(alias="hasRealAssessmentData")
    has_real_building_data: bool = Field(alias="hasRealBuildingData")
    has_real_sale_data: bool = Field(alias="hasRealSaleData")
    data_quality: DataQuality = Field(alias="dataQuality")

    class Config:
        populate_by_name = True
        frozen = True

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class ValidationResult(BaseModel):
    """Outcome of validating a mapped record."""

    is_valid: bool = Field(alias="isValid")
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


# APPEAL SAVINGS

class TaxSituation(str, Enum):
    """How much the owner says their tax went up this year."""

    SIGNIFICANT = "significant"
    MODERATE = "moderate"
    SMALL = "small"
    EXPLORING = "exploring"


class AppealPotential(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class SavingsEstimate(BaseModel):
    """Headline appeal figures for a mapped record and a tax situation."""

    tax_situation: TaxSituation = Field(alias="taxSituation")
    appeal_potential: AppealPotential = Field(alias="appealPotential")
    estimated_savings: int = Field(alias="estimatedSavings", description="Yearly tax saving in dollars")

    class Config:
        populate_by_name = True
        frozen = True

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
