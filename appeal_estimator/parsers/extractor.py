"""Pull known fields out of provider property records."""

from typing import Any, Callable, Optional, Tuple, Union

from ..models.schemas import ExtractedFields, RawPropertyRecord
from ..utils.data_utils import first_present, is_present

Getter = Callable[[RawPropertyRecord], Any]
RecordInput = Union[RawPropertyRecord, dict]


def field_path(*attrs: str) -> Getter:
    """Build a getter that walks nested optional sections, yielding None on gaps."""

    def getter(record: RawPropertyRecord) -> Any:
        node = record
        for attr in attrs:
            node = getattr(node, attr, None)
            if node is None:
                return None
        return node

    getter.__name__ = ".".join(attrs)
    return getter


ASSESSED_TOTAL = field_path("assessment", "assessed", "total_value")
MARKET_TOTAL = field_path("assessment", "market", "total_value")
TAX_AMOUNT = field_path("assessment", "tax", "tax_amount")
AVM_VALUE = field_path("avm", "amount", "value")
SALE_AMOUNT = field_path("sale", "amount", "sale_amount")
SALE_TRANSACTION_DATE = field_path("sale", "transaction_date")
SALE_SEARCH_DATE = field_path("sale", "sales_search_date")
LIVING_SIZE = field_path("building", "size", "living_size")
BUILDING_SIZE = field_path("building", "size", "building_size")
GROSS_SIZE = field_path("building", "size", "gross_size")
GROSS_SIZE_ADJUSTED = field_path("building", "size", "gross_size_adjusted")
YEAR_BUILT = field_path("building", "construction", "year_built")
YEAR_BUILT_EFFECTIVE = field_path("building", "construction", "year_built_effective")
BUILDING_TYPE = field_path("building", "summary", "building_type")


def display_address(record: RawPropertyRecord) -> Optional[str]:
    """One-line address of a record, else ``line1 line2``, else None."""

    address = record.address
    if address is None:
        return None
    if is_present(address.one_line):
        return address.one_line
    joined = f"{address.line1 or ''} {address.line2 or ''}".strip()
    return joined or None


class FieldExtractor:
    """Extract real-data candidates and availability flags from provider records.

    Each field is resolved from an ordered chain of getters; the first
    populated value wins. When a detail record is supplied it is the only
    source for every field except the display address, which falls back to
    the search record.
    """

    CURRENT_VALUE_CANDIDATES: Tuple[Getter, ...] = (ASSESSED_TOTAL, MARKET_TOTAL, AVM_VALUE, SALE_AMOUNT)
    MARKET_VALUE_CANDIDATES: Tuple[Getter, ...] = (AVM_VALUE, MARKET_TOTAL, SALE_AMOUNT)
    SQUARE_FOOTAGE_CANDIDATES: Tuple[Getter, ...] = (LIVING_SIZE, BUILDING_SIZE, GROSS_SIZE, GROSS_SIZE_ADJUSTED)
    YEAR_BUILT_CANDIDATES: Tuple[Getter, ...] = (YEAR_BUILT, YEAR_BUILT_EFFECTIVE)
    TAX_AMOUNT_CANDIDATES: Tuple[Getter, ...] = (TAX_AMOUNT,)
    SALE_PRICE_CANDIDATES: Tuple[Getter, ...] = (SALE_AMOUNT,)
    SALE_DATE_CANDIDATES: Tuple[Getter, ...] = (SALE_TRANSACTION_DATE, SALE_SEARCH_DATE)

    # Any populated getter marks the group as real
    ASSESSMENT_SIGNALS: Tuple[Getter, ...] = (ASSESSED_TOTAL, MARKET_TOTAL, TAX_AMOUNT)
    BUILDING_SIGNALS: Tuple[Getter, ...] = (YEAR_BUILT, LIVING_SIZE, BUILDING_SIZE)
    SALE_SIGNALS: Tuple[Getter, ...] = (SALE_AMOUNT, SALE_TRANSACTION_DATE)

    def extract(self, search: RecordInput, detail: Optional[RecordInput] = None) -> ExtractedFields:
        search = RawPropertyRecord.from_raw(search)
        primary = RawPropertyRecord.from_raw(detail) if detail is not None else search

        address = display_address(primary)
        if address is None and primary is not search:
            address = display_address(search)

        return ExtractedFields(
            address=address,
            building_type=BUILDING_TYPE(primary) or "",
            current_value=first_present(self.CURRENT_VALUE_CANDIDATES, primary),
            market_value=first_present(self.MARKET_VALUE_CANDIDATES, primary),
            tax_amount=first_present(self.TAX_AMOUNT_CANDIDATES, primary),
            square_footage=first_present(self.SQUARE_FOOTAGE_CANDIDATES, primary),
            year_built=first_present(self.YEAR_BUILT_CANDIDATES, primary),
            sale_price=first_present(self.SALE_PRICE_CANDIDATES, primary),
            sale_date=first_present(self.SALE_DATE_CANDIDATES, primary),
            has_real_assessment_data=self._has_any(self.ASSESSMENT_SIGNALS, primary),
            has_real_building_data=self._has_any(self.BUILDING_SIGNALS, primary),
            has_real_sale_data=self._has_any(self.SALE_SIGNALS, primary),
        )

    @staticmethod
    def _has_any(getters: Tuple[Getter, ...], record: RawPropertyRecord) -> bool:
        return first_present(getters, record) is not None
