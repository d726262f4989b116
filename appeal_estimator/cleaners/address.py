"""Address cleaning and parsing utilities."""

import re
from pydantic import BaseModel


class AddressParseError(ValueError):
    """Raised when a free-form address cannot be split into street and city."""


class ParsedAddress(BaseModel):
    """A free-form address split into the parts the property API expects."""

    street_address: str
    city: str
    state: str = ""
    zip_code: str = ""

    @property
    def address1(self) -> str:
        return self.street_address

    @property
    def address2(self) -> str:
        """City line: ``City, ST 12345`` with the state and ZIP only when known."""
        value = self.city
        if self.state:
            value += f", {self.state}"
        if self.zip_code:
            value += f" {self.zip_code}"
        return value


class AddressCleaner:
    """Utilities for cleaning and splitting user-entered addresses."""

    # "Austin TX 78701" -> state at the end of a part, optional ZIP or ZIP+4
    TRAILING_STATE = re.compile(r'\s([A-Z]{2,3})\s*(\d{5}(-\d{4})?)?$')
    # "TX 78701" as a whole part
    STATE_ZIP = re.compile(r'^([A-Z]{2,3})\s*(\d{5}(-\d{4})?)?$')

    WHITESPACE = re.compile(r'\s+')

    @staticmethod
    def normalize_whitespace(address: str) -> str:
        """Trim and collapse runs of whitespace."""
        return AddressCleaner.WHITESPACE.sub(' ', address.strip())

    @staticmethod
    def parse_address(address: str) -> ParsedAddress:
        """Split ``street, city[, state zip][, ...]`` into its parts.

        State codes are only recognized in upper case. Anything after the
        third comma is folded into the city.
        """

        clean_address = AddressCleaner.normalize_whitespace(address)
        parts = [part.strip() for part in clean_address.split(',') if part.strip()]

        if not parts:
            raise AddressParseError("Invalid address format. Please enter a complete address.")

        street_address = parts[0]
        city = ''
        state = ''
        zip_code = ''

        if len(parts) == 2:
            city_state_part = parts[1]
            state_match = AddressCleaner.TRAILING_STATE.search(city_state_part)
            if state_match:
                state = state_match.group(1)
                city = city_state_part[:state_match.start()].strip()
                zip_code = state_match.group(2) or ''
            else:
                city = city_state_part

        elif len(parts) >= 3:
            city = parts[1]
            state_zip_part = parts[2]

            state_zip_match = AddressCleaner.STATE_ZIP.match(state_zip_part)
            if state_zip_match:
                state = state_zip_match.group(1)
                zip_code = state_zip_match.group(2) or ''
            else:
                state_match = AddressCleaner.TRAILING_STATE.search(state_zip_part)
                if state_match:
                    state = state_match.group(1)
                    city = f"{city} {state_zip_part[:state_match.start()].strip()}"
                    zip_code = state_match.group(2) or ''
                else:
                    city = f"{city}, {state_zip_part}"

            if len(parts) > 3:
                additional_parts = ', '.join(parts[3:])
                additional_match = None if state else AddressCleaner.TRAILING_STATE.search(additional_parts)
                if additional_match:
                    state = additional_match.group(1)
                    city = f"{city}, {additional_parts[:additional_match.start()].strip()}"
                    zip_code = additional_match.group(2) or ''
                else:
                    city = f"{city}, {additional_parts}"

        if not street_address or not city:
            raise AddressParseError("Please provide a complete address including street address and city.")

        return ParsedAddress(street_address=street_address, city=city, state=state, zip_code=zip_code)
