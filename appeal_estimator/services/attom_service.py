"""ATTOM property API client."""

import logging
from typing import Any, Dict, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..cleaners.address import AddressCleaner
from ..models.config import AttomApiConfig
from ..models.schemas import AttomResponse

SEARCH_PATH = "/propertyapi/v1.0.0/property/address"
DETAIL_PATH = "/propertyapi/v1.0.0/property/detail"

# Returned with HTTP 400 when the address simply matched nothing
NO_RESULT_MSG = "SuccessWithoutResult"


class AttomError(Exception):
    """Base exception for ATTOM API errors."""


class AttomConfigurationError(AttomError):
    """No API key configured."""


class AttomAuthenticationError(AttomError):
    """The API key was rejected."""


class AttomAccessDeniedError(AttomError):
    """The API key lacks permission for the endpoint."""


class AttomRateLimitError(AttomError):
    """Rate limit exceeded."""


class AttomApiError(AttomError):
    """Any other failed request or unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AttomApiService:
    """Fetch search and detail records for an address from the ATTOM gateway."""

    def __init__(self, config: AttomApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.logger = logging.getLogger(__name__)
        self.session = session or self._create_session()

        if not config.is_configured:
            self.logger.warning("ATTOM API key not found. Set ATTOM_API_KEY in your environment or .env file")

    def _create_session(self) -> requests.Session:
        session = requests.Session()

        retry_strategy = Retry(
            total=self.config.max_retries,
            backoff_factor=self.config.backoff_factor,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update({"Accept": "application/json"})

        return session

    def close(self):
        self.session.close()

    def __enter__(self) -> "AttomApiService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _request(self, path: str, params: Dict[str, str], allow_no_result: bool = False) -> Dict[str, Any]:
        if not self.config.is_configured:
            raise AttomConfigurationError("ATTOM API key not configured. Set ATTOM_API_KEY in your environment")

        url = f"{self.config.base_url}{path}"
        self.logger.debug(f"GET {url} params={params}")

        try:
            response = self.session.get(
                url,
                params={**params, "format": "json"},
                headers={"apikey": self.config.api_key},
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise AttomApiError(f"Request to {path} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise AttomApiError(
                f"Failed to parse API response: {response.text[:200]}", response.status_code
            ) from e

        if not isinstance(data, dict):
            raise AttomApiError(f"Unexpected API response body from {path}", response.status_code)

        if not response.ok:
            status_msg = (data.get("status") or {}).get("msg")
            if allow_no_result and response.status_code == 400 and status_msg == NO_RESULT_MSG:
                return data
            if response.status_code == 401:
                raise AttomAuthenticationError("Invalid API key. Check your ATTOM_API_KEY configuration.")
            if response.status_code == 403:
                raise AttomAccessDeniedError("API access denied. Check your API key permissions.")
            if response.status_code == 429:
                raise AttomRateLimitError("API rate limit exceeded. Try again in a few minutes.")
            raise AttomApiError(
                f"API Error: {response.status_code} - {response.reason} ({status_msg or 'no status message'})",
                response.status_code,
            )

        return data

    def search_property(self, address: str) -> AttomResponse:
        """Search by free-form address. An unmatched address yields an empty response."""

        parsed = AddressCleaner.parse_address(address)
        self.logger.debug(f"Parsed address: {parsed.model_dump()}")

        data = self._request(
            SEARCH_PATH,
            {"address1": parsed.address1, "address2": parsed.address2},
            allow_no_result=True,
        )
        return AttomResponse.from_raw(data)

    def get_property_details(self, attom_id: str) -> AttomResponse:
        data = self._request(DETAIL_PATH, {"attomid": str(attom_id)})
        return AttomResponse.from_raw(data)

    def get_full_property_data(self, address: str) -> Tuple[AttomResponse, Optional[AttomResponse]]:
        """Search, then fetch details for the first match when it has an ATTOM id.

        A failed detail request is logged and the search result is used alone.
        """

        search = self.search_property(address)

        prop = search.first_property()
        if prop is None:
            return search, None

        attom_id = prop.identifier.attom_id if prop.identifier else None
        if not attom_id:
            return search, None

        try:
            detail = self.get_property_details(attom_id)
        except AttomError as e:
            self.logger.warning(f"Failed to fetch property details for {attom_id}: {e}")
            return search, None

        return search, detail
