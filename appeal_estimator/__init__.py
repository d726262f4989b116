"""Property tax appeal estimator: map provider property records into complete estimates."""

from .models import Config, DataQuality, PropertyData, RawPropertyRecord, ValidationResult
from .parsers import PropertyDataMapper
from .utils.data_validator import PropertyDataValidator
from .utils.seed import address_seed

__all__ = [
    "Config",
    "DataQuality",
    "PropertyData",
    "RawPropertyRecord",
    "ValidationResult",
    "PropertyDataMapper",
    "PropertyDataValidator",
    "address_seed",
]
