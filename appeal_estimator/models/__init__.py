"""Data models for the appeal estimator."""

from .config import Config, AttomApiConfig, ConfigError
from .tables import EstimationTables, Perturbation, RegionRule, RegionTable, TypeTable
from .schemas import (
    ADDRESS_PLACEHOLDER,
    RawRecordError,
    PropertyNotFoundError,
    RawPropertyRecord,
    AttomResponse,
    DataQuality,
    TaxSituation,
    AppealPotential,
    SavingsEstimate,
    ExtractedFields,
    PropertyData,
    ValidationResult,
)

__all__ = [
    "Config",
    "AttomApiConfig",
    "ConfigError",
    "EstimationTables",
    "Perturbation",
    "RegionRule",
    "RegionTable",
    "TypeTable",
    "ADDRESS_PLACEHOLDER",
    "RawRecordError",
    "PropertyNotFoundError",
    "RawPropertyRecord",
    "AttomResponse",
    "DataQuality",
    "TaxSituation",
    "AppealPotential",
    "SavingsEstimate",
    "ExtractedFields",
    "PropertyData",
    "ValidationResult",
]
