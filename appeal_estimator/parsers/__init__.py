"""Parsers that turn provider records into PropertyData."""

from .base import BaseParser
from .classifier import PropertyTypeClassifier
from .estimation import EstimationEngine
from .extractor import FieldExtractor
from .mapper import PropertyDataMapper
from .responses import AttomResponseParser

__all__ = [
    "BaseParser",
    "PropertyTypeClassifier",
    "EstimationEngine",
    "FieldExtractor",
    "PropertyDataMapper",
    "AttomResponseParser",
]
