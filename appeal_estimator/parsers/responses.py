"""Parser for saved ATTOM search/detail response files."""

import logging
import polars as pl
from pathlib import Path
from typing import Dict, Any, List, Optional
from rich.console import Console
from rich.progress import Progress

from ..models import Config, PropertyNotFoundError, RawRecordError
from ..utils.data_validator import PropertyDataValidator
from .base import BaseParser
from .mapper import PropertyDataMapper


class AttomResponseParser(BaseParser):
    """Map a file of saved provider responses into a PropertyData dataset.

    Each entry is ``{"search": <response body>, "detail": <response body or null>}``.
    A bare response body (an object with a ``property`` list) is accepted as
    a search-only entry.
    """

    def __init__(self, config: Config, input_path: Path,
                 mapper: Optional[PropertyDataMapper] = None,
                 validator: Optional[PropertyDataValidator] = None,
                 console: Optional[Console] = None):
        super().__init__(config, input_path, console)
        self.mapper = mapper or PropertyDataMapper(config.estimation)
        self.validator = validator or PropertyDataValidator(self.console)
        self.logger = logging.getLogger(__name__)
        self.processing_stats = {
            'successful_mappings': 0,
            'failed_mappings': 0,
            'processing_errors': []
        }

    def build_rows(self, entries: List[Any], progress: Progress, task_id) -> List[Dict[str, Any]]:
        rows = []

        for index, entry in enumerate(entries):
            progress.advance(task_id)

            if isinstance(entry, dict) and "search" in entry:
                search, detail = entry.get("search"), entry.get("detail")
            else:
                search, detail = entry, None

            try:
                data = self.mapper.map_responses(search, detail)
            except (PropertyNotFoundError, RawRecordError) as e:
                self.processing_stats['failed_mappings'] += 1
                self.processing_stats['processing_errors'].append(f"entry {index}: {e}")
                self.logger.warning(f"Skipping entry {index}: {e}")
                continue

            result = self.validator.validate(data)
            rows.append({
                **data.to_dict(),
                "isValid": result.is_valid,
                "errorCount": len(result.errors),
                "warningCount": len(result.warnings),
            })
            self.processing_stats['successful_mappings'] += 1

        return rows

    def get_summary_stats(self, df: pl.DataFrame) -> Dict[str, Any]:
        """Get summary statistics for a mapped dataset."""

        if df.is_empty():
            return {"total_records": 0, "valid_records": 0}

        return {
            "total_records": len(df),
            "valid_records": int(df["isValid"].sum()),
            "value_stats": {
                "avg_current_value": df["currentValue"].mean(),
                "median_current_value": df["currentValue"].median(),
                "max_current_value": df["currentValue"].max(),
                "min_current_value": df["currentValue"].min(),
                "avg_tax_increase": df["taxIncrease"].mean(),
            },
            "data_quality": {
                row["dataQuality"]: row["count"]
                for row in df.group_by("dataQuality").agg(pl.len().alias("count")).to_dicts()
            },
            "property_types": df.group_by("propertyType").agg(
                pl.len().alias("count")
            ).sort("count", descending=True).head(10).to_dicts(),
            "estimated_share": {
                col: float((~df[col]).sum() / len(df) * 100)
                for col in ["hasRealAssessmentData", "hasRealBuildingData", "hasRealSaleData"]
            }
        }
