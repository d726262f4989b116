"""Data quality validation utilities."""

from typing import Dict, Any, List
from rich.console import Console
from rich.table import Table

from ..models.schemas import ADDRESS_PLACEHOLDER, PropertyData, ValidationResult


ADDRESS_ERROR = "Property address is missing or invalid"
VALUE_ERROR = "Property assessment value is missing or invalid"
ESTIMATE_WARNING = "Some property data may be estimated based on location averages"


class PropertyDataValidator:
    """Validate mapped property records and report on batch data quality."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def validate(self, data: PropertyData) -> ValidationResult:
        """Check a mapped record for fields the results page cannot do without.

        Errors make the record unusable. A single warning is added when the
        value is usable but some groups of fields were estimated.
        """

        errors = []
        warnings = []

        if not data.address or data.address == ADDRESS_PLACEHOLDER:
            errors.append(ADDRESS_ERROR)

        current_value = data.current_value
        if current_value is None or current_value <= 0:
            errors.append(VALUE_ERROR)
        else:
            estimated = [
                name for name, real in (
                    ("assessment", data.has_real_assessment_data),
                    ("building", data.has_real_building_data),
                    ("sale", data.has_real_sale_data),
                )
                if not real
            ]
            if estimated:
                warnings.append(f"{ESTIMATE_WARNING} (estimated: {', '.join(estimated)})")

        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)

    def generate_quality_report(self, rows: List[Dict[str, Any]]) -> None:
        """Render a data quality table for a batch of mapped records."""

        table = Table(title="📊 Data Quality Report")
        table.add_column("Address", style="bold")
        table.add_column("Value", justify="right")
        table.add_column("Quality", justify="center")
        table.add_column("Issues", style="red")
        table.add_column("Status", justify="center")

        for row in rows:
            quality = row.get("dataQuality", "poor")
            status = {
                "excellent": "🟢 Excellent",
                "good": "🟡 Good",
                "fair": "🟠 Fair",
            }.get(quality, "🔴 Poor")

            issues = []
            if row.get("errorCount", 0) > 0:
                issues.append(f"{row['errorCount']} errors")
            if row.get("warningCount", 0) > 0:
                issues.append(f"{row['warningCount']} warnings")

            table.add_row(
                row.get("address", "Unknown"),
                f"${row.get('currentValue', 0):,}",
                quality,
                ", ".join(issues) if issues else "None",
                status
            )

        self.console.print(table)

        if not rows:
            return

        real_share = sum(1 for r in rows if r.get("dataQuality") in ("excellent", "good")) / len(rows)
        invalid = sum(1 for r in rows if not r.get("isValid", True))

        if invalid:
            self.console.print(f"\n🚨 {invalid} record(s) failed validation and should not be presented.")
        elif real_share >= 0.75:
            self.console.print("\n✅ Most records are backed by real assessment data.")
        else:
            self.console.print("\n⚠️  Many figures are estimates. Disclose this on the results page.")
