"""Map provider building types to the property-type labels shown to users."""

from typing import Optional, Tuple

SINGLE_FAMILY = "Single Family Residence"


class PropertyTypeClassifier:
    """Classify raw building-type strings by case-insensitive substring match."""

    # First match wins
    RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
        (("single", "detached", "sfr", "residential"), SINGLE_FAMILY),
        (("condo",), "Condominium"),
        (("townhouse", "town home", "townhome"), "Townhouse"),
        (("duplex",), "Duplex"),
        (("apartment", "multi"), "Multi-Family"),
        (("commercial", "office"), "Commercial"),
        (("industrial",), "Industrial"),
        (("retail",), "Retail"),
        (("vacant", "land"), "Vacant Land"),
    )

    def classify(self, building_type: Optional[str]) -> str:
        """Return the label for ``building_type``.

        Unrecognized types are passed through unchanged; an empty type is
        treated as a single family home.
        """

        raw = building_type or ""
        lowered = raw.lower()
        for tokens, label in self.RULES:
            if any(token in lowered for token in tokens):
                return label
        return raw or SINGLE_FAMILY
