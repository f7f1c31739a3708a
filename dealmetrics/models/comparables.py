from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ComparablesCriteria:
    """Search criteria plus the raw listings table for a comps summary."""
    location: str  # e.g. "Austin, TX"
    radius_miles: Decimal
    square_footage_range: str  # e.g. "1500-2000"
    property_types: str  # e.g. "single family, duplex"
    listings_csv: str  # CSV text with a header row
