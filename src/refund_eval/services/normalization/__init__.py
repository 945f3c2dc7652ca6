"""Record normalization exports."""

from .dispatcher import get_strategy
from .service import normalize_record, parse_location, parse_source, parse_timestamp

__all__ = ["get_strategy", "normalize_record", "parse_location", "parse_source", "parse_timestamp"]
