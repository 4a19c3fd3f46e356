"""Core module pour update_php."""
from .schemas import BUNDLE_FIELDS, BlockConfiguration, ContentBundle, Variant
from .version import Comparison, VersionComparator, compare_versions, is_up_to_date, parse_version

__all__ = [
    "BUNDLE_FIELDS",
    "BlockConfiguration",
    "ContentBundle",
    "Variant",
    "Comparison",
    "VersionComparator",
    "compare_versions",
    "is_up_to_date",
    "parse_version",
]
