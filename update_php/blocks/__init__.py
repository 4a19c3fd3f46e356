"""Blocs — exports publics."""
from .base import AttributeSpec, BaseBlock, BlockType
from .version_detector import (
    BLOCK_NAME,
    DEFAULT_CONTENT,
    VERSION_OPTIONS,
    VersionDetectorBlock,
    version_options,
)

__all__ = [
    "AttributeSpec", "BaseBlock", "BlockType",
    "BLOCK_NAME", "DEFAULT_CONTENT", "VERSION_OPTIONS",
    "VersionDetectorBlock", "version_options",
]
