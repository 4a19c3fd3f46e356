"""
Registry des types de blocs — enregistrement explicite, lookup par nom.
"""
import logging
from typing import Any, Dict, List

from .blocks.base import BaseBlock
from .errors import BlockAlreadyRegistered, UnknownBlockType

log = logging.getLogger(__name__)


class BlockRegistry:
    """
    Usage:
        >>> registry = BlockRegistry()
        >>> registry.register(VersionDetectorBlock())
        >>> registry.get("update-php/version-detector-content").render(attrs, "7.2")
    """

    def __init__(self):
        self._blocks: Dict[str, BaseBlock] = {}

    def register(self, block: BaseBlock) -> BaseBlock:
        if block.name in self._blocks:
            raise BlockAlreadyRegistered(block.name)
        self._blocks[block.name] = block
        log.info("Bloc enregistré : %s", block.name)
        return block

    def unregister(self, name: str) -> BaseBlock:
        try:
            return self._blocks.pop(name)
        except KeyError:
            raise UnknownBlockType(name) from None

    def get(self, name: str) -> BaseBlock:
        try:
            return self._blocks[name]
        except KeyError:
            raise UnknownBlockType(name) from None

    def names(self) -> List[str]:
        return list(self._blocks)

    def __contains__(self, name: str) -> bool:
        return name in self._blocks

    def catalog(self, lang: str = "en") -> List[Dict[str, Any]]:
        """Catalogue des blocs (métadonnées, attributs, schémas, libellés)."""
        entries = []
        for block in self._blocks.values():
            if hasattr(block, "catalog_entry"):
                entries.append(block.catalog_entry(lang))
            else:
                entries.append(block.block_type.model_dump())
        return entries
