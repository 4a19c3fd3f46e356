"""
Sélection du contenu — version détectée + configuration → ContentBundle.

Pas d'état : même entrée → même bundle (l'objet de la configuration, sans copie).
"""
import logging
from typing import Optional

from .core.schemas import BlockConfiguration, ContentBundle, Variant
from .core.version import Comparison, VersionComparator

log = logging.getLogger(__name__)


class ContentSelector:
    """
    Usage:
        >>> selector = ContentSelector(VersionComparator())
        >>> selector.select("7.2", config)   # → config.up_to_date si minimum <= 7.2
    """

    def __init__(self, comparator: Optional[VersionComparator] = None):
        self.comparator = comparator or VersionComparator()

    def select_variant(self, detected: Optional[str], config: BlockConfiguration) -> Optional[Variant]:
        """None si aucune version détectée, sinon la variante à afficher."""
        if detected is None or not detected.strip():
            return None
        result = self.comparator.compare(detected, config.minimum_up_to_date_version)
        variant = Variant.OUT_OF_DATE if result is Comparison.LESS else Variant.UP_TO_DATE
        log.debug("PHP %s vs minimum %r → %s", detected, config.minimum_up_to_date_version, variant.value)
        return variant

    def select(self, detected: Optional[str], config: BlockConfiguration) -> Optional[ContentBundle]:
        variant = self.select_variant(detected, config)
        if variant is None:
            return None
        return config.bundle(variant)

    def preview(self, config: BlockConfiguration) -> ContentBundle:
        """Aperçu éditeur : le drapeau previewOutdatedContent court-circuite la comparaison."""
        if config.preview_outdated_content:
            return config.out_of_date
        return config.up_to_date


def select(detected: Optional[str], config: BlockConfiguration) -> Optional[ContentBundle]:
    """Fonction raccourcie (comparateur par défaut)."""
    return ContentSelector().select(detected, config)
