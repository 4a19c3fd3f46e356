"""
Bootstrap — construit explicitement le graphe d'objets du plugin.

    settings → comparateur → sélecteur → renderer → bloc → registry

Pas d'instance globale : l'appelant garde le Plugin retourné.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .blocks.version_detector import VersionDetectorBlock
from .config import Settings, load_settings
from .core.version import VersionComparator
from .registry import BlockRegistry
from .renderer.base import Renderer
from .renderer.html import HTMLRenderer
from .selector import ContentSelector

log = logging.getLogger(__name__)


@dataclass
class Plugin:
    settings: Settings
    selector: ContentSelector
    renderer: Renderer
    registry: BlockRegistry
    version_detector: VersionDetectorBlock


def build_plugin(settings: Optional[Settings] = None) -> Plugin:
    settings = settings or load_settings()
    selector = ContentSelector(VersionComparator())
    renderer = HTMLRenderer(autoescape=settings.autoescape)
    block = VersionDetectorBlock(
        selector=selector,
        renderer=renderer,
        default_minimum_version=settings.default_minimum_version,
    )
    registry = BlockRegistry()
    registry.register(block)
    if not settings.autoescape:
        log.warning("Échappement HTML désactivé : le contenu auteur est inséré tel quel")
    return Plugin(
        settings=settings,
        selector=selector,
        renderer=renderer,
        registry=registry,
        version_detector=block,
    )
