"""
Update PHP v0.1 — bloc "PHP Version Detection Content" de la page WordPress.org "Update PHP".

Usage (fonctions):
    >>> from update_php import BlockConfiguration, select, HTMLRenderer
    >>> config = BlockConfiguration.from_block_attributes({"minimumUpToDateVersion": "5.6", ...})
    >>> HTMLRenderer().render(select("7.2", config))

Usage (plugin complet):
    >>> from update_php import build_plugin
    >>> plugin = build_plugin()
    >>> plugin.version_detector.render(attributes, "7.2")
"""
__version__ = "0.1.0"

from .core.schemas import BUNDLE_FIELDS, BlockConfiguration, ContentBundle, Variant
from .core.version import Comparison, VersionComparator, compare_versions, is_up_to_date, parse_version
from .core.i18n import resolve as i18n_resolve
from .selector import ContentSelector, select
from .detection import detect_php_version, sanitize_text_field
from .renderer import HTMLRenderer, Renderer, render_preview, render_version_detected_content
from .blocks import BLOCK_NAME, VERSION_OPTIONS, BaseBlock, BlockType, VersionDetectorBlock
from .registry import BlockRegistry
from .errors import BlockAlreadyRegistered, UnknownBlockType, UpdatePHPError
from .config import Settings, load_settings
from .bootstrap import Plugin, build_plugin

__all__ = [
    "__version__",
    # core
    "BUNDLE_FIELDS", "BlockConfiguration", "ContentBundle", "Variant",
    "Comparison", "VersionComparator", "compare_versions", "is_up_to_date", "parse_version",
    "i18n_resolve",
    # sélection / détection / rendu
    "ContentSelector", "select",
    "detect_php_version", "sanitize_text_field",
    "HTMLRenderer", "Renderer", "render_preview", "render_version_detected_content",
    # blocs
    "BLOCK_NAME", "VERSION_OPTIONS", "BaseBlock", "BlockType", "VersionDetectorBlock",
    "BlockRegistry",
    # erreurs
    "BlockAlreadyRegistered", "UnknownBlockType", "UpdatePHPError",
    # bootstrap
    "Settings", "load_settings", "Plugin", "build_plugin",
]
