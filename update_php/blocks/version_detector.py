"""
Bloc "PHP Version Detection Content" — update-php/version-detector-content.

Affiche la variante "obsolète" ou "à jour" selon la version PHP détectée et la
version minimale choisie par l'auteur.
"""
from typing import Any, Dict, List, Mapping, Optional

from ..core.i18n import TEXT_DOMAIN, resolve
from ..core.schemas import BlockConfiguration, Variant, BUNDLE_FIELDS
from ..renderer.base import Renderer
from ..renderer.html import HTMLRenderer
from ..selector import ContentSelector
from .base import AttributeSpec, BaseBlock, BlockType

BLOCK_NAME = "update-php/version-detector-content"

VERSION_OPTIONS = ["5.3", "5.4", "5.5", "5.6", "7.0", "7.1", "7.2"]

DEFAULT_CONTENT = {
    Variant.OUT_OF_DATE: {
        "title": "WARNING",
        "body": (
            "The PHP version on your server is out-of-date. This negatively impacts speed and security on your "
            "site, and needs to be fixed. The below tutorial will show you how to fix this today. Please follow "
            "these instructions to protect your website."
        ),
        "emphasis": "Your WordPress site is slower and less secure than it can be.",
    },
    Variant.UP_TO_DATE: {
        "title": "GREAT NEWS!",
        "body": (
            "This means you’re enjoying speed and security benefits already. You don’t need to update your "
            "server’s PHP version at the moment, but the tutorial below will show you how to do so in future."
        ),
        "emphasis": "The PHP version on your server is up-to-date.",
    },
}


def version_options() -> List[Dict[str, str]]:
    """Options du sélecteur "Minimum Up To Date Version" de l'éditeur."""
    return [{"label": v, "value": v} for v in VERSION_OPTIONS]


def _attribute_specs(default_minimum_version: str) -> Dict[str, AttributeSpec]:
    specs = {
        "minimumUpToDateVersion": AttributeSpec(type="string", default=default_minimum_version),
        "previewOutdatedContent": AttributeSpec(type="boolean", default=False),
    }
    for variant in Variant:
        for field in BUNDLE_FIELDS:
            specs[variant.attribute(field)] = AttributeSpec(
                type="string", default=DEFAULT_CONTENT[variant][field],
            )
    return specs


class VersionDetectorBlock(BaseBlock):
    """
    Usage:
        >>> block = VersionDetectorBlock(ContentSelector(), HTMLRenderer())
        >>> block.render({"minimumUpToDateVersion": "5.6"}, "7.2")
        '<div class="detected-php-content"><h4>GREAT NEWS!</h4>...'
    """

    def __init__(
        self,
        selector: Optional[ContentSelector] = None,
        renderer: Optional[Renderer] = None,
        default_minimum_version: str = "5.3",
    ):
        self.selector = selector or ContentSelector()
        self.renderer = renderer or HTMLRenderer()
        self.default_minimum_version = default_minimum_version
        self.block_type = BlockType(
            name=BLOCK_NAME,
            title="PHP Version Detection Content",
            icon="list-view",
            category="widgets",
            keywords=["php", "detection", "version"],
            supports={"html": False},
            attributes=_attribute_specs(default_minimum_version),
        )

    def configuration(self, attributes: Optional[Mapping[str, Any]] = None) -> BlockConfiguration:
        return BlockConfiguration.from_block_attributes(self.prepare_attributes(attributes))

    def render(self, attributes: Optional[Mapping[str, Any]], detected_version: Optional[str]) -> str:
        """Rendu public du bloc ; "" si la requête n'annonce aucune version."""
        bundle = self.selector.select(detected_version, self.configuration(attributes))
        if bundle is None:
            return ""
        return self.renderer.render(bundle)

    def render_preview(self, attributes: Optional[Mapping[str, Any]] = None) -> str:
        return self.renderer.render(self.selector.preview(self.configuration(attributes)))

    def editor_strings(self, lang: str = "en") -> Dict[str, Any]:
        """Libellés localisés de l'interface d'édition."""
        strings: Dict[str, Any] = {
            "title": resolve("@block.title", lang),
            "preview_toggle": {
                "label": resolve("@editor.preview_toggle.label", lang),
                "help": resolve("@editor.preview_toggle.help", lang),
            },
            "minimum_version": {
                "label": resolve("@editor.minimum_version.label", lang),
                "help": resolve("@editor.minimum_version.help", lang),
                "default": resolve(
                    "@editor.minimum_version.default", lang,
                    context={"version": self.default_minimum_version},
                ),
            },
            "fields": {f: resolve(f"@editor.field.{f}", lang) for f in BUNDLE_FIELDS},
        }
        for variant in Variant:
            strings[variant.value] = {
                "heading": resolve(f"@editor.{variant.value}.heading", lang),
                "help": resolve(f"@editor.{variant.value}.help", lang),
            }
        return strings

    def catalog_entry(self, lang: str = "en") -> Dict[str, Any]:
        return {
            **self.block_type.model_dump(),
            "text_domain": TEXT_DOMAIN,
            "version_options": version_options(),
            "editor_strings": self.editor_strings(lang),
            "schema": BlockConfiguration.model_json_schema(),
        }
