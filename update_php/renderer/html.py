"""
Renderer HTML — substitue titre / emphase / corps dans un gabarit fixe à 3 slots.

Tous les champs sont échappés par défaut (autoescape=True) ; autoescape=False
insère le texte de l'auteur tel quel.
"""
import html
from typing import Optional

from ..core.schemas import BlockConfiguration, ContentBundle
from ..selector import ContentSelector
from .base import Renderer


BLOCK_TEMPLATE = (
    '<div class="detected-php-content">'
    "<h4>{title}</h4>"
    '<p class="detected-php-emphasis">{emphasis}</p>'
    "<p>{body}</p>"
    "</div>"
)


class HTMLRenderer:
    """
    Usage:
        >>> renderer = HTMLRenderer()
        >>> renderer.render(ContentBundle(title="WARNING", body="...", emphasis="..."))
    """

    def __init__(self, autoescape: bool = True, template: str = BLOCK_TEMPLATE):
        self.autoescape = autoescape
        self.template = template

    def _value(self, text: str) -> str:
        return html.escape(text, quote=True) if self.autoescape else text

    def render(self, bundle: ContentBundle) -> str:
        return self.template.format(
            title=self._value(bundle.title),
            emphasis=self._value(bundle.emphasis),
            body=self._value(bundle.body),
        )


# ── Points d'entrée ─────────────────────────────────────────────────────────

def render_version_detected_content(
    config: BlockConfiguration,
    detected: Optional[str],
    selector: Optional[ContentSelector] = None,
    renderer: Optional[Renderer] = None,
) -> str:
    """HTML de la variante sélectionnée, "" si aucune version détectée."""
    bundle = (selector or ContentSelector()).select(detected, config)
    if bundle is None:
        return ""
    return (renderer or HTMLRenderer()).render(bundle)


def render_preview(
    config: BlockConfiguration,
    selector: Optional[ContentSelector] = None,
    renderer: Optional[Renderer] = None,
) -> str:
    """Aperçu éditeur (drapeau previewOutdatedContent, sans comparaison)."""
    bundle = (selector or ContentSelector()).preview(config)
    return (renderer or HTMLRenderer()).render(bundle)
