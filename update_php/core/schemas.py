"""
Schémas Pydantic du bloc "PHP Version Detection Content".

ContentBundle      → titre / corps / emphase d'une variante
Variant            → outOfDate | upToDate (remplace les clés "outOfDate" + "Body")
BlockConfiguration → réglages saisis par l'auteur, persistés à plat par l'hôte :

    {
      "minimumUpToDateVersion": "5.6",
      "previewOutdatedContent": false,
      "outOfDateTitle": "...", "outOfDateBody": "...", "outOfDateEmphasis": "...",
      "upToDateTitle": "...",  "upToDateBody": "...",  "upToDateEmphasis": "..."
    }
"""
from enum import Enum
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field


class Variant(str, Enum):
    OUT_OF_DATE = "outOfDate"
    UP_TO_DATE = "upToDate"

    def attribute(self, field: str) -> str:
        """Variant.UP_TO_DATE.attribute("title") → "upToDateTitle"."""
        return f"{self.value}{field.capitalize()}"


BUNDLE_FIELDS = ("title", "body", "emphasis")


class ContentBundle(BaseModel):
    """Contenu d'une variante — immuable une fois construit."""
    model_config = ConfigDict(frozen=True)

    title: str = ""
    body: str = ""
    emphasis: str = ""


class BlockConfiguration(BaseModel):
    """Configuration d'une instance du bloc (lecture seule au rendu)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    minimum_up_to_date_version: str = Field(default="", alias="minimumUpToDateVersion")
    out_of_date: ContentBundle = Field(default_factory=ContentBundle, alias="outOfDate")
    up_to_date: ContentBundle = Field(default_factory=ContentBundle, alias="upToDate")
    preview_outdated_content: bool = Field(default=False, alias="previewOutdatedContent")

    def bundle(self, variant: Variant) -> ContentBundle:
        if variant is Variant.UP_TO_DATE:
            return self.up_to_date
        return self.out_of_date

    # ── Conversion attributs à plat ↔ configuration ──────────────────────────

    @classmethod
    def from_block_attributes(cls, attributes: Mapping[str, Any]) -> "BlockConfiguration":
        """
        Construit la configuration depuis les attributs persistés du bloc.
        Champ absent ou None → chaîne vide (jamais d'erreur).
        """
        def text(key: str) -> str:
            value = attributes.get(key)
            return "" if value is None else str(value)

        bundles = {
            variant: ContentBundle(**{f: text(variant.attribute(f)) for f in BUNDLE_FIELDS})
            for variant in Variant
        }
        return cls(
            minimum_up_to_date_version=text("minimumUpToDateVersion"),
            out_of_date=bundles[Variant.OUT_OF_DATE],
            up_to_date=bundles[Variant.UP_TO_DATE],
            preview_outdated_content=attributes.get("previewOutdatedContent") is True,
        )

    def to_block_attributes(self) -> Dict[str, Any]:
        """Inverse de from_block_attributes."""
        attributes: Dict[str, Any] = {
            "minimumUpToDateVersion": self.minimum_up_to_date_version,
            "previewOutdatedContent": self.preview_outdated_content,
        }
        for variant in Variant:
            bundle = self.bundle(variant)
            for f in BUNDLE_FIELDS:
                attributes[variant.attribute(f)] = getattr(bundle, f)
        return attributes
