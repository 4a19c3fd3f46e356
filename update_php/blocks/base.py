"""
Types de blocs — métadonnées + schéma d'attributs + préparation au rendu.
"""
import logging
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, Field

log = logging.getLogger(__name__)

_PY_TYPES = {
    "string": str,
    "boolean": bool,
}


class AttributeSpec(BaseModel):
    """Attribut persisté d'un bloc (type + valeur par défaut)."""
    type: Literal["string", "boolean"] = "string"
    default: Any = None

    def accepts(self, value: Any) -> bool:
        return isinstance(value, _PY_TYPES[self.type])


class BlockType(BaseModel):
    """Métadonnées d'un type de bloc (nom, libellés éditeur, attributs)."""
    name: str
    title: str
    icon: Optional[str] = None
    category: str = "widgets"
    keywords: List[str] = Field(default_factory=list)
    supports: Dict[str, Any] = Field(default_factory=dict)
    attributes: Dict[str, AttributeSpec] = Field(default_factory=dict)

    def default_attributes(self) -> Dict[str, Any]:
        return {key: spec.default for key, spec in self.attributes.items()}


class BaseBlock:
    """Bloc de base : sous-classes fournissent `block_type` et `render()`."""

    block_type: BlockType

    @property
    def name(self) -> str:
        return self.block_type.name

    def prepare_attributes(self, attributes: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Attributs prêts pour le rendu :
          - attribut déclaré absent → valeur par défaut
          - attribut déclaré mal typé → valeur par défaut (warning)
          - clés non déclarées conservées telles quelles
        """
        prepared: Dict[str, Any] = dict(attributes or {})
        for key, spec in self.block_type.attributes.items():
            if key not in prepared:
                prepared[key] = spec.default
            elif not spec.accepts(prepared[key]):
                log.warning(
                    "%s : attribut %s invalide (%r, attendu %s) → défaut",
                    self.name, key, prepared[key], spec.type,
                )
                prepared[key] = spec.default
        return prepared

    def check_attributes(self, attributes: Mapping[str, Any]) -> None:
        """Lève ValueError si un attribut déclaré a un type incorrect."""
        errors = [
            f"{key}: attendu {spec.type}, reçu {type(attributes[key]).__name__}"
            for key, spec in self.block_type.attributes.items()
            if key in attributes and not spec.accepts(attributes[key])
        ]
        if errors:
            raise ValueError(f"{self.name} — attributs invalides : " + "; ".join(errors))

    def render(self, attributes: Optional[Mapping[str, Any]], detected_version: Optional[str]) -> str:
        raise NotImplementedError
