"""
Comparaison de versions — "7.2" vs "5.3", composante par composante.

Règles :
  - découpage sur "." ; la séquence la plus courte est complétée par des 0
  - chaque composante est comparée comme entier, de gauche à droite
  - une composante vide ou non purement numérique ("", "x", "1-dev") vaut 0
  - jamais d'exception, quelle que soit l'entrée

Les composantes restent des chaînes de chiffres (zéros de tête retirés) et se
comparent par (longueur, texte) : pas de conversion int(), donc pas de limite
sur le nombre de chiffres.
"""
import logging
from enum import Enum
from itertools import zip_longest
from typing import List, Optional

log = logging.getLogger(__name__)


class Comparison(str, Enum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


def _normalize(part: str) -> str:
    """"007" → "7", "0" → "0"."""
    return part.lstrip("0") or "0"


def parse_version(value: Optional[str]) -> List[str]:
    """
    "7.2" → ["7", "2"]
    "5.03.x" → ["5", "3", "0"]
    None / "" → ["0"]
    """
    if not value:
        return ["0"]
    parts = []
    for raw in str(value).split("."):
        part = raw.strip()
        if part.isascii() and part.isdigit():
            parts.append(_normalize(part))
        else:
            if part:
                log.debug("Composante non numérique %.40r → 0", part)
            parts.append("0")
    return parts


def compare_versions(detected: Optional[str], minimum: Optional[str]) -> Comparison:
    """Compare `detected` à `minimum` (zéros implicites en fin de séquence)."""
    for a, b in zip_longest(parse_version(detected), parse_version(minimum), fillvalue="0"):
        key_a, key_b = (len(a), a), (len(b), b)
        if key_a < key_b:
            return Comparison.LESS
        if key_a > key_b:
            return Comparison.GREATER
    return Comparison.EQUAL


def is_up_to_date(detected: Optional[str], minimum: Optional[str]) -> bool:
    return compare_versions(detected, minimum) is not Comparison.LESS


class VersionComparator:
    """Comparateur injectable (cf. ContentSelector)."""

    def compare(self, detected: Optional[str], minimum: Optional[str]) -> Comparison:
        return compare_versions(detected, minimum)

    def is_up_to_date(self, detected: Optional[str], minimum: Optional[str]) -> bool:
        return is_up_to_date(detected, minimum)
