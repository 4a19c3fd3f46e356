"""
Détection de la version PHP entrante.

La valeur vient d'un paramètre de requête ("php_version" par défaut) : entrée
non fiable, nettoyée comme du texte brut avant toute comparaison.
"""
import logging
import re
from typing import Any, Mapping, Optional

log = logging.getLogger(__name__)

DEFAULT_VERSION_PARAM = "php_version"

_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")
_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_WHITESPACE_RE = re.compile(r"[\r\n\t ]+")


def sanitize_text_field(value: Any) -> str:
    """
    Nettoie une saisie texte :
      - balises (et contenu des <script>/<style>) supprimées, "<" orphelin → "&lt;"
      - octets encodés (%xx) supprimés
      - sauts de ligne, tabulations et espaces multiples réduits
      - espaces de début/fin retirés
    """
    if value is None:
        return ""
    text = str(value)
    text = _SCRIPT_STYLE_RE.sub("", text)
    text = _TAG_RE.sub("", text)
    text = text.replace("<", "&lt;")
    text = _OCTET_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def detect_php_version(params: Optional[Mapping[str, Any]], param_name: str = DEFAULT_VERSION_PARAM) -> str:
    """
    Version PHP annoncée par la requête, "" si absente.

    `params` : paramètres de requête (query + formulaire fusionnés).
    Starlette ne ré-échappe pas les paramètres : les antislashs sont conservés.
    """
    if not params or param_name not in params:
        return ""
    raw = params[param_name]
    if isinstance(raw, (list, tuple)):
        raw = raw[-1] if raw else ""
    version = sanitize_text_field(raw)
    if version != str(raw):
        log.debug("Paramètre %s nettoyé : %.40r → %.40r", param_name, raw, version)
    return version
