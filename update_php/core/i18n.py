"""
i18n — libellés de l'éditeur du bloc (text domain "update-php").

Clés format "@namespace.key" → texte localisé
Textes directs → retournés tels quels
Placeholders {version}, etc. → résolus via context dict
"""
import json
import logging
import re
from pathlib import Path
from typing import List, Optional

log = logging.getLogger(__name__)

TEXT_DOMAIN = "update-php"

_I18N_CACHE: dict = {}
_I18N_DIR = Path(__file__).parent.parent / "i18n"


def _load_lang(lang: str) -> dict:
    """Charge le fichier i18n/{lang}.json (lazy, mis en cache)."""
    if lang not in _I18N_CACHE:
        path = _I18N_DIR / f"{lang}.json"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                _I18N_CACHE[lang] = json.load(f)
        else:
            log.warning("Catalogue i18n absent : %s", path.name)
            _I18N_CACHE[lang] = {}
    return _I18N_CACHE[lang]


def available_langs() -> List[str]:
    return sorted(p.stem for p in _I18N_DIR.glob("*.json"))


def load_catalog(lang: str) -> Optional[dict]:
    """Catalogue complet d'une langue, None si la langue n'existe pas."""
    if lang not in available_langs():
        return None
    return _load_lang(lang)


def i18n_resolve(value: str, lang: str = "en") -> str:
    """
    Résout une clé i18n.
    "@editor.preview_toggle.label" → texte localisé
    "texte direct" → retourné tel quel
    """
    if not value or not value.startswith("@"):
        return value

    key = value[1:]
    node = _load_lang(lang)
    for part in key.split("."):
        if isinstance(node, dict) and part in node:
            node = node[part]
        else:
            return f"[missing:{key}]"

    return str(node) if not isinstance(node, dict) else f"[missing:{key}]"


def resolve_placeholders(text: str, context: Optional[dict] = None) -> str:
    """
    Remplace les placeholders {version}, etc. par les valeurs du contexte.
    Les placeholders sans correspondance sont laissés intacts.
    """
    if not context or not text:
        return text

    def replacer(match):
        placeholder = match.group(1)
        return str(context.get(placeholder, match.group(0)))

    return re.sub(r"\{(\w+)\}", replacer, text)


def resolve(value: str, lang: str = "en", context: Optional[dict] = None) -> str:
    """Pipeline complet : i18n → placeholders."""
    return resolve_placeholders(i18n_resolve(value, lang), context)


def reload_cache():
    """Force le rechargement du cache i18n (utile en dev)."""
    _I18N_CACHE.clear()
