"""Tests i18n — résolution clés, passthrough, placeholders, catalogues."""
from update_php.core.i18n import (
    available_langs, i18n_resolve, load_catalog, reload_cache, resolve, resolve_placeholders,
)


def setup_function():
    reload_cache()


# ── i18n_resolve ─────────────────────────────────────────────────────────────

def test_passthrough_direct_text():
    assert i18n_resolve("Texte direct") == "Texte direct"


def test_passthrough_empty():
    assert i18n_resolve("") == ""


def test_resolve_existing_key():
    assert i18n_resolve("@editor.field.title", lang="en") == "Title"


def test_resolve_french_key():
    assert i18n_resolve("@editor.field.title", lang="fr") == "Titre"


def test_missing_key_returns_placeholder():
    assert i18n_resolve("@inexistant.cle", lang="en") == "[missing:inexistant.cle]"


def test_namespace_key_is_missing():
    assert i18n_resolve("@editor.field", lang="en").startswith("[missing:")


def test_unknown_lang_returns_missing():
    assert i18n_resolve("@editor.field.title", lang="zz").startswith("[missing:")


# ── resolve_placeholders / resolve ────────────────────────────────────────────

def test_placeholder_simple():
    assert resolve_placeholders("PHP {version}", {"version": "7.2"}) == "PHP 7.2"


def test_placeholder_missing_left_intact():
    assert resolve_placeholders("PHP {version}", {"other": "x"}) == "PHP {version}"


def test_placeholder_no_context():
    assert resolve_placeholders("PHP {version}", None) == "PHP {version}"


def test_resolve_pipeline():
    assert resolve("@block.title", lang="en") == "PHP Version Detection Content"
    assert resolve("Minimum {version}", context={"version": "5.6"}) == "Minimum 5.6"


# ── Catalogues ────────────────────────────────────────────────────────────────

def test_available_langs():
    assert {"en", "fr"} <= set(available_langs())


def test_load_catalog():
    catalog = load_catalog("en")
    assert catalog["editor"]["preview_toggle"]["label"] == "Preview Outdated Content"


def test_load_catalog_unknown_lang():
    assert load_catalog("zz") is None


def test_catalogs_have_same_keys():
    def keys(node, prefix=""):
        out = set()
        for k, v in node.items():
            path = f"{prefix}.{k}" if prefix else k
            out |= keys(v, path) if isinstance(v, dict) else {path}
        return out

    assert keys(load_catalog("en")) == keys(load_catalog("fr"))
