"""
Configuration — lue depuis l'environnement (os.getenv), figée dans un Settings.

Variables :
  UPDATE_PHP_DEFAULT_MINIMUM_VERSION  version minimale par défaut du bloc ("5.3")
  UPDATE_PHP_VERSION_PARAM            paramètre de requête portant la version ("php_version")
  UPDATE_PHP_DEFAULT_LANG             langue des libellés éditeur ("en")
  UPDATE_PHP_AUTOESCAPE               échappement HTML du rendu ("1")
  UPDATE_PHP_LOG_LEVEL                niveau de log ("INFO")
"""
import os

from pydantic import BaseModel, ConfigDict

_FALSY = {"0", "false", "no", "off", ""}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_minimum_version: str = "5.3"
    version_param: str = "php_version"
    default_lang: str = "en"
    autoescape: bool = True
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Construit un Settings à partir des variables d'environnement."""
    return Settings(
        default_minimum_version=os.getenv("UPDATE_PHP_DEFAULT_MINIMUM_VERSION", "5.3"),
        version_param=os.getenv("UPDATE_PHP_VERSION_PARAM", "php_version"),
        default_lang=os.getenv("UPDATE_PHP_DEFAULT_LANG", "en"),
        autoescape=os.getenv("UPDATE_PHP_AUTOESCAPE", "1").strip().lower() not in _FALSY,
        log_level=os.getenv("UPDATE_PHP_LOG_LEVEL", "INFO").upper(),
    )
