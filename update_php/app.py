"""
UPDATE-PHP — FastAPI app
Démarrer : uvicorn update_php.app:app --reload --port 8001
"""
import logging
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .bootstrap import build_plugin
from .config import Settings, load_settings
from .router import create_router

log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s — %(message)s")

    plugin = build_plugin(settings)
    app = FastAPI(title="Update PHP — blocs", version=__version__, docs_url="/docs")
    app.include_router(create_router(plugin))
    app.state.plugin = plugin

    @app.get("/health")
    def health():
        return {"status": "ok", "blocks": plugin.registry.names()}

    log.info("App prête (%d bloc(s))", len(plugin.registry.names()))
    return app


app = create_app()
