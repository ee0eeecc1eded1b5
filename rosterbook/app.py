"""FastAPI application serving one roster file."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from rosterbook.core.config import Settings, get_settings
from rosterbook.core.logging import configure_logging
from rosterbook.repositories.json_storage import JsonRosterStorage
from rosterbook.repositories.prefs_storage import resolve_roster_path
from rosterbook.routers import persons as persons_router
from rosterbook.services.roster_service import RosterService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Factory compatible with ``uvicorn --factory rosterbook.app:create_app``."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    roster_path = resolve_roster_path(settings.prefs_file_path, settings.roster_file_path)
    service = RosterService(JsonRosterStorage(roster_path))
    service.load_or_init()
    logger.info("Serving roster %s (%d persons, env=%s)", roster_path, len(service.roster), settings.app_env)

    app = FastAPI(title="Rosterbook API")
    app.state.roster_service = service
    app.include_router(persons_router.router)

    @app.get("/health")
    def health():
        return {"ok": True, "persons": len(service.roster)}

    return app
