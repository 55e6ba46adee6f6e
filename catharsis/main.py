import logging
import pathlib
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from catharsis import load_config
from catharsis.routers import daily
from catharsis.services.ticket_store import TicketStore

logging.basicConfig(level=load_config.log_level)
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def create_app(
    database_url: Optional[str] = None,
    static_dir: Optional[str] = None,
    reset_requires_confirmation: Optional[bool] = None,
) -> FastAPI:
    """Build the application. The ticket store lives as long as the app does.

    Args:
        database_url (Optional[str]): Defaults to CATHARSIS_DATABASE_URL
        static_dir (Optional[str]): Built front end to serve at "/", defaults to CATHARSIS_STATIC_DIR
        reset_requires_confirmation (Optional[bool]): Require {"confirm": true} on reset,
            defaults to CATHARSIS_RESET_REQUIRES_CONFIRMATION
    """
    database_url = database_url or load_config.database_url
    static_dir = static_dir or load_config.static_dir
    if reset_requires_confirmation is None:
        reset_requires_confirmation = load_config.reset_requires_confirmation

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = TicketStore(database_url)
        await store.open()
        app.state.store = store
        try:
            yield
        finally:
            await store.close()
            logging.info("Stop Server")

    app = FastAPI(title="Catharsis", lifespan=lifespan)
    app.state.reset_requires_confirmation = reset_requires_confirmation
    app.include_router(daily.daily_router)

    # Mounted last so /api routes take precedence.
    if static_dir:
        if pathlib.Path(static_dir).is_dir():
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logging.warning(f"Static directory not found, not serving front end: {static_dir}")
    return app


app = create_app()
