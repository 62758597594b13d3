# app/main.py
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import logging

from app.core.contacts import ContactStore
from app.core.db import close_client, get_collection, open_client
from app.core.errors import StartupError, StorageError, register_exception_handlers
from app.core.settings import Settings, settings as default_settings
from app.routers.contact import router as contact_router
from app.routers.health import router as health_router
from app.routers.message import router as message_router

log = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = None
    if app.state.contacts is None:
        cfg: Settings = app.state.settings
        client = await open_client(cfg)
    try:
        if client is not None:
            store = ContactStore(get_collection(client, cfg))
            try:
                await store.ensure_indexes()
            except StorageError as exc:
                log.error(f"[main] could not prepare contacts collection: {exc}")
                raise StartupError("could not prepare the contacts collection") from exc
            app.state.contacts = store
        log.info(f"[main] serving contacts from {app.state.contacts.database_name}.{app.state.contacts.collection_name}")
        yield
    finally:
        if client is not None:
            close_client(client)
            app.state.contacts = None
        log.info("[main] shutdown complete")


def _static_dir(cfg: Settings) -> Path:
    if cfg.static_dir:
        return Path(cfg.static_dir).resolve()
    proj_root = Path(__file__).resolve().parents[2]
    return proj_root / "public"


def create_app(settings: Optional[Settings] = None, store: Optional[ContactStore] = None) -> FastAPI:
    """Build the API; pass ``store`` to skip connecting to MongoDB."""
    cfg = settings or default_settings

    app = FastAPI(title=cfg.api_title, lifespan=lifespan)
    app.state.settings = cfg
    app.state.contacts = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in cfg.cors_origins.split(",") if o.strip()],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Routers
    app.include_router(message_router)
    app.include_router(contact_router)
    app.include_router(health_router)

    # frontend; mounted last so API routes win
    static_dir = _static_dir(cfg)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
        log.info(f"[main] static_dir = {static_dir}")
    else:
        log.warning("[main] static directory not found at %s; frontend is not served.", static_dir)

    return app


app = create_app()
