# app/routers/health.py
from fastapi import APIRouter, Depends

from app.core.contacts import ContactStore
from app.dependencies import get_contact_store

router = APIRouter(prefix="/health", tags=["health"])

@router.get("")
async def health_root():
    return {"status": "ok"}

@router.get("/db")
async def health_db(store: ContactStore = Depends(get_contact_store)):
    await store.ping()
    return {
        "ok": True,
        "database": store.database_name,
        "collection": store.collection_name,
    }
