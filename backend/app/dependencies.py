# backend/app/dependencies.py
from fastapi import Request

from app.core.contacts import ContactStore
from app.core.errors import StorageError


def get_contact_store(request: Request) -> ContactStore:
    store = getattr(request.app.state, "contacts", None)
    if store is None:
        # Lifespan never ran or failed to connect
        raise StorageError("contact store is not initialised")
    return store
