import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends

from app.core.contacts import ContactStore
from app.dependencies import get_contact_store
from app.schemas.contact import Contact, ContactCreated, ContactIn

log = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/contact", response_model=ContactCreated, status_code=201)
async def submit_contact(
    payload: Any = Body(default=None),
    store: ContactStore = Depends(get_contact_store),
):
    data = ContactIn.from_payload(payload)
    contact = await store.create(data)
    log.info(f"[contact] saved contact {contact.id}")
    return ContactCreated(contact=contact)


@router.get("/contacts", response_model=List[Contact])
async def list_contacts(store: ContactStore = Depends(get_contact_store)):
    contacts = await store.list_recent()
    log.info(f"[contact] retrieved {len(contacts)} contacts")
    return contacts
