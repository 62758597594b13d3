from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ValidationError


class ContactIn(BaseModel):
    """Submitted form fields; presence is the only check."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    message: str = Field(min_length=1)

    @classmethod
    def from_payload(cls, payload: Any) -> "ContactIn":
        if not isinstance(payload, dict):
            raise ValidationError()
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError() from exc


class Contact(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    message: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Contact":
        # Stored documents are not guaranteed to carry every field
        created_at = doc.get("createdAt")
        if not isinstance(created_at, datetime):
            created_at = None
        return cls(
            id=str(doc["_id"]),
            name=str(doc.get("name") or ""),
            email=str(doc.get("email") or ""),
            message=str(doc.get("message") or ""),
            created_at=created_at,
        )


class ContactCreated(BaseModel):
    success: bool = True
    contact: Contact
