"""Pydantic schemas for contact API."""

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator
from typing import Any, Dict, List, Optional

# Human-readable messages for the rule each field enforces
FIELD_RULE_MESSAGES = {
    "name": "Please enter your name (min. 2 characters)",
    "email": "Invalid email address",
    "message": "Message is too short (min. 10 characters)",
}


class ContactRequest(BaseModel):
    """Schema for contact form submission."""
    name: str = Field(..., min_length=2, description="Your name")
    email: EmailStr = Field(..., description="Your email address")
    message: str = Field(..., min_length=10, description="Your message (at least 10 characters)")

    @field_validator("email", mode="before")
    @classmethod
    def validate_email_syntax(cls, v):
        """Accept a bare address only, not the "Name <addr>" display form."""
        if isinstance(v, str) and ("<" in v or ">" in v or any(ch.isspace() for ch in v)):
            raise ValueError("Email must be a bare address")
        return v


class ContactResponse(BaseModel):
    """Schema for contact form response."""
    ok: bool
    msg: Optional[str] = None
    errors: Optional[Dict[str, List[str]]] = None  # Only on validation failure
    id: Optional[str] = None  # Provider-assigned message id

    def to_payload(self) -> dict:
        """Serialize for the wire, leaving out unset optional fields."""
        return self.model_dump(exclude_none=True)


def flatten_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """
    Group validation errors by field name.

    Rule violations use the friendly message for the field; missing fields
    and wrong types keep pydantic's own wording. Fields that passed are
    absent from the result.
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error.get("loc") else "__root__"
        if error["type"] in ("missing", "string_type"):
            text = error["msg"]
        else:
            text = FIELD_RULE_MESSAGES.get(field, error["msg"])
        messages = errors.setdefault(field, [])
        if text not in messages:
            messages.append(text)
    return errors


def read_contact_response(body: Dict[str, Any]) -> ContactResponse:
    """
    Read a JSON object returned by the contact endpoint.

    Tolerates bodies that are not our own shape (e.g. FastAPI's
    {"detail": ...} for 404/405): anything other than ok=true is a failure,
    and msg/errors/id are kept only when usable.
    """
    msg = body.get("msg")
    raw_errors = body.get("errors")
    errors = None
    if isinstance(raw_errors, dict) and raw_errors:
        errors = {
            str(field): [str(m) for m in messages] if isinstance(messages, list) else [str(messages)]
            for field, messages in raw_errors.items()
        }
    message_id = body.get("id")
    return ContactResponse(
        ok=body.get("ok") is True,
        msg=msg if isinstance(msg, str) and msg else None,
        errors=errors,
        id=str(message_id) if message_id is not None else None,
    )
