"""
Client side of the contact form.

Holds the form values, applies the honeypot check, posts the submission to
the contact endpoint and tracks which state the form should display.
"""

import logging
import os
from enum import Enum
from typing import Dict, Optional

import httpx

from src.shared.contact.schemas import ContactResponse, read_contact_response

DEFAULT_ENDPOINT = "/api/contact"
DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_SECONDS = 15.0

HONEYPOT_FIELD = "company"  # Hidden from humans, bots tend to fill it
SUBMITTED_FIELDS = ("name", "email", "message")

SPAM_MESSAGE = "Spam detected."
NETWORK_FAILURE_MESSAGE = "Sending failed. Please try again later."
CHECK_FIELDS_MESSAGE = "Please check the form fields."
GENERIC_FAILURE_MESSAGE = "Your message could not be sent."


class FormState(str, Enum):
    """What the contact form is currently showing."""
    IDLE = "idle"
    SENDING = "sending"
    SUCCESS = "success"
    ERROR = "error"


class ContactFormClient:
    """
    Submits the contact form to the contact endpoint.

    Once a submission succeeds the form stays in the success state for the
    lifetime of the instance; create a new client to start over.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.endpoint = endpoint or os.environ.get("CONTACT_ENDPOINT") or DEFAULT_ENDPOINT
        self.base_url = base_url or os.environ.get("CONTACT_BASE_URL") or DEFAULT_BASE_URL
        self.transport = transport
        self.timeout = timeout

        self.fields: Dict[str, str] = {}
        self.clear()
        self.state = FormState.IDLE
        self.sending = False
        self.result: Optional[ContactResponse] = None

    @property
    def sent(self) -> bool:
        return self.state == FormState.SUCCESS

    def fill(self, **values: str) -> None:
        """Set form field values (name, email, message or the honeypot)."""
        for key, value in values.items():
            if key not in self.fields:
                raise KeyError(f"Unknown form field: {key}")
            self.fields[key] = "" if value is None else str(value)

    def clear(self) -> None:
        self.fields = {name: "" for name in SUBMITTED_FIELDS + (HONEYPOT_FIELD,)}

    def _fail(self, msg: str, errors=None) -> ContactResponse:
        self.result = ContactResponse(ok=False, msg=msg, errors=errors)
        self.state = FormState.ERROR
        return self.result

    async def submit(self) -> Optional[ContactResponse]:
        """
        Submit the current form values.

        Returns the result to display, or None if a submission is already in
        flight. After a success the stored result is returned unchanged.
        """
        if self.sending:
            return None
        if self.sent:
            return self.result

        self.sending = True
        self.state = FormState.SENDING
        self.result = None
        try:
            if self.fields[HONEYPOT_FIELD].strip():
                logging.info("Contact form submission dropped by honeypot")
                return self._fail(SPAM_MESSAGE)

            payload = {name: self.fields[name] for name in SUBMITTED_FIELDS}

            try:
                async with httpx.AsyncClient(
                    base_url=self.base_url,
                    transport=self.transport,
                    timeout=self.timeout,
                ) as client:
                    response = await client.post(self.endpoint, json=payload)
            except httpx.HTTPError as e:
                logging.warning(f"Contact form request failed: {str(e)}")
                return self._fail(NETWORK_FAILURE_MESSAGE)

            try:
                body = response.json()
            except ValueError:
                body = None
            if not isinstance(body, dict):
                logging.warning(f"Unreadable contact response (status {response.status_code})")
                return self._fail(NETWORK_FAILURE_MESSAGE)
            data = read_contact_response(body)

            if not response.is_success or not data.ok:
                msg = data.msg or (CHECK_FIELDS_MESSAGE if data.errors else GENERIC_FAILURE_MESSAGE)
                return self._fail(msg, errors=data.errors)

            self.clear()
            self.state = FormState.SUCCESS
            self.result = ContactResponse(ok=True, id=data.id)
            return self.result
        finally:
            self.sending = False
