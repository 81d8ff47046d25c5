"""Contact route that relays portfolio messages by email."""

import json
import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.shared.contact.config import find_missing_setting, load_contact_config
from src.shared.contact.email_template import render_contact_email
from src.shared.contact.resend_client import ResendError, send_email
from src.shared.contact.schemas import ContactRequest, ContactResponse, flatten_errors

router = APIRouter(prefix="/api/contact", tags=["contact"])


def _respond(status_code: int, result: ContactResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=result.to_payload())


def build_subject(name: str) -> str:
    """Subject line for the notification email."""
    return f"New portfolio message from {name}"


@router.post("", response_model=ContactResponse, status_code=status.HTTP_200_OK)
async def submit_contact_form(request: Request):
    """
    Validate a contact form submission and relay it through Resend.

    Steps:
    - Parse the JSON body (400 if it is not a JSON object)
    - Validate name, email and message (400 with per-field errors)
    - Check RESEND_API_KEY, CONTACT_TO and CONTACT_FROM (500 naming the missing one)
    - Render the notification and send it once, without retries
    - 500 with the provider detail if Resend fails, 200 with its id otherwise
    """
    try:
        raw_body = await request.body()
        try:
            payload = json.loads(raw_body)
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            return _respond(
                status.HTTP_400_BAD_REQUEST,
                ContactResponse(ok=False, msg="invalid JSON")
            )

        try:
            contact_data = ContactRequest.model_validate(payload)
        except ValidationError as e:
            field_errors = flatten_errors(e)
            logging.warning(f"Contact form rejected, invalid fields: {sorted(field_errors)}")
            return _respond(
                status.HTTP_400_BAD_REQUEST,
                ContactResponse(ok=False, msg="validation failed", errors=field_errors)
            )

        # Configuration is checked only after the payload is known to be valid
        missing = find_missing_setting()
        if missing:
            logging.error(f"Contact form cannot be sent: {missing} is not configured")
            return _respond(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                ContactResponse(ok=False, msg=f"missing {missing}")
            )
        config = load_contact_config()

        html = render_contact_email(
            name=contact_data.name,
            email=contact_data.email,
            message=contact_data.message,
        )

        try:
            message_id = await send_email(
                api_key=config.resend_api_key,
                sender=config.contact_from,
                to=config.contact_to,
                subject=build_subject(contact_data.name),
                html=html,
                reply_to=contact_data.email,
                api_url=config.resend_api_url,
                timeout=config.timeout_seconds,
            )
        except ResendError as e:
            logging.error(f"Failed to send contact form email: {e.detail}")
            return _respond(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                ContactResponse(ok=False, msg=f"Resend error: {json.dumps(e.detail)}")
            )

        logging.info(f"Contact form email sent (id={message_id})")
        return _respond(status.HTTP_200_OK, ContactResponse(ok=True, id=message_id))

    except Exception as e:
        logging.error(f"Unexpected error while handling contact form: {str(e)}", exc_info=True)
        return _respond(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ContactResponse(ok=False, msg=f"internal error: {str(e) or type(e).__name__}")
        )
