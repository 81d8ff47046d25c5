"""Minimal async client for the Resend transactional email API."""

import logging
from typing import Any, Dict, Optional

import httpx

from src.shared.contact.config import DEFAULT_RESEND_API_URL, DEFAULT_RESEND_TIMEOUT_SECONDS


class ResendError(Exception):
    """Raised when Resend rejects a message or cannot be reached."""

    def __init__(self, detail: Dict[str, Any]):
        self.detail = detail
        super().__init__(detail.get("message") or "unknown Resend error")


def _error_detail(response: httpx.Response) -> Dict[str, Any]:
    """Extract Resend's error body, falling back to the raw text."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        return body
    return {
        "name": "application_error",
        "message": response.text or response.reason_phrase,
        "statusCode": response.status_code,
    }


async def send_email(
    api_key: str,
    sender: str,
    to: str,
    subject: str,
    html: str,
    reply_to: Optional[str] = None,
    api_url: str = DEFAULT_RESEND_API_URL,
    timeout: float = DEFAULT_RESEND_TIMEOUT_SECONDS,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[str]:
    """
    Send one email through Resend.

    Args:
        api_key: Resend API key
        sender: From address
        to: Destination address
        subject: Subject line
        html: Rendered HTML body
        reply_to: Optional Reply-To address
        api_url: Resend emails endpoint
        timeout: Seconds before the request is abandoned
        client: Optional shared httpx client (mainly for tests)

    Returns:
        The id Resend assigned to the message, or None if it returned none

    Raises:
        ResendError if Resend returns an error or the request fails
    """
    payload: Dict[str, Any] = {
        "from": sender,
        "to": [to],
        "subject": subject,
        "html": html,
    }
    if reply_to:
        payload["reply_to"] = reply_to

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
    }

    try:
        if client is None:
            async with httpx.AsyncClient() as owned_client:
                response = await owned_client.post(api_url, json=payload, headers=headers, timeout=timeout)
        else:
            response = await client.post(api_url, json=payload, headers=headers, timeout=timeout)
    except httpx.HTTPError as e:
        logging.error(f"Resend request failed: {str(e)}")
        raise ResendError({
            "name": "application_error",
            "message": f"Unable to reach Resend: {str(e) or type(e).__name__}",
        }) from e

    if not response.is_success:
        detail = _error_detail(response)
        logging.error(f"Resend API error: {response.status_code} {detail.get('message')}")
        raise ResendError(detail)

    try:
        data = response.json()
    except ValueError:
        data = None

    message_id = data.get("id") if isinstance(data, dict) else None
    return str(message_id) if message_id is not None else None
