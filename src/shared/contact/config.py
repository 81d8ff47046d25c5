"""Deployment configuration for the contact endpoint."""

import os
from typing import Optional

from pydantic import BaseModel

DEFAULT_RESEND_API_URL = "https://api.resend.com/emails"
DEFAULT_RESEND_TIMEOUT_SECONDS = 10.0

# Checked in this order; the first missing one is reported
REQUIRED_SETTINGS = ("RESEND_API_KEY", "CONTACT_TO", "CONTACT_FROM")


class ContactConfig(BaseModel):
    """Resolved email delivery settings."""
    resend_api_key: str
    contact_to: str
    contact_from: str
    resend_api_url: str = DEFAULT_RESEND_API_URL
    timeout_seconds: float = DEFAULT_RESEND_TIMEOUT_SECONDS


def _read(name: str) -> str:
    return os.environ.get(name, "").strip()


def find_missing_setting() -> Optional[str]:
    """Return the name of the first required setting that is not set."""
    for name in REQUIRED_SETTINGS:
        if not _read(name):
            return name
    return None


def get_timeout_seconds() -> float:
    raw = _read("RESEND_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_RESEND_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"RESEND_TIMEOUT_SECONDS must be a number, got {raw!r}")
    if timeout <= 0:
        raise ValueError("RESEND_TIMEOUT_SECONDS must be positive")
    return timeout


def load_contact_config() -> ContactConfig:
    """
    Read contact settings from the environment.

    Values are read on every call so a changed environment takes effect
    without a restart.

    Raises:
        KeyError naming the missing setting if a required value is absent
    """
    missing = find_missing_setting()
    if missing:
        raise KeyError(missing)

    return ContactConfig(
        resend_api_key=_read("RESEND_API_KEY"),
        contact_to=_read("CONTACT_TO"),
        contact_from=_read("CONTACT_FROM"),
        resend_api_url=_read("RESEND_API_URL") or DEFAULT_RESEND_API_URL,
        timeout_seconds=get_timeout_seconds(),
    )
