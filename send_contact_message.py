#!/usr/bin/env python3
"""
Script to send a message through the contact endpoint, the same way the site's form does.
Usage: python send_contact_message.py --name <name> --email <email> --message <message> [--endpoint <url>]
"""

import argparse
import asyncio
import sys
import os
from typing import Optional

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def send_contact_message(name: str, email: str, message: str, endpoint: Optional[str] = None) -> bool:
    """Submit one contact message and print the outcome."""
    from src.shared.contact.client import ContactFormClient, FormState

    form = ContactFormClient(endpoint=endpoint)
    form.fill(name=name, email=email, message=message)
    result = asyncio.run(form.submit())

    if form.state == FormState.SUCCESS:
        print(f"Message sent (id: {result.id or 'n/a'})")
        return True

    print(f"Error: {result.msg}")
    for field, errors in (result.errors or {}).items():
        for error in errors:
            print(f"  {field}: {error}")
    return False


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Send a message through the contact endpoint")
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--message", required=True)
    parser.add_argument("--endpoint", help="Full URL or path of the contact endpoint (default: CONTACT_ENDPOINT or /api/contact)")
    args = parser.parse_args()

    success = send_contact_message(args.name, args.email, args.message, args.endpoint)
    sys.exit(0 if success else 1)
