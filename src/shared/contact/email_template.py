"""
Builds the HTML notification sent for each contact form submission.
"""

from html import escape

FONT_STYLE = "font-family: system-ui, Arial, sans-serif; line-height: 1.6"
PARAGRAPH_STYLE = "margin: 0 0 8px"


def split_message_lines(message: str) -> list:
    """Split a message into lines, treating \\r\\n and \\n alike."""
    return message.replace("\r\n", "\n").split("\n")


def render_contact_email(name: str, email: str, message: str) -> str:
    """
    Renders the notification document for a validated submission.
    Each message line becomes its own paragraph; all values are escaped
    so user input is always literal text.
    """
    paragraphs = "".join(
        f'<p style="{PARAGRAPH_STYLE}">{escape(line)}</p>'
        for line in split_message_lines(message)
    )
    return (
        f'<div style="{FONT_STYLE}">'
        f'<h2 style="{PARAGRAPH_STYLE}">New message from your portfolio</h2>'
        f'<p style="{PARAGRAPH_STYLE}"><strong>Name:</strong> {escape(name)}</p>'
        f'<p style="{PARAGRAPH_STYLE}"><strong>Email:</strong> {escape(email)}</p>'
        f'<hr style="margin: 16px 0" />'
        f"<div>{paragraphs}</div>"
        f"</div>"
    )
